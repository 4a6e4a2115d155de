"""Prototype: cloning files and folder trees."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Inode(ABC):
    """A node in a file tree that can be shown and cloned."""

    @abstractmethod
    def show(self, indentation: str) -> None:
        """Print this node with ``indentation`` in front."""

    @abstractmethod
    def clone(self) -> Inode:
        """Return a deep copy with ``_clone`` added to each name."""


@dataclass
class File(Inode):
    name: str

    def show(self, indentation: str) -> None:
        print(indentation + self.name)

    def clone(self) -> File:
        return File(self.name + "_clone")


@dataclass
class Folder(Inode):
    name: str
    children: list[Inode] = field(default_factory=list)

    def show(self, indentation: str) -> None:
        print(indentation + self.name)
        for child in self.children:
            child.show(indentation + indentation)

    def clone(self) -> Folder:
        return Folder(self.name + "_clone", [child.clone() for child in self.children])


def main(argv: list[str] | None = None) -> None:
    folder1 = Folder("Folder1", [File("File1")])
    folder2 = Folder("Folder2", [folder1, File("File2"), File("File3")])
    print("\nPrinting hierarchy for Folder2")
    folder2.show("  ")

    clone = folder2.clone()
    print("\nPrinting hierarchy for clone Folder")
    clone.show("  ")


if __name__ == "__main__":
    main()