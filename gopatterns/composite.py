"""Composite: searching files and nested folders alike."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Component(ABC):
    """A node in a file tree that can be searched."""

    @abstractmethod
    def search(self, keyword: str) -> None:
        """Search this node for ``keyword``."""


@dataclass
class File(Component):
    name: str

    def search(self, keyword: str) -> None:
        print(f"Searching for keyword {keyword} in file {self.name}")


@dataclass
class Folder(Component):
    name: str
    components: list[Component] = field(default_factory=list)

    def search(self, keyword: str) -> None:
        print(f"Serching recursively for keyword {keyword} in folder {self.name}")
        for component in self.components:
            component.search(keyword)

    def add(self, component: Component) -> None:
        self.components.append(component)


def main(argv: list[str] | None = None) -> None:
    folder1 = Folder("Folder1")
    folder1.add(File("File1"))

    folder2 = Folder("Folder2")
    folder2.add(File("File2"))
    folder2.add(File("File3"))
    folder2.add(folder1)

    folder2.search("rose")


if __name__ == "__main__":
    main()