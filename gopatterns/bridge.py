"""Bridge: computers and printers vary independently."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Printer(ABC):
    """Something that can print a file."""

    @abstractmethod
    def print_file(self) -> None:
        """Print a file."""


@dataclass
class Epson(Printer):
    """An EPSON printer that counts the files it has printed."""

    files_printed: int = 0

    def print_file(self) -> None:
        self.files_printed += 1
        print("Printing by a EPSON Printer")


@dataclass
class Hp(Printer):
    """An HP printer that counts the files it has printed."""

    files_printed: int = 0

    def print_file(self) -> None:
        self.files_printed += 1
        print("Printing by a HP Printer")


class Computer:
    """A computer that sends print requests to its current printer."""

    name = "computer"

    def __init__(self, printer: Printer | None = None) -> None:
        self.printer = printer

    def print(self) -> None:
        """Send a print request to the attached printer."""
        if self.printer is None:
            raise RuntimeError("no printer attached")
        print(f"Print request for {self.name}")
        self.printer.print_file()


class Mac(Computer):
    name = "mac"


class Windows(Computer):
    name = "windows"


def main(argv: list[str] | None = None) -> None:
    hp = Hp()
    epson = Epson()
    for computer in (Mac(), Windows()):
        for printer in (hp, epson):
            computer.printer = printer
            computer.print()
            print()


if __name__ == "__main__":
    main()