"""Adapter: plugging a Lightning connector into a USB-only machine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Computer(ABC):
    """A machine with a Lightning port."""

    @abstractmethod
    def insert_into_lightning_port(self) -> None:
        """Accept a Lightning connector."""


class Client:
    """Someone holding a Lightning connector."""

    def insert_lightning_connector_into_computer(self, computer: Computer) -> None:
        print("Client inserts Lightning connector into computer.")
        computer.insert_into_lightning_port()


@dataclass
class Mac(Computer):
    """A machine with a native Lightning port."""

    lightning_connected: bool = False

    def insert_into_lightning_port(self) -> None:
        self.lightning_connected = True
        print("Lightning connector is plugged into mac machine.")


@dataclass
class Windows:
    """A machine that only has a USB port."""

    usb_connected: bool = False

    def insert_into_usb_port(self) -> None:
        self.usb_connected = True
        print("USB connector is plugged into windows machine.")


@dataclass
class WindowsAdapter(Computer):
    """Makes a Windows machine accept a Lightning connector."""

    window_machine: Windows = field(default_factory=Windows)

    def insert_into_lightning_port(self) -> None:
        print("Adapter converts Lightning signal to USB.")
        self.window_machine.insert_into_usb_port()


def main(argv: list[str] | None = None) -> None:
    client = Client()
    client.insert_lightning_connector_into_computer(Mac())
    client.insert_lightning_connector_into_computer(WindowsAdapter(Windows()))


if __name__ == "__main__":
    main()