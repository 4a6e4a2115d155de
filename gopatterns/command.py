"""Command: buttons trigger commands that act on a device."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Device(ABC):
    """Something that can be switched on and off."""

    @abstractmethod
    def on(self) -> None:
        """Switch the device on."""

    @abstractmethod
    def off(self) -> None:
        """Switch the device off."""


class Tv(Device):
    """A television that remembers whether it is running."""

    def __init__(self) -> None:
        self.is_running = False

    def on(self) -> None:
        self.is_running = True
        print("Turning tv on")

    def off(self) -> None:
        self.is_running = False
        print("Turning tv off")


class Command(ABC):
    """An action that can be executed."""

    @abstractmethod
    def execute(self) -> None:
        """Carry out the action."""


@dataclass
class OnCommand(Command):
    device: Device

    def execute(self) -> None:
        self.device.on()


@dataclass
class OffCommand(Command):
    device: Device

    def execute(self) -> None:
        self.device.off()


@dataclass
class Button:
    """A button bound to a command."""

    command: Command

    def press(self) -> None:
        self.command.execute()


def main(argv: list[str] | None = None) -> None:
    tv = Tv()
    Button(OnCommand(tv)).press()
    Button(OffCommand(tv)).press()


if __name__ == "__main__":
    main()