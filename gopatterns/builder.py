"""Builder: a director drives builders that assemble houses."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class House:
    """A finished house."""

    window_type: str = ""
    door_type: str = ""
    floor: int = 0


class HouseBuilder(ABC):
    """Assembles a house one part at a time."""

    def __init__(self) -> None:
        self.window_type = ""
        self.door_type = ""
        self.floor = 0

    @abstractmethod
    def add_windows(self) -> None:
        """Choose the windows."""

    @abstractmethod
    def add_door(self) -> None:
        """Choose the door."""

    @abstractmethod
    def add_floors(self) -> None:
        """Choose the number of floors."""

    def result(self) -> House:
        """Return the house built so far."""
        return House(window_type=self.window_type, door_type=self.door_type, floor=self.floor)


class NormalBuilder(HouseBuilder):
    def add_windows(self) -> None:
        self.window_type = "Wooden Window"

    def add_door(self) -> None:
        self.door_type = "Wooden Door"

    def add_floors(self) -> None:
        self.floor = 2


class IglooBuilder(HouseBuilder):
    def add_windows(self) -> None:
        self.window_type = "Snow Window"

    def add_door(self) -> None:
        self.door_type = "Snow Door"

    def add_floors(self) -> None:
        self.floor = 1


_BUILDERS: dict[str, type[HouseBuilder]] = {"normal": NormalBuilder, "igloo": IglooBuilder}


def get_builder(builder_type: str) -> HouseBuilder:
    """Return a new builder of the named type; raise ValueError if unknown."""
    try:
        return _BUILDERS[builder_type]()
    except KeyError:
        raise ValueError(f"unknown builder type: {builder_type!r}") from None


class Director:
    """Runs a builder through the steps of building a house."""

    def __init__(self, builder: HouseBuilder) -> None:
        self.builder = builder

    def build_house(self) -> House:
        self.builder.add_door()
        self.builder.add_windows()
        self.builder.add_floors()
        return self.builder.result()


def main(argv: list[str] | None = None) -> None:
    director = Director(get_builder("normal"))
    normal = director.build_house()
    print(f"Normal House Door Type: {normal.door_type}")
    print(f"Normal House Window Type: {normal.window_type}")
    print(f"Normal House Num Floor: {normal.floor}")

    director.builder = get_builder("igloo")
    igloo = director.build_house()
    print(f"\nIgloo House Door Type: {igloo.door_type}")
    print(f"Igloo House Window Type: {igloo.window_type}")
    print(f"Igloo House Num Floor: {igloo.floor}")


if __name__ == "__main__":
    main()