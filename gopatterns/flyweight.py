"""Flyweight: players share dress objects handed out by a factory."""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field

TERRORIST_DRESS_TYPE = "tDress"
COUNTER_TERRORIST_DRESS_TYPE = "ctDress"


class Dress(ABC):
    """A shared dress; only its colour is intrinsic state."""

    color: str

    def __repr__(self) -> str:
        return f"{type(self).__name__}(color={self.color!r})"


class TerroristDress(Dress):
    def __init__(self) -> None:
        self.color = "red"


class CounterTerroristDress(Dress):
    def __init__(self) -> None:
        self.color = "green"


_DRESS_TYPES: dict[str, type[Dress]] = {
    TERRORIST_DRESS_TYPE: TerroristDress,
    COUNTER_TERRORIST_DRESS_TYPE: CounterTerroristDress,
}


class DressFactory:
    """Creates each dress type once and hands out the shared instance."""

    def __init__(self) -> None:
        self.dress_map: dict[str, Dress] = {}

    def get_dress_by_type(self, dress_type: str) -> Dress:
        """Return the shared dress for ``dress_type``; raise ValueError if unknown."""
        if dress_type in self.dress_map:
            return self.dress_map[dress_type]
        try:
            dress = _DRESS_TYPES[dress_type]()
        except KeyError:
            raise ValueError("Wrong dress type passed") from None
        self.dress_map[dress_type] = dress
        return dress


_DRESS_FACTORY = DressFactory()


def get_dress_factory() -> DressFactory:
    """Return the process-wide dress factory."""
    return _DRESS_FACTORY


@dataclass
class Player:
    """A player: shared dress plus its own type and location."""

    player_type: str
    dress: Dress
    lat: int = 0
    long: int = 0

    def new_location(self, lat: int, long: int) -> None:
        self.lat = lat
        self.long = long


@dataclass
class Game:
    """Holds the players of both teams."""

    factory: DressFactory = field(default_factory=get_dress_factory)
    terrorists: list[Player] = field(default_factory=list)
    counter_terrorists: list[Player] = field(default_factory=list)

    def add_terrorist(self, dress_type: str) -> Player:
        player = Player("T", self.factory.get_dress_by_type(dress_type))
        self.terrorists.append(player)
        return player

    def add_counter_terrorist(self, dress_type: str) -> Player:
        player = Player("CT", self.factory.get_dress_by_type(dress_type))
        self.counter_terrorists.append(player)
        return player


def main(argv: list[str] | None = None) -> None:
    game = Game()
    for _ in range(4):
        game.add_terrorist(TERRORIST_DRESS_TYPE)
    for _ in range(3):
        game.add_counter_terrorist(COUNTER_TERRORIST_DRESS_TYPE)

    for dress_type, dress in get_dress_factory().dress_map.items():
        print(f"DressColorType: {dress_type}\nDressColor: {dress.color}")


if __name__ == "__main__":
    main()