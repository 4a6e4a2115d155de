"""Factory: make guns by type name."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Gun:
    """A gun with a name and a power rating."""

    name: str
    power: int


@dataclass
class Ak47(Gun):
    name: str = "AK47 gun"
    power: int = 4


@dataclass
class Musket(Gun):
    name: str = "Musket gun"
    power: int = 1


_GUNS: dict[str, type[Gun]] = {"ak47": Ak47, "musket": Musket}


def get_gun(gun_type: str) -> Gun:
    """Return a new gun of ``gun_type``; raise ValueError if unknown."""
    try:
        return _GUNS[gun_type]()
    except KeyError:
        raise ValueError("Wrong gun type passed") from None


def print_details(gun: Gun) -> None:
    print(f"Gun: {gun.name}")
    print(f"Power: {gun.power}")


def main(argv: list[str] | None = None) -> None:
    print_details(get_gun("ak47"))
    print_details(get_gun("musket"))


if __name__ == "__main__":
    main()