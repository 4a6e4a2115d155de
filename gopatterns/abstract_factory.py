"""Abstract factory: brand factories that make matching shoes and shirts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Shoe:
    """A shoe carrying a brand logo and a size."""

    logo: str
    size: int


@dataclass
class Shirt:
    """A shirt carrying a brand logo and a size."""

    logo: str
    size: int


class AdidasShoe(Shoe):
    """Shoe made by the Adidas factory."""


class AdidasShirt(Shirt):
    """Shirt made by the Adidas factory."""


class NikeShoe(Shoe):
    """Shoe made by the Nike factory."""


class NikeShirt(Shirt):
    """Shirt made by the Nike factory."""


class SportsFactory(ABC):
    """Makes a family of related sports products."""

    @abstractmethod
    def make_shoe(self) -> Shoe:
        """Make a shoe of this brand."""

    @abstractmethod
    def make_shirt(self) -> Shirt:
        """Make a shirt of this brand."""


class Adidas(SportsFactory):
    """Factory for Adidas products."""

    def make_shoe(self) -> Shoe:
        return AdidasShoe(logo="adidas", size=14)

    def make_shirt(self) -> Shirt:
        return AdidasShirt(logo="adidas", size=14)


class Nike(SportsFactory):
    """Factory for Nike products."""

    def make_shoe(self) -> Shoe:
        return NikeShoe(logo="nike", size=14)

    def make_shirt(self) -> Shirt:
        return NikeShirt(logo="nike", size=14)


_FACTORIES: dict[str, type[SportsFactory]] = {"adidas": Adidas, "nike": Nike}


def get_sports_factory(brand: str) -> SportsFactory:
    """Return the factory for ``brand``; raise ValueError for an unknown brand."""
    try:
        return _FACTORIES[brand]()
    except KeyError:
        raise ValueError("Wrong brand type passed") from None


def print_details(item: Shoe | Shirt) -> None:
    """Print the logo and size of a product."""
    print(f"Logo: {item.logo}")
    print(f"Size: {item.size}")


def main(argv: list[str] | None = None) -> None:
    adidas = get_sports_factory("adidas")
    nike = get_sports_factory("nike")
    for item in (nike.make_shoe(), nike.make_shirt(), adidas.make_shoe(), adidas.make_shirt()):
        print_details(item)


if __name__ == "__main__":
    main()