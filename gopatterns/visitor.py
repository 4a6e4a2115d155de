"""Visitor: operations on shapes kept outside the shape classes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Visitor(ABC):
    """An operation with one method per kind of shape."""

    @abstractmethod
    def visit_square(self, square: Square) -> None:
        """Apply the operation to a square."""

    @abstractmethod
    def visit_circle(self, circle: Circle) -> None:
        """Apply the operation to a circle."""

    @abstractmethod
    def visit_rectangle(self, rectangle: Rectangle) -> None:
        """Apply the operation to a rectangle."""


class Shape(ABC):
    """A shape that dispatches to the matching visitor method."""

    kind: str

    @abstractmethod
    def accept(self, visitor: Visitor) -> None:
        """Let ``visitor`` operate on this shape."""


@dataclass
class Square(Shape):
    side: int
    kind = "Square"

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_square(self)


@dataclass
class Circle(Shape):
    radius: int
    kind = "Circle"

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_circle(self)


@dataclass
class Rectangle(Shape):
    l: int  # noqa: E741
    b: int
    kind = "rectangle"

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_rectangle(self)


@dataclass
class AreaCalculator(Visitor):
    """Calculates the area of the last shape it visited."""

    area: float = 0

    def visit_square(self, square: Square) -> None:
        print("Calculating area for square")
        self.area = square.side * square.side

    def visit_circle(self, circle: Circle) -> None:
        print("Calculating area for circle")
        self.area = math.pi * circle.radius * circle.radius

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        print("Calculating area for rectangle")
        self.area = rectangle.l * rectangle.b


@dataclass
class MiddleCoordinates(Visitor):
    """Calculates the middle point of the last shape it visited.

    Each shape is taken to have its bounding box's lower-left corner at the origin.
    """

    x: float = 0
    y: float = 0

    def visit_square(self, square: Square) -> None:
        print("Calculating middle point coordinates for square")
        self.x = self.y = square.side / 2

    def visit_circle(self, circle: Circle) -> None:
        print("Calculating middle point coordinates for circle")
        self.x = self.y = circle.radius

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        print("Calculating middle point coordinates for rectangle")
        self.x = rectangle.l / 2
        self.y = rectangle.b / 2


def main(argv: list[str] | None = None) -> None:
    shapes: list[Shape] = [Square(side=2), Circle(radius=3), Rectangle(l=2, b=3)]
    area_calculator = AreaCalculator()
    for shape in shapes:
        shape.accept(area_calculator)
    print()
    middle = MiddleCoordinates()
    for shape in shapes:
        shape.accept(middle)


if __name__ == "__main__":
    main()