"""Observer: customers are told when an item comes back in stock."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Observer(ABC):
    """Something that wants to hear about an item; identified by ``id``."""

    id: str

    @abstractmethod
    def update(self, item_name: str) -> None:
        """Receive news about ``item_name``."""


@dataclass
class Customer(Observer):
    id: str

    def update(self, item_name: str) -> None:
        print(f"Sending email to customer {self.id} for item {item_name}")


@dataclass
class Item:
    """An item whose observers are notified when it becomes available."""

    name: str
    observers: list[Observer] = field(default_factory=list)
    in_stock: bool = False

    def register(self, observer: Observer) -> None:
        self.observers.append(observer)

    def deregister(self, observer: Observer) -> None:
        """Remove the first observer with the same id; the last one takes its place."""
        for index, current in enumerate(self.observers):
            if current.id == observer.id:
                self.observers[index] = self.observers[-1]
                self.observers.pop()
                return

    def notify_all(self) -> None:
        for observer in self.observers:
            observer.update(self.name)

    def update_availability(self) -> None:
        print(f"Item {self.name} is now in stock")
        self.in_stock = True
        self.notify_all()


def main(argv: list[str] | None = None) -> None:
    shirt = Item("Nike Shirt")
    shirt.register(Customer("abc@example.com"))
    shirt.register(Customer("xyz@example.com"))
    shirt.update_availability()


if __name__ == "__main__":
    main()