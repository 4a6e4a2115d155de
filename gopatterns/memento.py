"""Memento: saving and restoring an originator's state."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Memento:
    """A saved snapshot of an originator's state."""

    state: str


@dataclass
class Originator:
    """Holds a state that can be saved to and restored from mementos."""

    state: str

    def create_memento(self) -> Memento:
        """Return a snapshot of the current state."""
        return Memento(self.state)

    def restore_memento(self, memento: Memento) -> None:
        """Return to the state saved in ``memento``."""
        self.state = memento.state


@dataclass
class Caretaker:
    """Keeps mementos in the order they were added."""

    mementos: list[Memento] = field(default_factory=list)

    def add_memento(self, memento: Memento) -> None:
        self.mementos.append(memento)

    def __getitem__(self, index: int) -> Memento:
        return self.mementos[index]

    def __len__(self) -> int:
        return len(self.mementos)


def main(argv: list[str] | None = None) -> None:
    caretaker = Caretaker()
    originator = Originator("A")

    print(f"Originator Current State: {originator.state}")
    caretaker.add_memento(originator.create_memento())

    for state in ("B", "C"):
        originator.state = state
        print(f"Originator Current State: {originator.state}")
        caretaker.add_memento(originator.create_memento())

    for index in (1, 0):
        originator.restore_memento(caretaker[index])
        print(f"Restored to State: {originator.state}")


if __name__ == "__main__":
    main()