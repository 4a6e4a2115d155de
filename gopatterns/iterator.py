"""Iterator: walking a collection of users."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class User:
    name: str
    age: int


class UserIterator:
    """Steps through a list of users once."""

    def __init__(self, users: list[User]) -> None:
        self._users = users
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._users)

    def __iter__(self) -> UserIterator:
        return self

    def __next__(self) -> User:
        if not self.has_next():
            raise StopIteration
        user = self._users[self._index]
        self._index += 1
        return user


@dataclass
class UserCollection:
    """A collection of users that hands out iterators."""

    users: list[User] = field(default_factory=list)

    def create_iterator(self) -> UserIterator:
        return UserIterator(self.users)

    def __iter__(self) -> Iterator[User]:
        return self.create_iterator()


def main(argv: list[str] | None = None) -> None:
    collection = UserCollection([User("a", 30), User("b", 20)])
    for user in collection:
        print(f"User is {user}")


if __name__ == "__main__":
    main()