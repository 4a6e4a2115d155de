import pytest

from gopatterns.iterator import User, UserCollection, main


@pytest.fixture
def users():
    return [User("a", 30), User("b", 20)]


def test_iterates_in_order(users):
    assert list(UserCollection(users)) == users


def test_iterable_more_than_once(users):
    collection = UserCollection(users)
    first = list(collection)
    second = list(collection)
    assert first == users
    assert second == users


def test_has_next_and_exhaustion(users):
    iterator = UserCollection(users).create_iterator()
    assert iterator.has_next()
    assert next(iterator) is users[0]
    assert iterator.has_next()
    assert next(iterator) is users[1]
    assert not iterator.has_next()
    with pytest.raises(StopIteration):
        next(iterator)


def test_empty_collection():
    iterator = UserCollection().create_iterator()
    assert not iterator.has_next()
    assert list(iterator) == []


def test_iterator_is_its_own_iterator(users):
    iterator = UserCollection(users).create_iterator()
    assert iter(iterator) is iterator


def test_main(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert all(line.startswith("User is ") for line in lines)
    assert "'a'" in lines[0] and "'b'" in lines[1]