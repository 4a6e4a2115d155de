import pytest

from gopatterns.flyweight import (
    COUNTER_TERRORIST_DRESS_TYPE,
    TERRORIST_DRESS_TYPE,
    CounterTerroristDress,
    DressFactory,
    Game,
    Player,
    TerroristDress,
    get_dress_factory,
    main,
)


def test_terrorist_dress_color():
    dress = DressFactory().get_dress_by_type("tDress")
    assert isinstance(dress, TerroristDress)
    assert dress.color == "red"


def test_counter_terrorist_dress_color():
    dress = DressFactory().get_dress_by_type("ctDress")
    assert isinstance(dress, CounterTerroristDress)
    assert dress.color == "green"


def test_dress_is_shared():
    factory = DressFactory()
    first = factory.get_dress_by_type(TERRORIST_DRESS_TYPE)
    second = factory.get_dress_by_type(TERRORIST_DRESS_TYPE)
    assert id(first) == id(second)
    assert second.color == "red"
    assert len(factory.dress_map) == 1


def test_unknown_dress_type():
    factory = DressFactory()
    with pytest.raises(ValueError, match="Wrong dress type passed"):
        factory.get_dress_by_type("nope")
    assert factory.dress_map == {}


def test_global_factory_is_single():
    dress = get_dress_factory().get_dress_by_type(COUNTER_TERRORIST_DRESS_TYPE)
    stored = get_dress_factory().dress_map[COUNTER_TERRORIST_DRESS_TYPE]
    assert id(stored) == id(dress)
    assert stored.color == "green"


def test_game_players_share_dresses():
    factory = DressFactory()
    game = Game(factory=factory)
    players = [game.add_terrorist(TERRORIST_DRESS_TYPE) for _ in range(4)]
    cts = [game.add_counter_terrorist(COUNTER_TERRORIST_DRESS_TYPE) for _ in range(3)]
    assert game.terrorists == players
    assert game.counter_terrorists == cts
    assert len({id(p.dress) for p in players}) == 1
    assert len({id(p.dress) for p in cts}) == 1
    assert set(factory.dress_map) == {TERRORIST_DRESS_TYPE, COUNTER_TERRORIST_DRESS_TYPE}
    assert all(p.player_type == "T" for p in players)
    assert all(p.player_type == "CT" for p in cts)


def test_player_new_location():
    player = Player("T", TerroristDress())
    player.new_location(3, 8)
    assert (player.lat, player.long) == (3, 8)


def test_main_prints_both_dresses(capsys):
    main()
    out = capsys.readouterr().out
    assert "DressColorType: tDress\nDressColor: red\n" in out
    assert "DressColorType: ctDress\nDressColor: green\n" in out