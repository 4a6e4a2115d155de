import pytest

from gopatterns.factory import Ak47, Musket, get_gun, main, print_details


def test_ak47():
    gun = get_gun("ak47")
    assert isinstance(gun, Ak47)
    assert (gun.name, gun.power) == ("AK47 gun", 4)


def test_musket():
    gun = get_gun("musket")
    assert isinstance(gun, Musket)
    assert (gun.name, gun.power) == ("Musket gun", 1)


def test_unknown_type():
    with pytest.raises(ValueError, match="Wrong gun type passed"):
        get_gun("bazooka")


def test_each_call_gives_new_gun():
    first = get_gun("ak47")
    second = get_gun("ak47")
    first.name = "renamed"
    first.power = 9
    assert second.name == "AK47 gun"
    assert second.power == 4


def test_print_details(capsys):
    print_details(get_gun("musket"))
    assert capsys.readouterr().out == "Gun: Musket gun\nPower: 1\n"


def test_main(capsys):
    main()
    assert capsys.readouterr().out.splitlines() == [
        "Gun: AK47 gun",
        "Power: 4",
        "Gun: Musket gun",
        "Power: 1",
    ]