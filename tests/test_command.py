import pytest

from gopatterns.command import Button, Command, OffCommand, OnCommand, Tv, main


def test_on_button_turns_tv_on(capsys):
    tv = Tv()
    Button(OnCommand(tv)).press()
    assert tv.is_running is True
    assert capsys.readouterr().out == "Turning tv on\n"


def test_off_button_turns_tv_off(capsys):
    tv = Tv()
    tv.on()
    capsys.readouterr()
    Button(OffCommand(tv)).press()
    assert tv.is_running is False
    assert capsys.readouterr().out == "Turning tv off\n"


def test_repeated_presses_keep_state():
    tv = Tv()
    button = Button(OnCommand(tv))
    button.press()
    button.press()
    assert tv.is_running is True


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


def test_main_output(capsys):
    main()
    assert capsys.readouterr().out.splitlines() == ["Turning tv on", "Turning tv off"]