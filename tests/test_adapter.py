import pytest

from gopatterns.adapter import Client, Computer, Mac, Windows, WindowsAdapter, main


def test_mac_takes_lightning(capsys):
    Client().insert_lightning_connector_into_computer(Mac())
    assert capsys.readouterr().out.splitlines() == [
        "Client inserts Lightning connector into computer.",
        "Lightning connector is plugged into mac machine.",
    ]


def test_adapter_forwards_to_usb(capsys):
    Client().insert_lightning_connector_into_computer(WindowsAdapter(Windows()))
    assert capsys.readouterr().out.splitlines() == [
        "Client inserts Lightning connector into computer.",
        "Adapter converts Lightning signal to USB.",
        "USB connector is plugged into windows machine.",
    ]


def test_computer_is_abstract():
    with pytest.raises(TypeError):
        Computer()


def test_main_output(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert lines[-1] == "USB connector is plugged into windows machine."