import pytest

from gopatterns.mediator import FreightTrain, Mediator, PassengerTrain, StationManager, main


def test_first_train_arrives():
    manager = StationManager()
    assert PassengerTrain(manager).arrive() is True
    assert manager.is_platform_free is False


def test_second_train_is_queued():
    manager = StationManager()
    PassengerTrain(manager).arrive()
    freight = FreightTrain(manager)
    assert freight.arrive() is False
    assert list(manager.train_queue) == [freight]


def test_departure_lets_queued_train_in():
    manager = StationManager()
    passenger = PassengerTrain(manager)
    freight = FreightTrain(manager)
    passenger.arrive()
    freight.arrive()
    passenger.depart()
    assert list(manager.train_queue) == []
    assert manager.is_platform_free is False


def test_departure_with_empty_queue_frees_platform():
    manager = StationManager()
    train = PassengerTrain(manager)
    train.arrive()
    train.depart()
    assert manager.is_platform_free is True


def test_queue_is_first_in_first_out(capsys):
    manager = StationManager()
    first = PassengerTrain(manager)
    first.arrive()
    waiting_freight = FreightTrain(manager)
    waiting_passenger = PassengerTrain(manager)
    waiting_freight.arrive()
    waiting_passenger.arrive()
    capsys.readouterr()
    first.depart()
    assert list(manager.train_queue) == [waiting_passenger]
    assert capsys.readouterr().out.splitlines() == [
        "PassengerTrain: Leaving",
        "FreightTrain: Arrival permitted",
        "FreightTrain: Arrived",
    ]


def test_mediator_is_abstract():
    with pytest.raises(TypeError):
        Mediator()


def test_main_output(capsys):
    main()
    assert capsys.readouterr().out.splitlines() == [
        "PassengerTrain: Arrived",
        "FreightTrain: Arrival blocked, waiting",
        "PassengerTrain: Leaving",
        "FreightTrain: Arrival permitted",
        "FreightTrain: Arrived",
    ]