import pytest

from gopatterns.decorator import CheeseTopping, Pizza, TomatoTopping, VeggieMania, main


def test_base_price():
    assert VeggieMania().price() == 15


def test_cheese_topping():
    assert CheeseTopping(VeggieMania()).price() == 25


def test_tomato_topping():
    assert TomatoTopping(VeggieMania()).price() == 22


def test_both_toppings():
    assert TomatoTopping(CheeseTopping(VeggieMania())).price() == 32


def test_topping_order_does_not_matter():
    a = TomatoTopping(CheeseTopping(VeggieMania())).price()
    b = CheeseTopping(TomatoTopping(VeggieMania())).price()
    assert a == b


def test_stacking_same_topping_increases_price():
    once = CheeseTopping(VeggieMania())
    twice = CheeseTopping(once)
    assert twice.price() > once.price() > VeggieMania().price()


def test_pizza_is_abstract():
    with pytest.raises(TypeError):
        Pizza()


def test_main_output(capsys):
    main()
    expected_price = TomatoTopping(CheeseTopping(VeggieMania())).price()
    out = capsys.readouterr().out
    assert out == f"Price of veggeMania with tomato and cheese topping is {expected_price}\n"