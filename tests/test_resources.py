import pytest

from stronghold.resources import Resources


def test_consume_then_gather_restores_food():
    res = Resources(100, 0, 0, 0)
    assert res.consume_food(40) is True
    assert res.food < 100
    res.gather_food(40)
    assert res.food == 100


def test_consume_food_shortfall_empties_store():
    res = Resources(10, 0, 0, 0)
    assert res.consume_food(11) is False
    assert res.food == 0


def test_consume_wood_shortfall_empties_store():
    res = Resources(0, 5, 0, 0)
    assert res.consume_wood(50) is False
    assert res.wood == 0


@pytest.mark.parametrize("attr", ["stone", "iron"])
def test_consume_stone_and_iron_shortfall_leaves_store(attr):
    res = Resources(0, 0, 20, 20)
    consume = getattr(res, f"consume_{attr}")
    assert consume(30) is False
    assert getattr(res, attr) == 20


@pytest.mark.parametrize("attr", ["food", "wood", "stone", "iron"])
def test_gather_and_consume_round_trip(attr):
    res = Resources(7, 7, 7, 7)
    getattr(res, f"gather_{attr}")(13)
    assert getattr(res, f"consume_{attr}")(13) is True
    assert getattr(res, attr) == 7


def test_spoil_food_loses_a_twentieth():
    res = Resources(1000, 0, 0, 0)
    res.spoil_food()
    assert res.food == 950


def test_spoil_food_never_negative():
    res = Resources(-100, 0, 0, 0)
    res.spoil_food()
    assert res.food == 0


def test_report_lists_every_store():
    text = Resources(100, 200, 300, 400).report()
    assert "Food: 100 units" in text
    assert "Wood: 200 logs" in text
    assert "Stone: 300 blocks" in text
    assert "Iron: 400 ingots" in text