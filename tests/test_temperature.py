import pytest

from cooking_converter import CookingUnit, convert_temperature

F = CookingUnit.FAHRENHEIT
C = CookingUnit.CELSIUS


@pytest.mark.parametrize("value, from_unit, to_unit, expected", [
    (350, F, C, 176.67),
    (375, F, C, 190.56),
    (32, F, C, 0.0),
    (180, C, F, 356.0),
    (-40, C, F, -40.0),
    (100, C, C, 100.0),
])
def test_oven_temperatures(value, from_unit, to_unit, expected):
    assert convert_temperature(value, from_unit, to_unit) == pytest.approx(expected, abs=0.01)


def test_round_trip():
    celsius = convert_temperature(425, F, C)
    assert convert_temperature(celsius, C, F) == pytest.approx(425)


def test_non_temperature_units():
    assert convert_temperature(350, F, CookingUnit.CUPS) is None
    assert convert_temperature(1, CookingUnit.GRAMS, C) is None
    # identical units pass through regardless of type
    assert convert_temperature(3, CookingUnit.CUPS, CookingUnit.CUPS) == 3
