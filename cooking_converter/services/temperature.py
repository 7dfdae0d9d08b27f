from typing import Optional

from ..units import CookingUnit


def convert_temperature(value: float, from_unit: CookingUnit, to_unit: CookingUnit) -> Optional[float]:
    """
    Fahrenheit <-> Celsius. Identical units return the value unchanged;
    any other pair returns None.

    350°F -> 176.67°C, 180°C -> 356°F
    """
    if from_unit == to_unit:
        return value

    if (from_unit, to_unit) == (CookingUnit.FAHRENHEIT, CookingUnit.CELSIUS):
        return (value - 32) * 5 / 9

    if (from_unit, to_unit) == (CookingUnit.CELSIUS, CookingUnit.FAHRENHEIT):
        return value * 9 / 5 + 32

    return None
