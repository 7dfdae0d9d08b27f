"""Display helpers. Conversion results themselves are never rounded."""

from ..units import CookingUnit


def round_for_display(amount: float, unit: CookingUnit) -> float:
    """Round to the unit's typical precision (weight 1dp, volume 2dp, else whole)."""
    return round(amount, unit.typical_precision)


def format_amount(amount: float, unit: CookingUnit) -> str:
    """
    e.g. 176.666 °C -> "177 °C", 1.3333 cups -> "1.33 cups"
    """
    precision = unit.typical_precision
    return f"{amount:.{precision}f} {unit.value}"
