from ..ingredients import IngredientType
from ..schemas import ConversionInfo
from ..units import CookingSystem, CookingUnit, MeasurementType

DESCRIPTION = "Professional-grade cooking measurement converter with ingredient-specific density calculations"


def conversion_info() -> ConversionInfo:
    """Snapshot of supported ingredients, units, systems and measurement types."""
    return ConversionInfo(
        supported_ingredients=list(IngredientType),
        supported_units=list(CookingUnit),
        supported_systems=list(CookingSystem),
        conversion_types=list(MeasurementType),
        description=DESCRIPTION,
    )
