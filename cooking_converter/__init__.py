"""Ingredient-aware cooking measurement conversions.

Volume <-> weight conversions use per-ingredient densities (grams per 240 ml
cup), so 1 cup of flour is 120 g while 1 cup of sugar is 200 g.
"""

from .aliases import lookup_ingredient, lookup_unit, resolve_ingredient
from .errors import (
    AmbiguousConversion,
    AmountOutOfRange,
    ConversionError,
    CookingConversionError,
    InvalidAmount,
    UnknownIngredient,
    UnsupportedConversion,
)
from .ingredients import IngredientCategory, IngredientType
from .log_config import configure_logging
from .schemas import ConversionInfo, ConversionResult, RecipeIngredient
from .services.conversion_info import conversion_info
from .services.formatting import format_amount, round_for_display
from .services.recipe_scaling import scale_recipe
from .services.temperature import convert_temperature
from .services.unit_conversion import convert, convert_with_details
from .settings import Settings, get_settings
from .units import CookingSystem, CookingUnit, MeasurementType

__all__ = [
    "convert", "convert_with_details", "convert_temperature", "scale_recipe", "conversion_info",
    "CookingUnit", "MeasurementType", "CookingSystem", "IngredientType", "IngredientCategory",
    "ConversionResult", "RecipeIngredient", "ConversionInfo",
    "CookingConversionError", "ConversionError", "InvalidAmount", "UnsupportedConversion",
    "UnknownIngredient", "AmbiguousConversion", "AmountOutOfRange",
    "lookup_unit", "lookup_ingredient", "resolve_ingredient",
    "round_for_display", "format_amount",
    "Settings", "get_settings", "configure_logging",
]

__version__ = "0.1.0"
