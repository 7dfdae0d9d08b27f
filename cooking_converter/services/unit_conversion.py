"""
Unit Conversion Service.

Handles volume, weight and volume <-> weight conversions with ingredient
densities, plus confidence scoring and measuring notes.
"""

import logging
from typing import Optional

from ..errors import InvalidAmount, UnsupportedConversion
from ..ingredients import FLOURS, IngredientType
from ..schemas import ConversionResult
from ..settings import get_settings
from ..units import VOLUME_CONVERSIONS, WEIGHT_CONVERSIONS, CookingUnit, MeasurementType

logger = logging.getLogger(__name__)

# Densities are grams per cup of this many ml
REFERENCE_CUP_ML = 240.0

SAME_UNIT_NOTE = "Same unit - no conversion needed"

VOLUME = MeasurementType.VOLUME
WEIGHT = MeasurementType.WEIGHT
TEMPERATURE = MeasurementType.TEMPERATURE

# --- Confidence Tables ---

SAME_TYPE_CONFIDENCE = 0.98
TEMPERATURE_CONFIDENCE = 0.99
CROSS_TYPE_FALLBACK_CONFIDENCE = 0.50
DEFAULT_DENSITY_CONFIDENCE = 0.75

# Volume <-> weight confidence by ingredient
DENSITY_CONFIDENCE = {
    # liquids are very consistent
    IngredientType.WATER: 0.95,
    IngredientType.MILK: 0.95,
    IngredientType.OIL: 0.95,
    IngredientType.CREAM: 0.95,
    IngredientType.HONEY: 0.95,
    IngredientType.MAPLE_SYRUP: 0.95,
    IngredientType.VANILLA_EXTRACT: 0.95,
    # well-established measurements
    IngredientType.ALL_PURPOSE_FLOUR: 0.85,
    IngredientType.GRANULATED_SUGAR: 0.85,
    IngredientType.SALT: 0.85,
    # packing method matters
    IngredientType.BROWN_SUGAR: 0.75,
    IngredientType.POWDERED_SUGAR: 0.75,
    # temperature matters
    IngredientType.BUTTER: 0.80,
    IngredientType.COCONUT_OIL: 0.80,
    # light, air pockets
    IngredientType.COCOA_POWDER: 0.70,
}

# --- Note Tables ---

# Added when the source unit is a volume
VOLUME_SOURCE_NOTES = {
    IngredientType.BROWN_SUGAR: "Assumes firmly packed brown sugar",
    IngredientType.BUTTER: "Assumes room temperature butter",
    IngredientType.COCOA_POWDER: "Sift cocoa powder for most accurate measurement",
    **{flour: "Assumes spooned and leveled flour (not scooped)" for flour in FLOURS},
}

# Added in either direction
LIQUID_NOTES = {
    IngredientType.HONEY: "Liquid measurement",
    IngredientType.MAPLE_SYRUP: "Liquid measurement",
}

VOLUME_TO_WEIGHT_NOTE = "Weight measurements are more accurate for baking"
WEIGHT_TO_VOLUME_NOTE = "Volume measurement may vary based on packing method"


# --- Conversion Factors ---

def _volume_to_volume(from_unit: CookingUnit, to_unit: CookingUnit) -> Optional[float]:
    from_factor = VOLUME_CONVERSIONS.get(from_unit)
    to_factor = VOLUME_CONVERSIONS.get(to_unit)
    if from_factor is None or to_factor is None:
        return None
    return from_factor / to_factor


def _weight_to_weight(from_unit: CookingUnit, to_unit: CookingUnit) -> Optional[float]:
    from_factor = WEIGHT_CONVERSIONS.get(from_unit)
    to_factor = WEIGHT_CONVERSIONS.get(to_unit)
    if from_factor is None or to_factor is None:
        return None
    return from_factor / to_factor


def _volume_to_weight(ingredient: IngredientType, from_unit: CookingUnit, to_unit: CookingUnit) -> Optional[float]:
    volume_ml = VOLUME_CONVERSIONS.get(from_unit)
    weight_factor = WEIGHT_CONVERSIONS.get(to_unit)
    if volume_ml is None or weight_factor is None:
        return None

    # volume -> cups -> grams (density) -> target weight unit
    grams_per_from_unit = (volume_ml / REFERENCE_CUP_ML) * ingredient.grams_per_cup
    return grams_per_from_unit / weight_factor


def _weight_to_volume(ingredient: IngredientType, from_unit: CookingUnit, to_unit: CookingUnit) -> Optional[float]:
    weight_g = WEIGHT_CONVERSIONS.get(from_unit)
    volume_factor = VOLUME_CONVERSIONS.get(to_unit)
    if weight_g is None or volume_factor is None:
        return None

    # weight -> grams -> ml (density) -> target volume unit
    ml_per_from_unit = (weight_g / ingredient.grams_per_cup) * REFERENCE_CUP_ML
    return ml_per_from_unit / volume_factor


def get_conversion_factor(
    ingredient: IngredientType,
    from_unit: CookingUnit,
    to_unit: CookingUnit,
) -> Optional[float]:
    """
    Multiplicative factor from from_unit to to_unit for this ingredient.
    None when no path exists (temperature, quantity, or mixed with either).
    """
    pair = (from_unit.measurement_type, to_unit.measurement_type)

    if pair == (VOLUME, VOLUME):
        return _volume_to_volume(from_unit, to_unit)
    if pair == (WEIGHT, WEIGHT):
        return _weight_to_weight(from_unit, to_unit)
    if pair == (VOLUME, WEIGHT):
        return _volume_to_weight(ingredient, from_unit, to_unit)
    if pair == (WEIGHT, VOLUME):
        return _weight_to_volume(ingredient, from_unit, to_unit)

    # Temperature goes through convert_temperature; quantity has no path
    return None


# --- Confidence & Notes ---

def get_confidence(from_unit: CookingUnit, to_unit: CookingUnit, ingredient: IngredientType) -> float:
    pair = (from_unit.measurement_type, to_unit.measurement_type)

    if pair in ((VOLUME, VOLUME), (WEIGHT, WEIGHT)):
        return SAME_TYPE_CONFIDENCE

    if pair in ((VOLUME, WEIGHT), (WEIGHT, VOLUME)):
        return DENSITY_CONFIDENCE.get(ingredient, DEFAULT_DENSITY_CONFIDENCE)

    if pair == (TEMPERATURE, TEMPERATURE):
        return TEMPERATURE_CONFIDENCE

    return CROSS_TYPE_FALLBACK_CONFIDENCE


def generate_notes(from_unit: CookingUnit, to_unit: CookingUnit, ingredient: IngredientType) -> Optional[str]:
    """
    Measuring advice for cross-type conversions, joined with ". ".
    Returns None for same-type conversions or when nothing applies.
    """
    from_type = from_unit.measurement_type
    to_type = to_unit.measurement_type

    if from_type == to_type:
        return None

    notes = []

    # 1. Ingredient measuring tip
    if ingredient.measurement_notes:
        notes.append(ingredient.measurement_notes)

    # 2. Ingredient + direction context
    if from_type == VOLUME and ingredient in VOLUME_SOURCE_NOTES:
        notes.append(VOLUME_SOURCE_NOTES[ingredient])
    if ingredient in LIQUID_NOTES:
        notes.append(LIQUID_NOTES[ingredient])

    # 3. General direction note
    if from_type == VOLUME and to_type == WEIGHT:
        notes.append(VOLUME_TO_WEIGHT_NOTE)
    elif from_type == WEIGHT and to_type == VOLUME:
        notes.append(WEIGHT_TO_VOLUME_NOTE)

    if not notes:
        return None
    return ". ".join(note.rstrip(".") for note in notes)


# --- Public API ---

def convert_with_details(
    amount: float,
    ingredient: IngredientType,
    from_unit: CookingUnit,
    to_unit: CookingUnit,
) -> ConversionResult:
    """
    Convert an amount between units, returning confidence, notes and any error.
    Never raises for bad amounts or unsupported pairs; failures come back as data.
    """
    # 1. Validate amount (also for identical units; NaN fails too)
    if not amount > 0:
        logger.debug(f"Rejected non-positive amount {amount} for {ingredient.value}")
        return ConversionResult.failure(
            original_amount=amount,
            ingredient=ingredient,
            from_unit=from_unit,
            to_unit=to_unit,
            error=InvalidAmount(amount=amount),
        )

    # 2. Same unit short-circuit
    if from_unit == to_unit:
        return ConversionResult.success(
            original_amount=amount,
            converted_amount=amount,
            ingredient=ingredient,
            from_unit=from_unit,
            to_unit=to_unit,
            confidence=1.0,
            notes=SAME_UNIT_NOTE,
        )

    # 3. Factor for this ingredient
    factor = get_conversion_factor(ingredient, from_unit, to_unit)
    if factor is None:
        logger.debug(
            f"No conversion path from {from_unit.value} to {to_unit.value} for {ingredient.value}"
        )
        return ConversionResult.failure(
            original_amount=amount,
            ingredient=ingredient,
            from_unit=from_unit,
            to_unit=to_unit,
            error=UnsupportedConversion(from_unit=from_unit, to_unit=to_unit, ingredient=ingredient),
        )

    # 4. Apply and annotate
    converted = amount * factor
    confidence = get_confidence(from_unit, to_unit, ingredient)
    notes = generate_notes(from_unit, to_unit, ingredient)

    if get_settings().log_conversions:
        logger.debug(
            f"Converted {amount} {from_unit.value} {ingredient.value} -> "
            f"{converted} {to_unit.value} (confidence {confidence})"
        )

    return ConversionResult.success(
        original_amount=amount,
        converted_amount=converted,
        ingredient=ingredient,
        from_unit=from_unit,
        to_unit=to_unit,
        confidence=confidence,
        notes=notes,
    )


def convert(
    amount: float,
    ingredient: IngredientType,
    from_unit: CookingUnit,
    to_unit: CookingUnit,
) -> Optional[float]:
    """Converted amount, or None if the conversion is not possible."""
    return convert_with_details(amount, ingredient, from_unit, to_unit).converted_amount
