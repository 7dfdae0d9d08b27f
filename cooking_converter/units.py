"""
Cooking units, measurement types and measurement systems.

Attributes live in constant tables keyed by enum member.
Base units: ml (volume), g (weight). Temperature and quantity units have no
linear factor and are handled by dedicated logic.
"""

from enum import Enum
from typing import Optional


# --- Types ---

class MeasurementType(str, Enum):
    VOLUME = "volume"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    QUANTITY = "quantity"

    @property
    def description(self) -> str:
        return MEASUREMENT_TYPE_DESCRIPTIONS[self]


class CookingUnit(str, Enum):
    """Supported units; the value is the canonical symbol."""

    # Volume
    CUPS = "cups"
    TABLESPOONS = "tbsp"
    TEASPOONS = "tsp"
    MILLILITERS = "ml"
    LITERS = "l"
    FLUID_OUNCES = "fl oz"

    # Weight
    GRAMS = "g"
    KILOGRAMS = "kg"
    OUNCES = "oz"
    POUNDS = "lbs"

    # Temperature
    FAHRENHEIT = "°F"
    CELSIUS = "°C"

    # Quantity
    PIECES = "pieces"
    SERVINGS = "servings"

    @property
    def measurement_type(self) -> MeasurementType:
        return UNIT_TYPES[self]

    @property
    def full_name(self) -> str:
        return UNIT_FULL_NAMES[self]

    @property
    def is_professional(self) -> bool:
        return self in PROFESSIONAL_UNITS

    @property
    def typical_precision(self) -> int:
        """Decimal places usually shown for this unit."""
        return TYPICAL_PRECISION[self.measurement_type]

    @property
    def base_factor(self) -> Optional[float]:
        """Factor to ml or g, None for temperature and quantity units."""
        if self in VOLUME_CONVERSIONS:
            return VOLUME_CONVERSIONS[self]
        return WEIGHT_CONVERSIONS.get(self)


class CookingSystem(str, Enum):
    US = "US"
    METRIC = "Metric"
    IMPERIAL = "Imperial"

    @property
    def description(self) -> str:
        return SYSTEM_DESCRIPTIONS[self]

    @property
    def primary_units(self) -> list[CookingUnit]:
        return list(SYSTEM_PRIMARY_UNITS[self])


# --- Data Tables ---

# Unit -> factor to ml
VOLUME_CONVERSIONS = {
    CookingUnit.CUPS: 240.0,  # US cup standard
    CookingUnit.TABLESPOONS: 15.0,
    CookingUnit.TEASPOONS: 5.0,
    CookingUnit.MILLILITERS: 1.0,
    CookingUnit.LITERS: 1000.0,
    CookingUnit.FLUID_OUNCES: 29.5735,
}

# Unit -> factor to g
WEIGHT_CONVERSIONS = {
    CookingUnit.GRAMS: 1.0,
    CookingUnit.KILOGRAMS: 1000.0,
    CookingUnit.OUNCES: 28.3495,  # avoirdupois
    CookingUnit.POUNDS: 453.592,
}

UNIT_TYPES = {
    CookingUnit.CUPS: MeasurementType.VOLUME,
    CookingUnit.TABLESPOONS: MeasurementType.VOLUME,
    CookingUnit.TEASPOONS: MeasurementType.VOLUME,
    CookingUnit.MILLILITERS: MeasurementType.VOLUME,
    CookingUnit.LITERS: MeasurementType.VOLUME,
    CookingUnit.FLUID_OUNCES: MeasurementType.VOLUME,
    CookingUnit.GRAMS: MeasurementType.WEIGHT,
    CookingUnit.KILOGRAMS: MeasurementType.WEIGHT,
    CookingUnit.OUNCES: MeasurementType.WEIGHT,
    CookingUnit.POUNDS: MeasurementType.WEIGHT,
    CookingUnit.FAHRENHEIT: MeasurementType.TEMPERATURE,
    CookingUnit.CELSIUS: MeasurementType.TEMPERATURE,
    CookingUnit.PIECES: MeasurementType.QUANTITY,
    CookingUnit.SERVINGS: MeasurementType.QUANTITY,
}

UNIT_FULL_NAMES = {
    CookingUnit.CUPS: "Cups",
    CookingUnit.TABLESPOONS: "Tablespoons",
    CookingUnit.TEASPOONS: "Teaspoons",
    CookingUnit.MILLILITERS: "Milliliters",
    CookingUnit.LITERS: "Liters",
    CookingUnit.FLUID_OUNCES: "Fluid Ounces",
    CookingUnit.GRAMS: "Grams",
    CookingUnit.KILOGRAMS: "Kilograms",
    CookingUnit.OUNCES: "Ounces",
    CookingUnit.POUNDS: "Pounds",
    CookingUnit.FAHRENHEIT: "Fahrenheit",
    CookingUnit.CELSIUS: "Celsius",
    CookingUnit.PIECES: "Pieces",
    CookingUnit.SERVINGS: "Servings",
}

# Metric plus the weight units
PROFESSIONAL_UNITS = frozenset({
    CookingUnit.GRAMS,
    CookingUnit.KILOGRAMS,
    CookingUnit.MILLILITERS,
    CookingUnit.LITERS,
    CookingUnit.CELSIUS,
    CookingUnit.OUNCES,
    CookingUnit.POUNDS,
})

TYPICAL_PRECISION = {
    MeasurementType.WEIGHT: 1,  # 250.5g
    MeasurementType.VOLUME: 2,  # 1.33 cups
    MeasurementType.TEMPERATURE: 0,
    MeasurementType.QUANTITY: 0,
}

MEASUREMENT_TYPE_DESCRIPTIONS = {
    MeasurementType.VOLUME: "Volume (cups, ml, tbsp)",
    MeasurementType.WEIGHT: "Weight (grams, ounces, lbs)",
    MeasurementType.TEMPERATURE: "Temperature (°F, °C)",
    MeasurementType.QUANTITY: "Quantity (pieces, servings)",
}

SYSTEM_DESCRIPTIONS = {
    CookingSystem.US: "United States (cups, tablespoons, ounces, °F)",
    CookingSystem.METRIC: "Metric (milliliters, grams, °C)",
    CookingSystem.IMPERIAL: "Imperial (fluid ounces, pints, pounds)",
}

SYSTEM_PRIMARY_UNITS = {
    CookingSystem.US: (
        CookingUnit.CUPS, CookingUnit.TABLESPOONS, CookingUnit.TEASPOONS,
        CookingUnit.OUNCES, CookingUnit.POUNDS, CookingUnit.FAHRENHEIT,
    ),
    CookingSystem.METRIC: (
        CookingUnit.MILLILITERS, CookingUnit.LITERS, CookingUnit.GRAMS,
        CookingUnit.KILOGRAMS, CookingUnit.CELSIUS,
    ),
    CookingSystem.IMPERIAL: (
        CookingUnit.FLUID_OUNCES, CookingUnit.OUNCES, CookingUnit.POUNDS,
        CookingUnit.FAHRENHEIT,
    ),
}


def units_of_type(measurement_type: MeasurementType) -> list[CookingUnit]:
    """All units of one measurement type, in declaration order."""
    return [u for u in CookingUnit if UNIT_TYPES[u] == measurement_type]
