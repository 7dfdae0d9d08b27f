"""Pydantic schemas for conversion results, recipes and converter info.

Models:
- ConversionResult (one conversion, success or failure)
- RecipeIngredient (a scalable recipe line)
- ConversionInfo (catalog snapshot)
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .errors import ConversionError
from .ingredients import IngredientCategory, IngredientType
from .units import CookingSystem, CookingUnit, MeasurementType


# --- Conversion Result ---

class ConversionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    original_amount: float
    converted_amount: Optional[float] = None  # None on failure
    ingredient: IngredientType
    from_unit: CookingUnit
    to_unit: CookingUnit
    confidence: float = Field(0.0, ge=0.0, le=1.0)
    error: Optional[ConversionError] = None
    notes: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.converted_amount is not None and self.error is None

    @classmethod
    def success(
        cls,
        original_amount: float,
        converted_amount: float,
        ingredient: IngredientType,
        from_unit: CookingUnit,
        to_unit: CookingUnit,
        confidence: float = 1.0,
        notes: Optional[str] = None,
    ) -> "ConversionResult":
        return cls(
            original_amount=original_amount,
            converted_amount=converted_amount,
            ingredient=ingredient,
            from_unit=from_unit,
            to_unit=to_unit,
            confidence=confidence,
            notes=notes,
        )

    @classmethod
    def failure(
        cls,
        original_amount: float,
        ingredient: IngredientType,
        from_unit: CookingUnit,
        to_unit: CookingUnit,
        error: ConversionError,
    ) -> "ConversionResult":
        """Failed results carry no amount and zero confidence."""
        return cls(
            original_amount=original_amount,
            ingredient=ingredient,
            from_unit=from_unit,
            to_unit=to_unit,
            confidence=0.0,
            error=error,
        )


# --- Recipe Ingredient ---

class RecipeIngredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    amount: float
    unit: CookingUnit
    notes: Optional[str] = None  # e.g. "sifted"


# --- Converter Info ---

class ConversionInfo(BaseModel):
    """Read-only snapshot of what the converter supports."""
    model_config = ConfigDict(frozen=True)

    supported_ingredients: list[IngredientType]
    supported_units: list[CookingUnit]
    supported_systems: list[CookingSystem]
    conversion_types: list[MeasurementType]
    description: str

    @computed_field
    @property
    def total_conversions(self) -> int:
        # every unit to every other unit, per ingredient; counts unsupported pairs too
        ingredients = len(self.supported_ingredients)
        units = len(self.supported_units)
        return ingredients * units * (units - 1)

    @property
    def units_by_type(self) -> dict[MeasurementType, list[CookingUnit]]:
        grouped: dict[MeasurementType, list[CookingUnit]] = {}
        for unit in self.supported_units:
            grouped.setdefault(unit.measurement_type, []).append(unit)
        return grouped

    @property
    def ingredients_by_category(self) -> dict[IngredientCategory, list[IngredientType]]:
        grouped: dict[IngredientCategory, list[IngredientType]] = {}
        for ingredient in self.supported_ingredients:
            grouped.setdefault(ingredient.category, []).append(ingredient)
        return grouped
