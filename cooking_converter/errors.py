"""
Conversion error values.

Errors are returned inside results, never raised by the conversion API.
"""

from abc import ABC, abstractmethod
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .ingredients import IngredientType
from .units import CookingUnit


class CookingConversionError(BaseModel, ABC):
    model_config = ConfigDict(frozen=True)

    @property
    @abstractmethod
    def message(self) -> str: ...

    @property
    @abstractmethod
    def user_friendly_description(self) -> str: ...

    def __str__(self) -> str:
        return self.message


class InvalidAmount(CookingConversionError):
    """Amount is zero or negative."""
    kind: Literal["invalid_amount"] = "invalid_amount"
    amount: float

    @property
    def message(self) -> str:
        return f"Invalid amount: {self.amount}. Amount must be positive."

    @property
    def user_friendly_description(self) -> str:
        return "Please enter a positive amount"


class UnsupportedConversion(CookingConversionError):
    """No conversion path between the two units for this ingredient."""
    kind: Literal["unsupported_conversion"] = "unsupported_conversion"
    from_unit: CookingUnit
    to_unit: CookingUnit
    ingredient: IngredientType

    @property
    def message(self) -> str:
        return f"Cannot convert {self.ingredient.value} from {self.from_unit.value} to {self.to_unit.value}"

    @property
    def user_friendly_description(self) -> str:
        return (
            f"Can't convert {self.ingredient.description} "
            f"from {self.from_unit.full_name} to {self.to_unit.full_name}"
        )


class UnknownIngredient(CookingConversionError):
    kind: Literal["unknown_ingredient"] = "unknown_ingredient"
    name: str

    @property
    def message(self) -> str:
        return f"Unknown ingredient: {self.name}"

    @property
    def user_friendly_description(self) -> str:
        return f"Don't recognize ingredient: {self.name}"


class AmbiguousConversion(CookingConversionError):
    kind: Literal["ambiguous_conversion"] = "ambiguous_conversion"
    description: str

    @property
    def message(self) -> str:
        return f"Ambiguous conversion: {self.description}"

    @property
    def user_friendly_description(self) -> str:
        return "Please be more specific about the conversion"


class AmountOutOfRange(CookingConversionError):
    kind: Literal["amount_out_of_range"] = "amount_out_of_range"
    amount: float
    valid_range: str

    @property
    def message(self) -> str:
        return f"Amount {self.amount} out of valid range: {self.valid_range}"

    @property
    def user_friendly_description(self) -> str:
        return "Amount seems unusually large or small"


ConversionError = Annotated[
    Union[InvalidAmount, UnsupportedConversion, UnknownIngredient, AmbiguousConversion, AmountOutOfRange],
    Field(discriminator="kind"),
]
