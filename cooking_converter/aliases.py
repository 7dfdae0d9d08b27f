"""
Alternative names for units and ingredients.

Static lookup tables only. The conversion engine never consults these; they
exist for callers turning user-facing names into catalog members.
"""

import re
from typing import Callable, Optional, Union

from .errors import UnknownIngredient
from .ingredients import IngredientType
from .units import CookingUnit

# --- Data Tables ---

UNIT_ALTERNATIVE_NAMES = {
    CookingUnit.CUPS: ["cup", "c", "C"],
    CookingUnit.TABLESPOONS: ["tablespoon", "tbsp", "tb", "T"],
    CookingUnit.TEASPOONS: ["teaspoon", "tsp", "t"],
    CookingUnit.MILLILITERS: ["milliliter", "mL", "ML"],
    CookingUnit.LITERS: ["liter", "litre", "L"],
    CookingUnit.FLUID_OUNCES: ["fl oz", "fluid ounces", "fl. oz.", "fluid oz"],
    CookingUnit.GRAMS: ["gram", "gr", "G"],
    CookingUnit.KILOGRAMS: ["kilogram", "kg", "KG"],
    CookingUnit.OUNCES: ["oz", "ounce"],
    CookingUnit.POUNDS: ["lb", "lbs", "pound", "#"],
    CookingUnit.FAHRENHEIT: ["f", "fahrenheit", "degrees f", "deg f", "°f"],
    CookingUnit.CELSIUS: ["c", "celsius", "degrees c", "deg c", "°c", "centigrade"],
    CookingUnit.PIECES: ["piece", "pcs", "pc", "each", "item", "items"],
    CookingUnit.SERVINGS: ["serving", "portion", "portions"],
}

INGREDIENT_ALTERNATIVE_NAMES = {
    IngredientType.ALL_PURPOSE_FLOUR: ["flour", "ap flour", "plain flour", "white flour"],
    IngredientType.BREAD_FLOUR: ["strong flour", "high gluten flour"],
    IngredientType.CAKE_FLOUR: ["soft flour", "pastry flour"],
    IngredientType.WHOLE_WHEAT_FLOUR: ["whole meal flour", "graham flour", "brown flour"],
    IngredientType.CORNSTARCH: ["corn starch", "cornflour", "corn flour"],
    IngredientType.GRANULATED_SUGAR: ["sugar", "white sugar", "caster sugar", "superfine sugar"],
    IngredientType.BROWN_SUGAR: ["brown", "light brown sugar", "dark brown sugar"],
    IngredientType.POWDERED_SUGAR: ["confectioners sugar", "icing sugar", "10x sugar", "powdered"],
    IngredientType.HONEY: ["liquid honey", "clover honey", "wildflower honey"],
    IngredientType.MAPLE_SYRUP: ["pure maple syrup", "maple", "grade a maple syrup"],
    IngredientType.BUTTER: ["unsalted butter", "salted butter", "sweet butter"],
    IngredientType.OIL: ["vegetable oil", "canola oil", "neutral oil"],
    IngredientType.COCONUT_OIL: ["virgin coconut oil", "refined coconut oil"],
    IngredientType.WATER: ["filtered water", "tap water"],
    IngredientType.MILK: ["whole milk", "2% milk", "dairy milk"],
    IngredientType.CREAM: ["heavy cream", "whipping cream", "double cream"],
    IngredientType.ALMONDS: ["whole almonds", "raw almonds"],
    IngredientType.WALNUTS: ["walnut halves", "english walnuts"],
    IngredientType.SESAME_SEEDS: ["sesame", "white sesame seeds"],
    IngredientType.COCOA_POWDER: ["cocoa", "unsweetened cocoa", "dutch cocoa"],
    IngredientType.BAKING_POWDER: ["baking pwd", "double acting baking powder"],
    IngredientType.SALT: ["table salt", "fine salt", "iodized salt"],
    IngredientType.VANILLA_EXTRACT: ["vanilla", "pure vanilla", "vanilla essence"],
}


def _exact_key(name: str) -> str:
    return name


def _folded_key(name: str) -> str:
    return name.lower()


def _ingredient_key(name: str) -> str:
    # "All-Purpose  Flour" / "all_purpose_flour" -> "all purpose flour"
    s = re.sub(r"[-_]", " ", name.lower())
    return re.sub(r"\s+", " ", s).strip()


def _build_index(names_by_member: dict, key_func: Callable[[str], str]) -> dict:
    # First declared member wins when two share an alias ("c": cups vs celsius)
    index = {}
    for member, names in names_by_member.items():
        for name in [member.value, member.name, *names]:
            index.setdefault(key_func(name), member)
    return index


# Case-sensitive first so "T" (tbsp) and "t" (tsp) stay distinct
UNIT_SYNONYMS = _build_index(UNIT_ALTERNATIVE_NAMES, _exact_key)
UNIT_SYNONYMS_FOLDED = _build_index(UNIT_ALTERNATIVE_NAMES, _folded_key)
INGREDIENT_SYNONYMS = _build_index(INGREDIENT_ALTERNATIVE_NAMES, _ingredient_key)


def lookup_unit(name: str) -> Optional[CookingUnit]:
    """Map a unit name or abbreviation to a CookingUnit."""
    if not name:
        return None

    raw = name.strip()
    if raw in UNIT_SYNONYMS:
        return UNIT_SYNONYMS[raw]

    return UNIT_SYNONYMS_FOLDED.get(raw.lower())


def lookup_ingredient(name: str) -> Optional[IngredientType]:
    """Map an ingredient name or alias to an IngredientType."""
    if not name:
        return None

    return INGREDIENT_SYNONYMS.get(_ingredient_key(name))


def resolve_ingredient(name: str) -> Union[IngredientType, UnknownIngredient]:
    """Like lookup_ingredient, but returns an UnknownIngredient error value on a miss."""
    ingredient = lookup_ingredient(name)
    if ingredient is None:
        return UnknownIngredient(name=name)
    return ingredient
