"""
Ingredient catalog with density information.

Densities are grams per US cup (240 ml), measured with each ingredient's
standard technique:
- Flour: spooned and leveled (not scooped)
- Brown sugar: firmly packed
- Butter: room temperature
- Liquids: liquid measuring cup
"""

from enum import Enum
from typing import Optional


class IngredientCategory(str, Enum):
    FLOURS = "Flours & Starches"
    SUGARS = "Sugars & Sweeteners"
    FATS = "Fats & Oils"
    LIQUIDS = "Liquids"
    NUTS = "Nuts & Seeds"
    BAKING = "Baking Ingredients"

    @property
    def ingredients(self) -> list["IngredientType"]:
        return [i for i in IngredientType if INGREDIENT_CATEGORIES[i] == self]


class IngredientType(str, Enum):
    # Flours & starches
    ALL_PURPOSE_FLOUR = "all-purpose flour"
    BREAD_FLOUR = "bread flour"
    CAKE_FLOUR = "cake flour"
    WHOLE_WHEAT_FLOUR = "whole wheat flour"
    CORNSTARCH = "cornstarch"

    # Sugars & sweeteners
    GRANULATED_SUGAR = "granulated sugar"
    BROWN_SUGAR = "brown sugar"
    POWDERED_SUGAR = "powdered sugar"
    HONEY = "honey"
    MAPLE_SYRUP = "maple syrup"

    # Fats
    BUTTER = "butter"
    OIL = "oil"
    COCONUT_OIL = "coconut oil"

    # Liquids
    WATER = "water"
    MILK = "milk"
    CREAM = "cream"

    # Nuts & seeds
    ALMONDS = "almonds"
    WALNUTS = "walnuts"
    SESAME_SEEDS = "sesame seeds"

    # Baking
    COCOA_POWDER = "cocoa powder"
    BAKING_POWDER = "baking powder"
    SALT = "salt"
    VANILLA_EXTRACT = "vanilla extract"

    @property
    def description(self) -> str:
        return self.value.title()

    @property
    def grams_per_cup(self) -> float:
        return DENSITY_DB[self]

    @property
    def category(self) -> IngredientCategory:
        return INGREDIENT_CATEGORIES[self]

    @property
    def measurement_notes(self) -> Optional[str]:
        return MEASUREMENT_NOTES.get(self)


# --- Data Tables ---

# Ingredient -> grams per 240 ml cup
DENSITY_DB = {
    IngredientType.ALL_PURPOSE_FLOUR: 120.0,
    IngredientType.BREAD_FLOUR: 127.0,
    IngredientType.CAKE_FLOUR: 114.0,
    IngredientType.WHOLE_WHEAT_FLOUR: 113.0,
    IngredientType.CORNSTARCH: 120.0,

    IngredientType.GRANULATED_SUGAR: 200.0,
    IngredientType.BROWN_SUGAR: 213.0,  # packed
    IngredientType.POWDERED_SUGAR: 120.0,
    IngredientType.HONEY: 340.0,
    IngredientType.MAPLE_SYRUP: 322.0,

    IngredientType.BUTTER: 227.0,  # 2 sticks
    IngredientType.OIL: 218.0,
    IngredientType.COCONUT_OIL: 205.0,

    IngredientType.WATER: 240.0,  # reference
    IngredientType.MILK: 245.0,
    IngredientType.CREAM: 240.0,

    IngredientType.ALMONDS: 143.0,  # whole
    IngredientType.WALNUTS: 117.0,
    IngredientType.SESAME_SEEDS: 144.0,

    IngredientType.COCOA_POWDER: 75.0,  # unsweetened
    IngredientType.BAKING_POWDER: 192.0,
    IngredientType.SALT: 292.0,  # table salt
    IngredientType.VANILLA_EXTRACT: 208.0,
}

INGREDIENT_CATEGORIES = {
    IngredientType.ALL_PURPOSE_FLOUR: IngredientCategory.FLOURS,
    IngredientType.BREAD_FLOUR: IngredientCategory.FLOURS,
    IngredientType.CAKE_FLOUR: IngredientCategory.FLOURS,
    IngredientType.WHOLE_WHEAT_FLOUR: IngredientCategory.FLOURS,
    IngredientType.CORNSTARCH: IngredientCategory.FLOURS,
    IngredientType.GRANULATED_SUGAR: IngredientCategory.SUGARS,
    IngredientType.BROWN_SUGAR: IngredientCategory.SUGARS,
    IngredientType.POWDERED_SUGAR: IngredientCategory.SUGARS,
    IngredientType.HONEY: IngredientCategory.SUGARS,
    IngredientType.MAPLE_SYRUP: IngredientCategory.SUGARS,
    IngredientType.BUTTER: IngredientCategory.FATS,
    IngredientType.OIL: IngredientCategory.FATS,
    IngredientType.COCONUT_OIL: IngredientCategory.FATS,
    IngredientType.WATER: IngredientCategory.LIQUIDS,
    IngredientType.MILK: IngredientCategory.LIQUIDS,
    IngredientType.CREAM: IngredientCategory.LIQUIDS,
    IngredientType.ALMONDS: IngredientCategory.NUTS,
    IngredientType.WALNUTS: IngredientCategory.NUTS,
    IngredientType.SESAME_SEEDS: IngredientCategory.NUTS,
    IngredientType.COCOA_POWDER: IngredientCategory.BAKING,
    IngredientType.BAKING_POWDER: IngredientCategory.BAKING,
    IngredientType.SALT: IngredientCategory.BAKING,
    IngredientType.VANILLA_EXTRACT: IngredientCategory.BAKING,
}

# Measuring tips, shown on volume <-> weight conversions
MEASUREMENT_NOTES = {
    IngredientType.ALL_PURPOSE_FLOUR: "Spoon into measuring cup and level with knife. Do not scoop or pack.",
    IngredientType.BROWN_SUGAR: "Pack firmly into measuring cup until level with rim.",
    IngredientType.BUTTER: "Use stick markings or measure at room temperature for accuracy.",
    IngredientType.HONEY: "Lightly oil measuring cup for easy release.",
    IngredientType.MAPLE_SYRUP: "Lightly oil measuring cup for easy release.",
    IngredientType.COCOA_POWDER: "Sift before measuring for most accurate results.",
    IngredientType.POWDERED_SUGAR: "May need sifting if lumpy. Measure after sifting.",
}

FLOURS = frozenset({
    IngredientType.ALL_PURPOSE_FLOUR,
    IngredientType.BREAD_FLOUR,
    IngredientType.CAKE_FLOUR,
    IngredientType.WHOLE_WHEAT_FLOUR,
})
