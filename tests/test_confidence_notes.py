import pytest

from cooking_converter import CookingUnit, IngredientType, convert_with_details
from cooking_converter.services.unit_conversion import generate_notes, get_confidence

U = CookingUnit
ING = IngredientType


# --- Confidence ---

def test_same_type_confidence():
    assert convert_with_details(1.0, ING.WATER, U.CUPS, U.MILLILITERS).confidence == 0.98
    assert convert_with_details(1.0, ING.ALL_PURPOSE_FLOUR, U.POUNDS, U.GRAMS).confidence == 0.98


@pytest.mark.parametrize("ingredient, expected", [
    (ING.WATER, 0.95),
    (ING.MILK, 0.95),
    (ING.OIL, 0.95),
    (ING.CREAM, 0.95),
    (ING.HONEY, 0.95),
    (ING.MAPLE_SYRUP, 0.95),
    (ING.VANILLA_EXTRACT, 0.95),
    (ING.ALL_PURPOSE_FLOUR, 0.85),
    (ING.GRANULATED_SUGAR, 0.85),
    (ING.SALT, 0.85),
    (ING.BROWN_SUGAR, 0.75),
    (ING.POWDERED_SUGAR, 0.75),
    (ING.BUTTER, 0.80),
    (ING.COCONUT_OIL, 0.80),
    (ING.COCOA_POWDER, 0.70),
    # everything else
    (ING.BREAD_FLOUR, 0.75),
    (ING.ALMONDS, 0.75),
    (ING.BAKING_POWDER, 0.75),
])
def test_cross_type_confidence_table(ingredient, expected):
    # Same tier in both directions
    assert get_confidence(U.CUPS, U.GRAMS, ingredient) == expected
    assert get_confidence(U.OUNCES, U.TABLESPOONS, ingredient) == expected


def test_confidence_tiers():
    for ingredient in ING:
        assert convert_with_details(1.0, ingredient, U.CUPS, U.LITERS).confidence >= 0.95
        assert convert_with_details(1.0, ingredient, U.KILOGRAMS, U.OUNCES).confidence >= 0.95

    for ingredient in (ING.BROWN_SUGAR, ING.COCOA_POWDER):
        assert convert_with_details(1.0, ingredient, U.CUPS, U.GRAMS).confidence < 0.85
        assert convert_with_details(100.0, ingredient, U.GRAMS, U.CUPS).confidence < 0.85

    for ingredient in (ING.WATER, ING.MILK):
        assert convert_with_details(1.0, ingredient, U.CUPS, U.GRAMS).confidence >= 0.90


def test_temperature_and_fallback_confidence():
    assert get_confidence(U.FAHRENHEIT, U.CELSIUS, ING.WATER) == 0.99
    assert get_confidence(U.PIECES, U.GRAMS, ING.WATER) == 0.50


# --- Notes ---

def test_brown_sugar_mentions_packing():
    notes = convert_with_details(1.0, ING.BROWN_SUGAR, U.CUPS, U.GRAMS).notes
    assert notes == (
        "Pack firmly into measuring cup until level with rim. "
        "Assumes firmly packed brown sugar. "
        "Weight measurements are more accurate for baking"
    )


def test_flour_mentions_spooning():
    notes = convert_with_details(1.0, ING.ALL_PURPOSE_FLOUR, U.CUPS, U.GRAMS).notes
    assert "spoon" in notes.lower()
    assert "Assumes spooned and leveled flour (not scooped)" in notes


def test_butter_mentions_temperature():
    notes = convert_with_details(1.0, ING.BUTTER, U.CUPS, U.GRAMS).notes
    assert "temperature" in notes.lower()
    assert "Assumes room temperature butter" in notes


def test_volume_source_notes_skipped_for_weight_source():
    notes = generate_notes(U.GRAMS, U.CUPS, ING.BROWN_SUGAR)
    assert "Assumes firmly packed" not in notes
    assert notes.endswith("Volume measurement may vary based on packing method")


def test_flour_variants_share_context_note():
    for flour in (ING.BREAD_FLOUR, ING.CAKE_FLOUR, ING.WHOLE_WHEAT_FLOUR):
        # no measuring tip for these, so the context note leads
        assert generate_notes(U.CUPS, U.GRAMS, flour) == (
            "Assumes spooned and leveled flour (not scooped). "
            "Weight measurements are more accurate for baking"
        )


def test_honey_liquid_note_both_directions():
    assert "Liquid measurement" in generate_notes(U.CUPS, U.GRAMS, ING.HONEY)
    assert "Liquid measurement" in generate_notes(U.GRAMS, U.CUPS, ING.MAPLE_SYRUP)


def test_cocoa_sift_note():
    notes = generate_notes(U.TABLESPOONS, U.GRAMS, ING.COCOA_POWDER)
    assert "Sift cocoa powder for most accurate measurement" in notes


def test_plain_ingredient_gets_direction_note_only():
    assert generate_notes(U.CUPS, U.GRAMS, ING.ALMONDS) == "Weight measurements are more accurate for baking"


def test_no_notes_for_same_type():
    assert convert_with_details(1.0, ING.BROWN_SUGAR, U.CUPS, U.TABLESPOONS).notes is None
    assert generate_notes(U.GRAMS, U.POUNDS, ING.BUTTER) is None


def test_no_notes_for_unsupported_pair():
    # types differ but no fragment applies
    assert generate_notes(U.PIECES, U.FAHRENHEIT, ING.WATER) is None
