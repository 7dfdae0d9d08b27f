from cooking_converter import (
    CookingSystem,
    CookingUnit,
    IngredientCategory,
    IngredientType,
    MeasurementType,
    conversion_info,
)


def test_catalog_sizes():
    info = conversion_info()

    assert len(info.supported_ingredients) == 23
    assert len(info.supported_units) == 14
    assert CookingSystem.US in info.supported_systems
    assert CookingSystem.METRIC in info.supported_systems
    assert info.conversion_types == list(MeasurementType)
    assert "density" in info.description


def test_total_conversions():
    # 23 ingredients x 14 units x 13 targets
    assert conversion_info().total_conversions == 23 * 14 * 13


def test_units_by_type():
    by_type = conversion_info().units_by_type

    assert by_type[MeasurementType.VOLUME] == [
        CookingUnit.CUPS, CookingUnit.TABLESPOONS, CookingUnit.TEASPOONS,
        CookingUnit.MILLILITERS, CookingUnit.LITERS, CookingUnit.FLUID_OUNCES,
    ]
    assert CookingUnit.GRAMS in by_type[MeasurementType.WEIGHT]
    assert CookingUnit.OUNCES in by_type[MeasurementType.WEIGHT]
    assert by_type[MeasurementType.TEMPERATURE] == [CookingUnit.FAHRENHEIT, CookingUnit.CELSIUS]
    assert by_type[MeasurementType.QUANTITY] == [CookingUnit.PIECES, CookingUnit.SERVINGS]


def test_ingredients_by_category():
    by_category = conversion_info().ingredients_by_category

    assert set(by_category) == set(IngredientCategory)
    assert by_category[IngredientCategory.LIQUIDS] == [IngredientType.WATER, IngredientType.MILK, IngredientType.CREAM]
    assert sum(len(v) for v in by_category.values()) == 23
    for category, members in by_category.items():
        assert members == category.ingredients


def test_serialization_includes_total():
    dumped = conversion_info().model_dump()
    assert dumped["total_conversions"] == 23 * 14 * 13
