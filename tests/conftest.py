import pytest

from cooking_converter import CookingUnit, RecipeIngredient
from cooking_converter.settings import get_settings


@pytest.fixture
def cookie_recipe():
    # 4 servings
    return [
        RecipeIngredient(name="flour", amount=2.0, unit=CookingUnit.CUPS),
        RecipeIngredient(name="sugar", amount=1.0, unit=CookingUnit.CUPS),
        RecipeIngredient(name="butter", amount=0.5, unit=CookingUnit.CUPS, notes="softened"),
        RecipeIngredient(name="eggs", amount=2.0, unit=CookingUnit.PIECES),
    ]


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear the settings cache so env overrides apply, and again afterwards."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
