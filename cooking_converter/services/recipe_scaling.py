import logging

from ..schemas import RecipeIngredient

logger = logging.getLogger(__name__)


def scale_recipe(
    ingredients: list[RecipeIngredient],
    from_servings: int,
    to_servings: int,
) -> list[RecipeIngredient]:
    """
    Scale every ingredient amount by to_servings / from_servings.

    Non-positive serving counts leave the recipe as-is. Name, unit and notes
    carry over; the input list is not modified.
    """
    if from_servings <= 0 or to_servings <= 0:
        logger.debug(f"Skipping scale {from_servings} -> {to_servings} servings")
        return list(ingredients)

    scale = to_servings / from_servings

    return [
        ing.model_copy(update={"amount": ing.amount * scale})
        for ing in ingredients
    ]
