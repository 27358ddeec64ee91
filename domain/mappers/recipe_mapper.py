"""
Recipe domain mappers.
Ingredients are stored as a JSON array in a text column.
"""

import json
import logging
from typing import List

from domain.models import Recipe
from domain.schemas.recipe_schemas import RecipeResponse

logger = logging.getLogger("nutritrack.mappers.recipe")


class RecipeMapper:
    """Mapper for recipe transformations."""

    @staticmethod
    def dump_ingredients(ingredients: List[str]) -> str:
        return json.dumps(list(ingredients))

    @staticmethod
    def load_ingredients(raw: str) -> List[str]:
        """
        Decode the stored ingredient list.

        Rows written by older clients may hold a bare string; those come back
        as a single-item list instead of failing the whole response.
        """
        if not raw:
            return []
        try:
            value = json.loads(raw)
        except ValueError:
            logger.warning("recipe_ingredients_not_json raw=%r", raw[:80])
            return [raw]
        if isinstance(value, list):
            return [str(item) for item in value]
        return [str(value)]

    @staticmethod
    def to_response(recipe: Recipe) -> RecipeResponse:
        return RecipeResponse(
            id=recipe.id,
            user_id=recipe.user_id,
            name=recipe.name,
            ingredients=RecipeMapper.load_ingredients(recipe.ingredients),
            instructions=recipe.instructions,
            calories_per_serving=recipe.calories_per_serving,
            created_at=recipe.created_at,
            updated_at=recipe.updated_at,
        )
