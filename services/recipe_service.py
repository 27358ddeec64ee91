from typing import List
from sqlalchemy.orm import Session
import logging

from domain.models import Recipe
from domain.mappers import RecipeMapper
from domain.schemas.recipe_schemas import RecipeCreate, RecipeUpdate
from repositories import RecipeRepository
from app.exceptions import ServiceValidationError

logger = logging.getLogger("nutritrack.recipes")


class RecipeService:
    """Business logic for saved recipes"""

    @staticmethod
    def list_recipes(db: Session, user_id: str) -> List[Recipe]:
        return RecipeRepository(db).list_for_user(user_id)

    @staticmethod
    def search_recipes(db: Session, user_id: str, query: str) -> List[Recipe]:
        """Name substring search within the user's own recipes."""
        term = (query or "").strip()
        if not term:
            raise ServiceValidationError("Search query is required")
        results = RecipeRepository(db).search_by_name(user_id, term)
        logger.info(f"recipes_searched user_id={user_id} q={term!r} hits={len(results)}")
        return results

    @staticmethod
    def get_recipe(db: Session, user_id: str, recipe_id: str) -> Recipe:
        return RecipeRepository(db).require_owned(recipe_id, user_id)

    @staticmethod
    def create_recipe(db: Session, user_id: str, payload: RecipeCreate) -> Recipe:
        recipe = RecipeRepository(db).create(
            Recipe(
                user_id=user_id,
                name=payload.name,
                ingredients=RecipeMapper.dump_ingredients(payload.ingredients),
                instructions=payload.instructions,
                calories_per_serving=payload.calories_per_serving,
            )
        )
        logger.info(f"recipe_created user_id={user_id} recipe_id={recipe.id}")
        return recipe

    @staticmethod
    def update_recipe(
        db: Session, user_id: str, recipe_id: str, payload: RecipeUpdate
    ) -> Recipe:
        fields = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None
        }
        if "ingredients" in fields:
            fields["ingredients"] = RecipeMapper.dump_ingredients(fields["ingredients"])

        recipe = RecipeRepository(db).update_owned(recipe_id, user_id, **fields)
        logger.info(f"recipe_updated user_id={user_id} recipe_id={recipe_id}")
        return recipe

    @staticmethod
    def delete_recipe(db: Session, user_id: str, recipe_id: str) -> None:
        RecipeRepository(db).delete_owned(recipe_id, user_id)
        logger.info(f"recipe_deleted user_id={user_id} recipe_id={recipe_id}")
