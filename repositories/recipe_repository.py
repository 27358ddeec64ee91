"""
Recipe Repository - Data access layer for saved recipes
"""

from typing import List
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import OwnedRepository
from domain.models import Recipe


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class RecipeRepository(OwnedRepository[Recipe]):
    """Repository for recipe data access"""

    label = "Recipe"

    def __init__(self, db: Session):
        super().__init__(db, Recipe)

    def list_for_user(self, user_id: str) -> List[Recipe]:
        """Get all recipes for a user, newest first"""
        return (
            self.db.query(Recipe)
            .filter(Recipe.user_id == user_id)
            .order_by(Recipe.created_at.desc(), Recipe.name)
            .all()
        )

    def search_by_name(self, user_id: str, term: str) -> List[Recipe]:
        """Case-insensitive substring match on recipe name"""
        pattern = f"%{_escape_like(term.lower())}%"
        return (
            self.db.query(Recipe)
            .filter(
                Recipe.user_id == user_id,
                func.lower(Recipe.name).like(pattern, escape="\\"),
            )
            .order_by(Recipe.name)
            .all()
        )
