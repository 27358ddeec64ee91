"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository, OwnedRepository
from repositories.user_repository import UserRepository
from repositories.meal_repository import MealRepository
from repositories.recipe_repository import RecipeRepository
from repositories.document_repository import DocumentRepository

__all__ = [
    "BaseRepository",
    "OwnedRepository",
    "UserRepository",
    "MealRepository",
    "RecipeRepository",
    "DocumentRepository",
]
