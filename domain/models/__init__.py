"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.user import User, DEFAULT_CALORIE_GOAL, DEFAULT_DIET_TYPE
from domain.models.meal import Meal
from domain.models.recipe import Recipe
from domain.models.document import Document

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # Models
    "User",
    "Meal",
    "Recipe",
    "Document",
    # Defaults
    "DEFAULT_CALORIE_GOAL",
    "DEFAULT_DIET_TYPE",
]
