"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.base import CamelModel, MessageResponse
from domain.schemas.auth_schemas import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    AuthResponse,
)
from domain.schemas.meal_schemas import MealCreate, MealUpdate, MealResponse
from domain.schemas.recipe_schemas import RecipeCreate, RecipeUpdate, RecipeResponse
from domain.schemas.document_schemas import DocumentResponse
from domain.schemas.user_schemas import (
    ProfileUpdateRequest,
    CalorieGoalUpdate,
    DietTypeUpdate,
)
from domain.schemas.summary_schemas import (
    DailyCalories,
    CategoryCalories,
    FoodFrequency,
    MonthlySummaryResponse,
)

__all__ = [
    "CamelModel",
    "MessageResponse",
    # Auth schemas
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "AuthResponse",
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    # Recipe schemas
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeResponse",
    # Document schemas
    "DocumentResponse",
    # User schemas
    "ProfileUpdateRequest",
    "CalorieGoalUpdate",
    "DietTypeUpdate",
    # Summary schemas
    "DailyCalories",
    "CategoryCalories",
    "FoodFrequency",
    "MonthlySummaryResponse",
]
