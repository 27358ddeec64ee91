"""Services package - Business logic layer"""

from services.auth_service import AuthService
from services.profile_service import ProfileService
from services.meal_service import MealService, GoalAlert
from services.recipe_service import RecipeService
from services.document_service import DocumentService
from services.notification_service import NotificationService
from services.summary_service import SummaryService, build_monthly_summary

__all__ = [
    "AuthService",
    "ProfileService",
    "MealService",
    "GoalAlert",
    "RecipeService",
    "DocumentService",
    "NotificationService",
    "SummaryService",
    "build_monthly_summary",
]
