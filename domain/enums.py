"""
Domain enums for NutriTrack application.
Contains all enumeration types used across the domain models.
"""

import enum


class MealCategory(str, enum.Enum):
    """Meal slot a logged meal belongs to"""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


class DocumentType(str, enum.Enum):
    """Kinds of documents a user can upload"""

    DIET_PLAN = "diet-plan"
    CONSULTATION = "consultation"
