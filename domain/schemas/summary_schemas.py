from typing import List

from domain.schemas.base import CamelModel


class DailyCalories(CamelModel):
    """Calories logged on one day of the month"""

    day: int
    calories: int


class CategoryCalories(CamelModel):
    """Calories aggregated by meal category"""

    category: str
    calories: int


class FoodFrequency(CamelModel):
    """How often a meal name was logged"""

    name: str
    count: int


class MonthlySummaryResponse(CamelModel):
    """Monthly nutrition summary"""

    month: str  # "YYYY-MM"
    total_calories: int
    daily_average: int
    meals_logged: int
    daily: List[DailyCalories]
    by_category: List[CategoryCalories]
    most_logged: List[FoodFrequency]
