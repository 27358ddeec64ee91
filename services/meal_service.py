"""
Meal logging.

Creating a meal also decides whether it pushed the user's total for that day
across their calorie goal; the caller is responsible for delivering the
resulting alert.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealUpdate
from repositories import MealRepository, UserRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("nutritrack.meals")

# Columns that may be cleared with an explicit null
_NULLABLE = {"notes"}


@dataclass
class GoalAlert:
    """A day's total moved from below the goal to at or above it"""

    email: str
    date: str
    total_calories: int
    goal: int


def crossed_goal(before: int, after: int, goal: int) -> bool:
    return before < goal <= after


class MealService:
    """Business logic for meal logs"""

    @staticmethod
    def list_meals(
        db: Session,
        user_id: str,
        date: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[Meal]:
        return MealRepository(db).list_filtered(
            user_id, date=date, start_date=start_date, end_date=end_date
        )

    @staticmethod
    def get_meal(db: Session, user_id: str, meal_id: str) -> Meal:
        return MealRepository(db).require_owned(meal_id, user_id)

    @staticmethod
    def create_meal(
        db: Session, user_id: str, payload: MealCreate
    ) -> Tuple[Meal, Optional[GoalAlert]]:
        """
        Log a meal and check the owner's daily goal.

        Returns:
            The stored meal and, when this meal is the one that reached the
            goal for its date, a GoalAlert describing it. Later meals on the
            same day return None.
        """
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")

        meal_repo = MealRepository(db)
        meal = meal_repo.create(
            Meal(
                user_id=user_id,
                name=payload.name,
                category=payload.category.value,
                calories=payload.calories,
                date=payload.date,
                time=payload.time,
                notes=payload.notes,
            )
        )
        logger.info(f"meal_created user_id={user_id} meal_id={meal.id} date={meal.date}")

        after = meal_repo.total_calories_for_day(user_id, meal.date)
        before = after - meal.calories
        goal = user.daily_calorie_goal
        if not crossed_goal(before, after, goal):
            return meal, None

        logger.info(
            f"calorie_goal_reached user_id={user_id} date={meal.date} "
            f"total={after} goal={goal}"
        )
        alert = GoalAlert(email=user.email, date=meal.date, total_calories=after, goal=goal)
        return meal, alert

    @staticmethod
    def update_meal(db: Session, user_id: str, meal_id: str, payload: MealUpdate) -> Meal:
        fields = {}
        for key, value in payload.model_dump(exclude_unset=True).items():
            if value is None and key not in _NULLABLE:
                continue
            fields[key] = value
        if "category" in fields:
            fields["category"] = payload.category.value

        meal = MealRepository(db).update_owned(meal_id, user_id, **fields)
        logger.info(f"meal_updated user_id={user_id} meal_id={meal_id}")
        return meal

    @staticmethod
    def delete_meal(db: Session, user_id: str, meal_id: str) -> None:
        MealRepository(db).delete_owned(meal_id, user_id)
        logger.info(f"meal_deleted user_id={user_id} meal_id={meal_id}")
