"""
Meal Repository - Data access layer for meal logs
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import OwnedRepository
from domain.models import Meal


class MealRepository(OwnedRepository[Meal]):
    """Repository for meal data access"""

    label = "Meal"

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def list_filtered(
        self,
        user_id: str,
        date: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[Meal]:
        """
        Get meals for a user.

        An exact date wins over a range; a range needs both bounds and is
        inclusive. Dates are ISO strings, so string comparison orders them.
        """
        query = self.db.query(Meal).filter(Meal.user_id == user_id)
        if date:
            query = query.filter(Meal.date == date)
        elif start_date and end_date:
            query = query.filter(Meal.date >= start_date, Meal.date <= end_date)
        return query.order_by(Meal.date, Meal.time, Meal.created_at).all()

    def total_calories_for_day(self, user_id: str, date: str) -> int:
        """Sum of calories logged by a user on a date"""
        total = (
            self.db.query(func.coalesce(func.sum(Meal.calories), 0))
            .filter(Meal.user_id == user_id, Meal.date == date)
            .scalar()
        )
        return int(total or 0)
