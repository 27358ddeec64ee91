"""
Monthly nutrition summary.

``build_monthly_summary`` is a pure reduction over meal rows so it can be
used on any list of meals; ``SummaryService`` loads the requester's meals for
the month and applies it.
"""

import calendar
import re
from collections import Counter, defaultdict
from datetime import date
from typing import Iterable, Optional, Tuple
from sqlalchemy.orm import Session

from domain.enums import MealCategory
from domain.models import Meal
from domain.schemas.summary_schemas import (
    CategoryCalories,
    DailyCalories,
    FoodFrequency,
    MonthlySummaryResponse,
)
from repositories import MealRepository
from app.exceptions import ServiceValidationError

MOST_LOGGED_LIMIT = 5
_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")
_CATEGORY_ORDER = [c.value for c in MealCategory]


def parse_month(value: Optional[str], today: Optional[date] = None) -> Tuple[int, int]:
    """Parse ``YYYY-MM``; None means the current month."""
    if not value:
        today = today or date.today()
        return today.year, today.month
    match = _MONTH_RE.match(value.strip())
    if not match or not 1 <= int(match.group(2)) <= 12:
        raise ServiceValidationError("month must be in YYYY-MM format")
    return int(match.group(1)), int(match.group(2))


def month_bounds(year: int, month: int) -> Tuple[str, str]:
    """First and last ISO dates of a month, inclusive"""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1).isoformat(), date(year, month, last_day).isoformat()


def _category_key(category: str):
    if category in _CATEGORY_ORDER:
        return (0, _CATEGORY_ORDER.index(category), category)
    return (1, 0, category)


def build_monthly_summary(
    meals: Iterable[Meal], year: int, month: int
) -> MonthlySummaryResponse:
    """
    Reduce a month of meals into totals and breakdowns.

    Meals dated outside the month are ignored. The daily series always has
    one entry per calendar day, zero where nothing was logged.
    """
    days_in_month = calendar.monthrange(year, month)[1]
    prefix = f"{year:04d}-{month:02d}-"

    per_day = defaultdict(int)
    per_category = defaultdict(int)
    names = Counter()
    total = 0
    logged = 0

    for meal in meals:
        if not meal.date or not meal.date.startswith(prefix):
            continue
        day = int(meal.date[len(prefix):])
        per_day[day] += meal.calories
        per_category[meal.category] += meal.calories
        names[meal.name] += 1
        total += meal.calories
        logged += 1

    most_logged = sorted(names.items(), key=lambda item: (-item[1], item[0]))
    return MonthlySummaryResponse(
        month=f"{year:04d}-{month:02d}",
        total_calories=total,
        daily_average=round(total / days_in_month) if logged else 0,
        meals_logged=logged,
        daily=[
            DailyCalories(day=day, calories=per_day.get(day, 0))
            for day in range(1, days_in_month + 1)
        ],
        by_category=[
            CategoryCalories(category=category, calories=per_category[category])
            for category in sorted(per_category, key=_category_key)
        ],
        most_logged=[
            FoodFrequency(name=name, count=count)
            for name, count in most_logged[:MOST_LOGGED_LIMIT]
        ],
    )


class SummaryService:
    """Monthly aggregates over a user's meals"""

    @staticmethod
    def monthly_summary(
        db: Session, user_id: str, month: Optional[str] = None
    ) -> MonthlySummaryResponse:
        year, month_number = parse_month(month)
        start, end = month_bounds(year, month_number)
        meals = MealRepository(db).list_filtered(user_id, start_date=start, end_date=end)
        return build_monthly_summary(meals, year, month_number)
