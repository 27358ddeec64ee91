"""Meal log routes"""

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status
from typing import List, Optional

from api.dependencies import CurrentUserId, DbSession, get_current_user_id
from domain.schemas import (
    MealCreate,
    MealResponse,
    MealUpdate,
    MessageResponse,
    MonthlySummaryResponse,
)
from services.meal_service import MealService
from services.notification_service import NotificationService
from services.summary_service import SummaryService

router = APIRouter(
    prefix="/meals", tags=["Meals"], dependencies=[Depends(get_current_user_id)]
)

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


@router.get("", response_model=List[MealResponse])
def list_meals(
    user_id: CurrentUserId,
    db: DbSession,
    date: Optional[str] = Query(None, pattern=DATE_PATTERN),
    start_date: Optional[str] = Query(None, alias="startDate", pattern=DATE_PATTERN),
    end_date: Optional[str] = Query(None, alias="endDate", pattern=DATE_PATTERN),
):
    """
    List the caller's meals.

    ``date`` selects one day. Otherwise ``startDate`` and ``endDate`` together
    select an inclusive range; with neither, every meal is returned.
    """
    meals = MealService.list_meals(
        db, user_id, date=date, start_date=start_date, end_date=end_date
    )
    return [MealResponse.model_validate(m) for m in meals]


@router.get("/summary", response_model=MonthlySummaryResponse)
def monthly_summary(
    user_id: CurrentUserId,
    db: DbSession,
    month: Optional[str] = Query(None, description="YYYY-MM, defaults to this month"),
):
    return SummaryService.monthly_summary(db, user_id, month)


@router.get("/{meal_id}", response_model=MealResponse)
def get_meal(meal_id: str, user_id: CurrentUserId, db: DbSession):
    return MealResponse.model_validate(MealService.get_meal(db, user_id, meal_id))


@router.post("", response_model=MealResponse, status_code=status.HTTP_201_CREATED)
def create_meal(
    payload: MealCreate,
    background_tasks: BackgroundTasks,
    user_id: CurrentUserId,
    db: DbSession,
):
    """Log a meal; reaching the daily goal queues a congratulation email."""
    meal, alert = MealService.create_meal(db, user_id, payload)
    if alert is not None:
        background_tasks.add_task(
            NotificationService.send_goal_reached,
            alert.email,
            alert.total_calories,
            alert.goal,
        )
    return MealResponse.model_validate(meal)


@router.put("/{meal_id}", response_model=MealResponse)
def update_meal(meal_id: str, payload: MealUpdate, user_id: CurrentUserId, db: DbSession):
    return MealResponse.model_validate(MealService.update_meal(db, user_id, meal_id, payload))


@router.delete("/{meal_id}", response_model=MessageResponse)
def delete_meal(meal_id: str, user_id: CurrentUserId, db: DbSession):
    MealService.delete_meal(db, user_id, meal_id)
    return MessageResponse(message="Meal deleted successfully")
