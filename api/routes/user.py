"""User preference routes"""

from fastapi import APIRouter, Depends

from api.dependencies import CurrentUserId, DbSession, get_current_user_id
from domain.mappers import UserMapper
from domain.schemas import (
    CalorieGoalUpdate,
    DietTypeUpdate,
    MessageResponse,
    ProfileUpdateRequest,
    UserResponse,
)
from services.profile_service import ProfileService

router = APIRouter(
    prefix="/user", tags=["User"], dependencies=[Depends(get_current_user_id)]
)


@router.put("/profile", response_model=UserResponse)
def update_profile(payload: ProfileUpdateRequest, user_id: CurrentUserId, db: DbSession):
    user = ProfileService.update_profile(
        db,
        user_id,
        daily_calorie_goal=payload.daily_calorie_goal,
        diet_type=payload.diet_type,
    )
    return UserMapper.to_response(user)


@router.put("/calorie-goal", response_model=MessageResponse)
def update_calorie_goal(payload: CalorieGoalUpdate, user_id: CurrentUserId, db: DbSession):
    ProfileService.update_calorie_goal(db, user_id, payload.daily_calorie_goal)
    return MessageResponse(message="Calorie goal updated successfully")


@router.put("/diet-type", response_model=MessageResponse)
def update_diet_type(payload: DietTypeUpdate, user_id: CurrentUserId, db: DbSession):
    ProfileService.update_diet_type(db, user_id, payload.diet_type)
    return MessageResponse(message="Diet type updated successfully")
