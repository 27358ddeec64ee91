from typing import Optional
from sqlalchemy.orm import Session
import logging

from domain.models import User
from repositories import UserRepository
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("nutritrack.profile")


class ProfileService:
    """Business logic for user preferences"""

    @staticmethod
    def _require_user(db: Session, user_id: str) -> User:
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            logger.warning(f"profile_not_found user_id={user_id}")
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def update_profile(
        db: Session,
        user_id: str,
        daily_calorie_goal: Optional[int] = None,
        diet_type: Optional[str] = None,
    ) -> User:
        """Apply whichever preferences were supplied and return the user"""
        user = ProfileService._require_user(db, user_id)

        fields = {}
        if daily_calorie_goal is not None:
            fields["daily_calorie_goal"] = daily_calorie_goal
        if diet_type is not None:
            fields["diet_type"] = diet_type
        if not fields:
            return user

        user = UserRepository(db).update(user, **fields)
        logger.info(f"profile_updated user_id={user_id} fields={sorted(fields)}")
        return user

    @staticmethod
    def update_calorie_goal(db: Session, user_id: str, goal: int) -> User:
        if goal is None or goal <= 0:
            raise ServiceValidationError("Valid calorie goal is required")
        return ProfileService.update_profile(db, user_id, daily_calorie_goal=goal)

    @staticmethod
    def update_diet_type(db: Session, user_id: str, diet_type: str) -> User:
        if not diet_type or not diet_type.strip():
            raise ServiceValidationError("Diet type is required")
        return ProfileService.update_profile(db, user_id, diet_type=diet_type.strip())
