"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from domain.models import User
from domain.schemas.auth_schemas import UserResponse, AuthResponse


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: User) -> UserResponse:
        """Public fields only; the password hash never leaves the service layer."""
        return UserResponse(
            id=user.id,
            email=user.email,
            daily_calorie_goal=user.daily_calorie_goal,
            diet_type=user.diet_type,
        )

    @staticmethod
    def to_auth_response(user: User, token: str) -> AuthResponse:
        return AuthResponse(token=token, user=UserMapper.to_response(user))
