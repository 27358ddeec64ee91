from pydantic import Field, field_validator

from domain.schemas.base import CamelModel


class Credentials(CamelModel):
    """Email/password pair used by register and login"""

    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class RegisterRequest(Credentials):
    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        if "@" not in v:
            raise ValueError("Email must contain '@'")
        return v


class LoginRequest(Credentials):
    pass


class UserResponse(CamelModel):
    """Public view of a user account"""

    id: str
    email: str
    daily_calorie_goal: int
    diet_type: str


class AuthResponse(CamelModel):
    """Token issued at login/registration together with the user"""

    token: str
    user: UserResponse
