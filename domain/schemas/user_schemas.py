from typing import Optional

from pydantic import Field, field_validator

from domain.schemas.base import CamelModel


def _strip_diet_type(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("Diet type is required")
    return v


class ProfileUpdateRequest(CamelModel):
    """Partial update of user preferences"""

    daily_calorie_goal: Optional[int] = Field(None, gt=0, le=20000)
    diet_type: Optional[str] = Field(None, max_length=50)

    @field_validator("diet_type")
    @classmethod
    def validate_diet_type(cls, v):
        return _strip_diet_type(v)


class CalorieGoalUpdate(CamelModel):
    daily_calorie_goal: int = Field(..., gt=0, le=20000)


class DietTypeUpdate(CamelModel):
    diet_type: str = Field(..., max_length=50)

    @field_validator("diet_type")
    @classmethod
    def validate_diet_type(cls, v):
        return _strip_diet_type(v)
