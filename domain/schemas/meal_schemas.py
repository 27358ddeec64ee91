from datetime import date as date_type, datetime, time as time_type
from typing import Optional

from pydantic import Field, field_validator

from domain.enums import MealCategory
from domain.schemas.base import CamelModel


def _check_date(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    try:
        date_type.fromisoformat(v)
    except ValueError:
        raise ValueError("date must be a valid YYYY-MM-DD date")
    return v


def _check_time(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    try:
        time_type.fromisoformat(v)
    except ValueError:
        raise ValueError("time must be a valid HH:MM time")
    return v


class MealCreate(CamelModel):
    """Schema for logging a new meal"""

    name: str = Field(..., min_length=1, max_length=255)
    category: MealCategory
    calories: int = Field(..., ge=0, le=100000, description="Calories in kcal")
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    time: str = Field(..., pattern=r"^\d{2}:\d{2}$", description="HH:MM")
    notes: Optional[str] = None

    @field_validator("date")
    @classmethod
    def validate_date(cls, v):
        return _check_date(v)

    @field_validator("time")
    @classmethod
    def validate_time(cls, v):
        return _check_time(v)


class MealUpdate(CamelModel):
    """Schema for updating a meal; omitted fields are left unchanged"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[MealCategory] = None
    calories: Optional[int] = Field(None, ge=0, le=100000)
    date: Optional[str] = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    time: Optional[str] = Field(None, pattern=r"^\d{2}:\d{2}$")
    notes: Optional[str] = None

    @field_validator("date")
    @classmethod
    def validate_date(cls, v):
        return _check_date(v)

    @field_validator("time")
    @classmethod
    def validate_time(cls, v):
        return _check_time(v)


class MealResponse(CamelModel):
    """Schema for meal response"""

    id: str
    user_id: str
    name: str
    category: str
    calories: int
    date: str
    time: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
