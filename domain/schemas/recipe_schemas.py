"""Pydantic schemas for saved recipes."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from domain.schemas.base import CamelModel


def _clean_ingredients(v: Optional[List[str]]) -> Optional[List[str]]:
    if v is None:
        return v
    cleaned = [item.strip() for item in v if item and item.strip()]
    if not cleaned:
        raise ValueError("At least one ingredient is required")
    return cleaned


class RecipeCreate(CamelModel):
    """Schema for saving a new recipe"""

    name: str = Field(..., min_length=1, max_length=255)
    ingredients: List[str] = Field(..., min_length=1)
    instructions: str = Field(..., min_length=1)
    calories_per_serving: int = Field(..., ge=0, le=100000)

    @field_validator("ingredients")
    @classmethod
    def validate_ingredients(cls, v):
        return _clean_ingredients(v)


class RecipeUpdate(CamelModel):
    """Schema for updating a recipe; omitted fields are left unchanged"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    ingredients: Optional[List[str]] = None
    instructions: Optional[str] = Field(None, min_length=1)
    calories_per_serving: Optional[int] = Field(None, ge=0, le=100000)

    @field_validator("ingredients")
    @classmethod
    def validate_ingredients(cls, v):
        return _clean_ingredients(v)


class RecipeResponse(CamelModel):
    """Schema for recipe response, ingredients decoded to a list"""

    id: str
    user_id: str
    name: str
    ingredients: List[str]
    instructions: str
    calories_per_serving: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
