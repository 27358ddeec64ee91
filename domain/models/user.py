"""
User-related database models.
"""

from sqlalchemy import Column, String, Integer, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base
from domain.models.mixins import new_id

DEFAULT_CALORIE_GOAL = 2000
DEFAULT_DIET_TYPE = "balanced"


class User(Base):
    """User account with credentials and nutrition preferences"""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    daily_calorie_goal = Column(Integer, nullable=False, default=DEFAULT_CALORIE_GOAL)
    diet_type = Column(String(50), nullable=False, default=DEFAULT_DIET_TYPE)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    meals = relationship("Meal", back_populates="user", cascade="all, delete-orphan")
    recipes = relationship(
        "Recipe", back_populates="user", cascade="all, delete-orphan"
    )
    documents = relationship(
        "Document", back_populates="user", cascade="all, delete-orphan"
    )
