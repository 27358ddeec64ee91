"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Generic, TypeVar, Optional, List, Type
from sqlalchemy.orm import Session
from abc import ABC

from app.exceptions import NotFoundError

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: str) -> Optional[ModelType]:
        """Get entity by primary key"""
        return self.db.get(self.model, entity_id)

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity: ModelType, **fields) -> ModelType:
        """Apply field values to an entity and persist them"""
        for key, value in fields.items():
            if hasattr(entity, key):
                setattr(entity, key, value)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity: ModelType) -> None:
        """Delete an already loaded entity"""
        self.db.delete(entity)
        self.db.commit()


class OwnedRepository(BaseRepository[ModelType]):
    """
    Repository for tables whose rows belong to a single user.

    Every single-record lookup is scoped to the requester, so a row owned by
    someone else behaves exactly like a missing one.
    """

    #: Human readable name used in not-found messages
    label = "Record"

    def get_owned(self, entity_id: str, user_id: str) -> Optional[ModelType]:
        """Get entity by ID, only if it belongs to user_id"""
        return (
            self.db.query(self.model)
            .filter(self.model.id == entity_id, self.model.user_id == user_id)
            .first()
        )

    def require_owned(self, entity_id: str, user_id: str) -> ModelType:
        """Like get_owned(), raising NotFoundError when absent or not owned"""
        entity = self.get_owned(entity_id, user_id)
        if entity is None:
            raise NotFoundError(f"{self.label} not found")
        return entity

    def list_for_user(self, user_id: str) -> List[ModelType]:
        """Get all entities owned by a user"""
        return self.db.query(self.model).filter(self.model.user_id == user_id).all()

    def update_owned(self, entity_id: str, user_id: str, **fields) -> ModelType:
        """Look up an owned entity, apply fields and return the fresh state"""
        entity = self.require_owned(entity_id, user_id)
        return self.update(entity, **fields)

    def delete_owned(self, entity_id: str, user_id: str) -> ModelType:
        """Delete an owned entity, returning the removed row"""
        entity = self.require_owned(entity_id, user_id)
        self.delete(entity)
        return entity
