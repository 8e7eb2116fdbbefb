# taskboss/repositories/base_repository.py
from typing import TypeVar, Generic, Type, List, Optional, Any, Dict, Union
from sqlalchemy.orm import Session
from pydantic import BaseModel

from taskboss.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)  # type: ignore


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common CRUD operations.
    Extend this class for specific models.

    The `*_owned` helpers always filter on `user_id`, so a row that belongs
    to someone else behaves exactly like a row that does not exist.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def get_owned(self, user_id: int, id: Any) -> Optional[ModelType]:
        """Get a record by ID only if it belongs to the user."""
        return (
            self.db.query(self.model)
            .filter(self.model.id == id, self.model.user_id == user_id)
            .first()
        )

    def list_owned(
        self, user_id: int, *, skip: int = 0, limit: int = 100, **filters
    ) -> List[ModelType]:
        """List a user's records, newest first, with optional equality filters."""
        query = self.db.query(self.model).filter(self.model.user_id == user_id)

        for key, value in filters.items():
            if value is not None and hasattr(self.model, key):
                query = query.filter(getattr(self.model, key) == value)

        return (
            query.order_by(self.model.created_at.desc(), self.model.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def apply(self, db_obj: ModelType, update_data: Dict[str, Any]) -> ModelType:
        """Set fields on a record without committing."""
        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        self.db.add(db_obj)
        return db_obj

    def update(
        self, db_obj: ModelType, obj_in: Union[Dict[str, Any], BaseModel]
    ) -> ModelType:
        """Update an existing record."""
        if isinstance(obj_in, BaseModel):
            update_data = obj_in.model_dump(exclude_unset=True)
        else:
            update_data = obj_in

        self.apply(db_obj, update_data)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def delete_owned(self, user_id: int, id: Any) -> bool:
        """Delete a record by ID if it belongs to the user."""
        obj = self.get_owned(user_id, id)
        if obj:
            self.db.delete(obj)
            self.db.commit()
            return True
        return False

    def save(self, obj: ModelType) -> ModelType:
        """Save an already instantiated model object."""
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj
