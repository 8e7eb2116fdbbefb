# taskboss/repositories/user_repository.py
from typing import Any, Dict, Optional
from sqlalchemy.orm import Session

from taskboss import models, schemas
from taskboss.core.security import get_password_hash


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> Optional[models.User]:
        """Get user by ID."""
        return self.db.get(models.User, user_id)

    def get_by_email(self, email: str) -> Optional[models.User]:
        """Get user by email."""
        return self.db.query(models.User).filter(models.User.email == email).first()

    def update_me(
        self, user: models.User, update_data: schemas.UserUpdate
    ) -> models.User:
        """Update profile fields and persist changes."""
        update_user_dict: Dict[str, Any] = update_data.model_dump(exclude_unset=True)
        password = update_user_dict.pop("password", None)
        if password:
            user.password = get_password_hash(password)

        for field, value in update_user_dict.items():
            # Nulls would violate NOT NULL columns
            if value is None and field != "picture":
                continue
            setattr(user, field, value)

        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def create_user(self, create_data: schemas.UserCreate) -> models.User:
        """Create the user together with a zeroed stats row."""
        user = models.User(
            email=create_data.email,
            full_name=create_data.full_name,
            password=get_password_hash(create_data.password),
        )
        user.stats = models.UserStats(
            total_points=0,
            current_level=1,
            experience_points=0,
            tasks_completed=0,
            goals_completed=0,
            current_streak=0,
            longest_streak=0,
            achievements_unlocked=[],
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
