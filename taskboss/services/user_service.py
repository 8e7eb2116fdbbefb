# taskboss/services/user_service.py
from typing import Optional
from sqlalchemy.orm import Session
import logging

from taskboss import models, schemas
from taskboss.repositories.user_repository import UserRepository
from taskboss.core.exceptions import (
    AuthenticationException,
    DuplicateResourceException,
    ResourceNotFoundException,
)
from taskboss.core.security import create_access_token, verify_password

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = UserRepository(db)

    def get_user_by_id(self, user_id: int) -> Optional[models.User]:
        """Get user by ID."""
        return self.repository.get_by_id(user_id)

    def create_user(self, create_data: schemas.UserCreate) -> models.User:
        existing_email = self.repository.get_by_email(create_data.email)
        if existing_email:
            raise DuplicateResourceException(
                f"User with email {create_data.email} already exists"
            )

        user = self.repository.create_user(create_data)
        logger.info(f"Registered user {user.id}")
        return user

    def register(self, create_data: schemas.UserCreate) -> schemas.AuthResponse:
        user = self.create_user(create_data)
        return schemas.AuthResponse(
            user=schemas.User.model_validate(user),
            token=create_access_token(user.id, user.email),
            message="User registered successfully",
        )

    def authenticate(self, email: str, password: str) -> models.User:
        user = self.repository.get_by_email(email)
        # Same message for both cases so emails cannot be probed
        if not user or not verify_password(password, user.password):
            logger.warning(f"Failed login attempt for {email}")
            raise AuthenticationException("Invalid credentials")
        return user

    def login(self, login_data: schemas.UserLogin) -> schemas.AuthResponse:
        user = self.authenticate(login_data.email, login_data.password)
        logger.info(f"User {user.id} logged in")
        return schemas.AuthResponse(
            user=schemas.User.model_validate(user),
            token=create_access_token(user.id, user.email),
            message="Login successful",
        )

    def update_me(self, user_id: int, update_data: schemas.UserUpdate) -> models.User:
        user = self.repository.get_by_id(user_id)
        if not user:
            raise ResourceNotFoundException(f"User with ID {user_id} not found")
        return self.repository.update_me(user, update_data)
