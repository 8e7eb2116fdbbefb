# taskboss/api/routes/users.py
from typing import Any
import logging

from fastapi import APIRouter, Depends

from taskboss import models, schemas
from taskboss.services.user_service import UserService
from taskboss.api import deps
from taskboss.core.logging import log_context

# Set up logger
logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/me", response_model=schemas.User)
def read_user_me(
    current_user: models.User = Depends(deps.get_current_user),
) -> Any:
    """
    Get current user.
    """
    with log_context(user_id=current_user.id, action="get_current_user"):
        logger.info(f"User {current_user.id} retrieving their profile")
        return current_user


@router.put("/me", response_model=schemas.User)
def update_user_me(
    *,
    user_in: schemas.UserUpdate,
    current_user: models.User = Depends(deps.get_current_user),
    user_service: UserService = Depends(deps.get_user_service()),
) -> Any:
    """
    Update own profile. Email cannot be changed here.
    """
    with log_context(user_id=current_user.id, action="update_user"):
        logger.info(f"User {current_user.id} updating their profile")
        return user_service.update_me(current_user.id, user_in)
