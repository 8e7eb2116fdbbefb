# taskboss/api/routes/auth.py
from typing import Any
import logging

from fastapi import APIRouter, Depends, status

from taskboss import schemas
from taskboss.api import deps
from taskboss.core.logging import log_context
from taskboss.services.user_service import UserService

# Set up logger
logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=schemas.AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    *,
    user_in: schemas.UserCreate,
    user_service: UserService = Depends(deps.get_user_service()),
) -> Any:
    """
    Create a new account and log it in.
    """
    with log_context(action="register", email=user_in.email):
        logger.info(f"Registering new user with email: {user_in.email}")
        return user_service.register(user_in)


@router.post("/login", response_model=schemas.AuthResponse)
def login(
    *,
    login_input: schemas.UserLogin,
    user_service: UserService = Depends(deps.get_user_service()),
) -> Any:
    """
    Login with email and password, get a token for future requests.
    """
    with log_context(action="login_attempt", email=login_input.email):
        logger.info(f"Login attempt for email: {login_input.email}")
        return user_service.login(login_input)
