# taskboss/api/deps.py
import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from taskboss.core import security
from taskboss.core.config import settings
from taskboss.core.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ResourceNotFoundException,
)
from taskboss.models.user import User
from taskboss.services.achievement_service import AchievementService
from taskboss.services.goal_service import GoalService
from taskboss.services.llm_service import LLMService
from taskboss.services.preferences_service import PreferencesService
from taskboss.services.task_service import TaskService
from taskboss.services.user_service import UserService
from taskboss.services.user_stats_service import UserStatsService
from taskboss.utils.dependencies import get_service

logger = logging.getLogger(__name__)

# Missing tokens are reported by get_current_user, not by the scheme
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_PREFIX}/auth/login", auto_error=False
)


# Service dependencies - defined as functions that will be called at runtime
# These will only be evaluated after services have been registered
def get_user_service():
    return get_service(UserService)


def get_task_service():
    return get_service(TaskService)


def get_goal_service():
    return get_service(GoalService)


def get_user_stats_service():
    return get_service(UserStatsService)


def get_preferences_service():
    return get_service(PreferencesService)


def get_achievement_service():
    return get_service(AchievementService)


def get_llm_service():
    return get_service(LLMService)


# Authentication dependencies
async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    user_service: UserService = Depends(get_user_service()),
) -> User:
    """
    Get the current authenticated user.

    Raises:
        AuthenticationException: no bearer token (401)
        AuthorizationException: token invalid or expired (403)
        ResourceNotFoundException: token valid but the user is gone (404)
    """
    if not token:
        raise AuthenticationException("Access token required")

    try:
        payload = security.decode_access_token(token)
        user_id = int(payload["sub"])
    except (JWTError, KeyError, TypeError, ValueError):
        logger.warning("Rejected invalid or expired token")
        raise AuthorizationException("Invalid or expired token")

    user = user_service.get_user_by_id(user_id)
    if not user:
        raise ResourceNotFoundException("User not found")

    return user
