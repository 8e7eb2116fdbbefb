# taskboss/api/routes/preferences.py
from typing import Any
import logging

from fastapi import APIRouter, Depends

from taskboss import models, schemas
from taskboss.api import deps
from taskboss.core.logging import log_context
from taskboss.services.preferences_service import PreferencesService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=schemas.Preferences)
def read_preferences(
    current_user: models.User = Depends(deps.get_current_user),
    preferences_service: PreferencesService = Depends(deps.get_preferences_service()),
) -> Any:
    """
    Get the caller's AI model choices, with defaults filled in.
    """
    return preferences_service.get_preferences(current_user.id)


@router.put("", response_model=schemas.Preferences)
def update_preferences(
    *,
    preferences_in: schemas.PreferencesUpdate,
    current_user: models.User = Depends(deps.get_current_user),
    preferences_service: PreferencesService = Depends(deps.get_preferences_service()),
) -> Any:
    with log_context(user_id=current_user.id, action="update_preferences"):
        logger.info(f"User {current_user.id} updating AI model preferences")
        return preferences_service.update_preferences(current_user.id, preferences_in)
