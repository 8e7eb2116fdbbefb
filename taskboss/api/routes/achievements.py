# taskboss/api/routes/achievements.py
from typing import Any, List

from fastapi import APIRouter, Depends

from taskboss import models, schemas
from taskboss.api import deps
from taskboss.services.achievement_service import AchievementService

router = APIRouter()


@router.get("", response_model=List[schemas.AchievementStatus])
def read_user_achievements(
    current_user: models.User = Depends(deps.get_current_user),
    achievement_service: AchievementService = Depends(deps.get_achievement_service()),
) -> Any:
    """
    Retrieve every achievement with the user's progress towards it.
    """
    return achievement_service.get_user_achievements(current_user.id)
