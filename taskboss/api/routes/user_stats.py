# taskboss/api/routes/user_stats.py
from typing import Any
import logging

from fastapi import APIRouter, Depends

from taskboss import models, schemas
from taskboss.api import deps
from taskboss.core.logging import log_context
from taskboss.services.user_stats_service import UserStatsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=schemas.UserStats)
def read_my_stats(
    current_user: models.User = Depends(deps.get_current_user),
    stats_service: UserStatsService = Depends(deps.get_user_stats_service()),
) -> Any:
    """
    Get the caller's points, level and streaks.
    """
    with log_context(user_id=current_user.id, action="get_user_stats"):
        return stats_service.get_my_stats(current_user.id)


@router.post("/reset", response_model=schemas.UserStats)
def reset_my_stats(
    current_user: models.User = Depends(deps.get_current_user),
    stats_service: UserStatsService = Depends(deps.get_user_stats_service()),
) -> Any:
    """
    Reset all progress back to level 1. Tasks and goals are kept.
    """
    with log_context(user_id=current_user.id, action="reset_user_stats"):
        logger.info(f"User {current_user.id} resetting their progress")
        return stats_service.reset_progress(current_user.id)


@router.get("/{stats_id}", response_model=schemas.UserStats)
def read_stats(
    *,
    stats_id: int,
    current_user: models.User = Depends(deps.get_current_user),
    stats_service: UserStatsService = Depends(deps.get_user_stats_service()),
) -> Any:
    return stats_service.get_stats(current_user.id, stats_id)


@router.put("/{stats_id}", response_model=schemas.UserStats)
def update_stats(
    *,
    stats_id: int,
    stats_in: schemas.UserStatsUpdate,
    current_user: models.User = Depends(deps.get_current_user),
    stats_service: UserStatsService = Depends(deps.get_user_stats_service()),
) -> Any:
    with log_context(user_id=current_user.id, action="update_user_stats"):
        logger.info(f"User {current_user.id} updating stats {stats_id}")
        return stats_service.update_stats(current_user.id, stats_id, stats_in)
