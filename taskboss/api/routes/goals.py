# taskboss/api/routes/goals.py
from typing import Any, List
import logging

from fastapi import APIRouter, Depends, Response, status

from taskboss import models, schemas
from taskboss.api import deps
from taskboss.core.logging import log_context
from taskboss.services.goal_service import GoalService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[schemas.Goal])
def read_goals(
    skip: int = 0,
    limit: int = 100,
    current_user: models.User = Depends(deps.get_current_user),
    goal_service: GoalService = Depends(deps.get_goal_service()),
) -> Any:
    """
    Retrieve goals.
    """
    with log_context(user_id=current_user.id, action="list_goals"):
        return goal_service.get_goals(current_user.id, skip=skip, limit=limit)


@router.post("", response_model=schemas.Goal, status_code=status.HTTP_201_CREATED)
def create_goal(
    *,
    goal_in: schemas.GoalCreate,
    current_user: models.User = Depends(deps.get_current_user),
    goal_service: GoalService = Depends(deps.get_goal_service()),
) -> Any:
    with log_context(user_id=current_user.id, action="create_goal"):
        logger.info(f"User {current_user.id} creating goal: {goal_in.title}")
        return goal_service.create_goal(current_user.id, goal_in)


@router.get("/{goal_id}", response_model=schemas.Goal)
def read_goal(
    *,
    goal_id: int,
    current_user: models.User = Depends(deps.get_current_user),
    goal_service: GoalService = Depends(deps.get_goal_service()),
) -> Any:
    return goal_service.get_goal(current_user.id, goal_id)


@router.put("/{goal_id}", response_model=schemas.Goal)
def update_goal(
    *,
    goal_id: int,
    goal_in: schemas.GoalUpdate,
    current_user: models.User = Depends(deps.get_current_user),
    goal_service: GoalService = Depends(deps.get_goal_service()),
) -> Any:
    with log_context(user_id=current_user.id, action="update_goal", goal_id=goal_id):
        logger.info(f"User {current_user.id} updating goal {goal_id}")
        return goal_service.update_goal(current_user.id, goal_id, goal_in)


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_goal(
    *,
    goal_id: int,
    current_user: models.User = Depends(deps.get_current_user),
    goal_service: GoalService = Depends(deps.get_goal_service()),
) -> Response:
    """
    Delete a goal. Its tasks stay, unlinked.
    """
    with log_context(user_id=current_user.id, action="delete_goal", goal_id=goal_id):
        logger.info(f"User {current_user.id} deleting goal {goal_id}")
        goal_service.delete_goal(current_user.id, goal_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
