# taskboss/api/routes/tasks.py
from typing import Any, List, Optional
import logging

from fastapi import APIRouter, Depends, Query, Response, status

from taskboss import models, schemas
from taskboss.api import deps
from taskboss.core.logging import log_context
from taskboss.models.task import TaskStatus
from taskboss.services.task_service import TaskService

# Set up logger
logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[schemas.Task])
def read_tasks(
    skip: int = 0,
    limit: int = 100,
    task_status: Optional[TaskStatus] = Query(None, alias="status"),
    goal_id: Optional[int] = Query(None),
    current_user: models.User = Depends(deps.get_current_user),
    task_service: TaskService = Depends(deps.get_task_service()),
) -> Any:
    """
    Retrieve tasks.
    """
    with log_context(user_id=current_user.id, action="list_tasks"):
        logger.info(f"User {current_user.id} retrieving tasks")
        return task_service.get_tasks(
            user_id=current_user.id,
            skip=skip,
            limit=limit,
            status=task_status,
            goal_id=goal_id,
        )


@router.post("", response_model=schemas.Task, status_code=status.HTTP_201_CREATED)
def create_task(
    *,
    task_in: schemas.TaskCreate,
    current_user: models.User = Depends(deps.get_current_user),
    task_service: TaskService = Depends(deps.get_task_service()),
) -> Any:
    """
    Create new task.
    """
    with log_context(user_id=current_user.id, action="create_task"):
        logger.info(f"User {current_user.id} creating task: {task_in.title}")
        return task_service.create_task(user_id=current_user.id, task_data=task_in)


@router.get("/{task_id}", response_model=schemas.Task)
def read_task(
    *,
    task_id: int,
    current_user: models.User = Depends(deps.get_current_user),
    task_service: TaskService = Depends(deps.get_task_service()),
) -> Any:
    return task_service.get_task(current_user.id, task_id)


@router.put("/{task_id}", response_model=schemas.Task)
def update_task(
    *,
    task_id: int,
    task_in: schemas.TaskUpdate,
    current_user: models.User = Depends(deps.get_current_user),
    task_service: TaskService = Depends(deps.get_task_service()),
) -> Any:
    """
    Update a task. Moving it to `completed` awards points and updates stats.
    """
    with log_context(user_id=current_user.id, action="update_task", task_id=task_id):
        logger.info(f"User {current_user.id} updating task {task_id}")
        return task_service.update_task(
            user_id=current_user.id, task_id=task_id, update_data=task_in
        )


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    *,
    task_id: int,
    current_user: models.User = Depends(deps.get_current_user),
    task_service: TaskService = Depends(deps.get_task_service()),
) -> Response:
    """
    Delete a task.
    """
    with log_context(user_id=current_user.id, action="delete_task", task_id=task_id):
        logger.info(f"User {current_user.id} deleting task {task_id}")
        task_service.delete_task(current_user.id, task_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
