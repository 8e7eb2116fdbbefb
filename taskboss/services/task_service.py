# taskboss/services/task_service.py
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from taskboss import schemas
from taskboss.core.exceptions import ResourceNotFoundException
from taskboss.models.task import Task, TaskStatus
from taskboss.repositories.goal_repository import GoalRepository
from taskboss.repositories.task_repository import TaskRepository
from taskboss.services.gamification_service import calculate_task_points
from taskboss.services.progression_service import ProgressionService

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task operations."""

    def __init__(self, db: Session):
        self.db = db
        self.repository = TaskRepository(db)
        self.goal_repository = GoalRepository(db)
        self.progression_service = ProgressionService(db)

    def get_tasks(
        self,
        user_id: int,
        skip: int = 0,
        limit: int = 100,
        status: Optional[TaskStatus] = None,
        goal_id: Optional[int] = None,
    ) -> List[Task]:
        """Get tasks for a user with optional filtering."""
        return self.repository.get_user_tasks(
            user_id=user_id, skip=skip, limit=limit, status=status, goal_id=goal_id
        )

    def get_task(self, user_id: int, task_id: int) -> Task:
        task = self.repository.get_user_task_by_id(user_id, task_id)
        if not task:
            raise ResourceNotFoundException(f"Task with ID {task_id} not found")
        return task

    def _check_goal(self, user_id: int, goal_id: Optional[int]) -> None:
        if goal_id is not None and not self.goal_repository.get_user_goal_by_id(
            user_id, goal_id
        ):
            raise ResourceNotFoundException(f"Goal with ID {goal_id} not found")

    def create_task(self, user_id: int, task_data: schemas.TaskCreate) -> Task:
        """Create a new task. A task created as completed is scored right away."""
        self._check_goal(user_id, task_data.goal_id)

        task = Task(**task_data.model_dump(), user_id=user_id, points_earned=0)

        if task.status == TaskStatus.COMPLETED:
            return self._complete(user_id, task)

        task = self.repository.save(task)
        logger.info(f"Task created successfully with ID {task.id}")
        return task

    def update_task(
        self, user_id: int, task_id: int, update_data: schemas.TaskUpdate
    ) -> Task:
        """Update an existing task, applying completion effects on the transition."""
        task = self.get_task(user_id, task_id)
        changes = update_data.changes()
        if "goal_id" in changes:
            self._check_goal(user_id, changes["goal_id"])

        was_completed_before = task.status == TaskStatus.COMPLETED
        self.repository.apply(task, changes)

        # A task scores once, even if it is reopened and completed again
        if (
            not was_completed_before
            and task.status == TaskStatus.COMPLETED
            and not task.points_earned
        ):
            return self._complete(user_id, task)

        return self.repository.save(task)

    def delete_task(self, user_id: int, task_id: int) -> None:
        if not self.repository.delete_owned(user_id, task_id):
            raise ResourceNotFoundException(f"Task with ID {task_id} not found")
        logger.info(f"Task {task_id} deleted")

    def _complete(self, user_id: int, task: Task) -> Task:
        """Score the task and update stats in a single commit."""
        now = datetime.utcnow()
        try:
            task.points_earned = calculate_task_points(
                task.difficulty, task.estimated_time
            )
            task.completed_at = now
            self.db.add(task)
            # Flush so a newly created task has an id for logging
            self.db.flush()
            self.progression_service.handle_task_completion(user_id, task, now)
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.error(f"Completing task for user {user_id} failed, rolled back")
            raise

        self.db.refresh(task)
        logger.info(f"Task {task.id} completed for {task.points_earned} points")
        return task
