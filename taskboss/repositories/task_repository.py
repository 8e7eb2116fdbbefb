# taskboss/repositories/task_repository.py
from typing import List, Optional
from sqlalchemy.orm import Session

from taskboss.repositories.base_repository import BaseRepository
from taskboss.models.task import Task, TaskStatus


class TaskRepository(BaseRepository[Task]):
    """Repository for task operations."""

    def __init__(self, db: Session):
        super().__init__(Task, db)

    def get_user_tasks(
        self,
        user_id: int,
        skip: int = 0,
        limit: int = 100,
        status: Optional[TaskStatus] = None,
        goal_id: Optional[int] = None,
    ) -> List[Task]:
        """Get tasks for a specific user with optional filtering."""
        return self.list_owned(
            user_id, skip=skip, limit=limit, status=status, goal_id=goal_id
        )

    def get_user_task_by_id(self, user_id: int, task_id: int) -> Optional[Task]:
        """Get a specific task for a user."""
        return self.get_owned(user_id, task_id)
