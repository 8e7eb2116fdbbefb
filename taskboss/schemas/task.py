# taskboss/schemas/task.py
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field

from taskboss.models.task import Priority, TaskStatus
from taskboss.schemas.base import RequestModel, ResponseModel

# Columns a client may explicitly clear by sending null
NULLABLE_TASK_FIELDS = {"goal_id", "description", "due_date"}


class TaskCreate(RequestModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    goal_id: Optional[int] = None
    status: TaskStatus = TaskStatus.PENDING
    priority: Priority = Priority.MEDIUM
    difficulty: int = Field(5, ge=1, le=10)
    estimated_time: int = Field(30, ge=0)
    due_date: Optional[str] = None


# points_earned and completed_at are set by the server on completion,
# so they are absent here and dropped if a client sends them.
class TaskUpdate(RequestModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    goal_id: Optional[int] = None
    status: Optional[TaskStatus] = None
    priority: Optional[Priority] = None
    difficulty: Optional[int] = Field(None, ge=1, le=10)
    estimated_time: Optional[int] = Field(None, ge=0)
    due_date: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        """Fields the client actually sent, minus nulls on required columns."""
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if value is not None or field in NULLABLE_TASK_FIELDS
        }


class Task(ResponseModel):
    id: int
    user_id: int
    goal_id: Optional[int] = None
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: Priority
    difficulty: Optional[int] = None
    estimated_time: Optional[int] = None
    due_date: Optional[str] = None
    completed_at: Optional[datetime] = None
    points_earned: int = 0
    created_at: Optional[datetime] = None
