# taskboss/schemas/goal.py
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from taskboss.models.goal import GoalStatus
from taskboss.models.task import Priority
from taskboss.schemas.base import RequestModel, ResponseModel

NULLABLE_GOAL_FIELDS = {"description", "due_date"}


class GoalCreate(RequestModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    status: GoalStatus = GoalStatus.ACTIVE
    priority: Priority = Priority.MEDIUM
    category: str = "personal"
    difficulty: int = Field(5, ge=1, le=10)
    estimated_time: int = Field(60, ge=0)
    due_date: Optional[str] = None
    tags: List[str] = []


# points_earned and completed_at are set by the server on completion
class GoalUpdate(RequestModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    status: Optional[GoalStatus] = None
    priority: Optional[Priority] = None
    category: Optional[str] = None
    difficulty: Optional[int] = Field(None, ge=1, le=10)
    estimated_time: Optional[int] = Field(None, ge=0)
    due_date: Optional[str] = None
    tags: Optional[List[str]] = None

    def changes(self) -> Dict[str, Any]:
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if value is not None or field in NULLABLE_GOAL_FIELDS
        }


class Goal(ResponseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    status: GoalStatus
    priority: Priority
    category: Optional[str] = None
    difficulty: Optional[int] = None
    estimated_time: Optional[int] = None
    due_date: Optional[str] = None
    tags: List[str] = []
    completed_at: Optional[datetime] = None
    points_earned: int = 0
    progress: int = 0  # percent of linked tasks completed
    created_at: Optional[datetime] = None
