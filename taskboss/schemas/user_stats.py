# taskboss/schemas/user_stats.py
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from taskboss.schemas.base import RequestModel, ResponseModel


class UserStatsUpdate(RequestModel):
    total_points: Optional[int] = Field(None, ge=0)
    current_level: Optional[int] = Field(None, ge=1)
    experience_points: Optional[int] = Field(None, ge=0)
    tasks_completed: Optional[int] = Field(None, ge=0)
    goals_completed: Optional[int] = Field(None, ge=0)
    current_streak: Optional[int] = Field(None, ge=0)
    longest_streak: Optional[int] = Field(None, ge=0)
    total_time_saved: Optional[int] = Field(None, ge=0)
    achievements_unlocked: Optional[List[str]] = None
    daily_goal_streak: Optional[int] = Field(None, ge=0)
    preferred_categories: Optional[List[str]] = None
    last_activity: Optional[datetime] = None

    def changes(self) -> Dict[str, Any]:
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class UserStats(ResponseModel):
    id: int
    user_id: int
    total_points: int = 0
    current_level: int = 1
    experience_points: int = 0
    tasks_completed: int = 0
    goals_completed: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    total_time_saved: int = 0
    achievements_unlocked: List[str] = []
    daily_goal_streak: int = 0
    preferred_categories: List[str] = []
    last_activity: Optional[datetime] = None
