# taskboss/repositories/goal_repository.py
from typing import List, Optional
from sqlalchemy.orm import Session

from taskboss.repositories.base_repository import BaseRepository
from taskboss.models.goal import Goal


class GoalRepository(BaseRepository[Goal]):
    """Repository for goal operations."""

    def __init__(self, db: Session):
        super().__init__(Goal, db)

    def get_user_goals(
        self, user_id: int, skip: int = 0, limit: int = 100
    ) -> List[Goal]:
        return self.list_owned(user_id, skip=skip, limit=limit)

    def get_user_goal_by_id(self, user_id: int, goal_id: int) -> Optional[Goal]:
        return self.get_owned(user_id, goal_id)
