# taskboss/repositories/user_stats_repository.py
from typing import Optional
from sqlalchemy.orm import Session

from taskboss.repositories.base_repository import BaseRepository
from taskboss.models.user_stats import UserStats


class UserStatsRepository(BaseRepository[UserStats]):
    """Repository for the per-user gamification counters."""

    def __init__(self, db: Session):
        super().__init__(UserStats, db)

    def get_for_user(self, user_id: int) -> Optional[UserStats]:
        return self.db.query(UserStats).filter(UserStats.user_id == user_id).first()

    def get_or_add(self, user_id: int) -> UserStats:
        """
        Return the user's stats row, adding a zeroed one to the session if
        missing. Does not commit, so the caller decides the transaction.
        """
        stats = self.get_for_user(user_id)
        if stats is None:
            stats = UserStats(
                user_id=user_id,
                total_points=0,
                current_level=1,
                experience_points=0,
                tasks_completed=0,
                goals_completed=0,
                current_streak=0,
                longest_streak=0,
                daily_goal_streak=0,
                total_time_saved=0,
                achievements_unlocked=[],
                preferred_categories=[],
                last_activity=None,
            )
            self.db.add(stats)
        return stats
