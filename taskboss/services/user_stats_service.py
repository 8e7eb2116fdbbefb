# taskboss/services/user_stats_service.py
import logging

from sqlalchemy.orm import Session

from taskboss import models, schemas
from taskboss.core.exceptions import ResourceNotFoundException
from taskboss.repositories.user_stats_repository import UserStatsRepository
from taskboss.services.gamification_service import calculate_level

logger = logging.getLogger(__name__)


class UserStatsService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = UserStatsRepository(db)

    def get_my_stats(self, user_id: int) -> models.UserStats:
        """The caller's stats, created zeroed for accounts that predate them."""
        stats = self.repository.get_for_user(user_id)
        if stats is None:
            logger.info(f"Creating missing stats row for user {user_id}")
            stats = self.repository.save(self.repository.get_or_add(user_id))
        return stats

    def get_stats(self, user_id: int, stats_id: int) -> models.UserStats:
        stats = self.repository.get_owned(user_id, stats_id)
        if not stats:
            raise ResourceNotFoundException(f"User stats with ID {stats_id} not found")
        return stats

    def update_stats(
        self, user_id: int, stats_id: int, update_data: schemas.UserStatsUpdate
    ) -> models.UserStats:
        stats = self.get_stats(user_id, stats_id)
        changes = update_data.changes()
        # Level follows XP unless the client sets it explicitly
        if "experience_points" in changes and "current_level" not in changes:
            changes["current_level"] = calculate_level(changes["experience_points"])
        return self.repository.update(stats, changes)

    def reset_progress(self, user_id: int) -> models.UserStats:
        """Zero every counter. Tasks and goals are left alone."""
        stats = self.repository.get_or_add(user_id)
        self.repository.apply(
            stats,
            {
                "total_points": 0,
                "current_level": 1,
                "experience_points": 0,
                "tasks_completed": 0,
                "goals_completed": 0,
                "current_streak": 0,
                "longest_streak": 0,
                "daily_goal_streak": 0,
                "total_time_saved": 0,
                "achievements_unlocked": [],
                "last_activity": None,
            },
        )
        stats = self.repository.save(stats)
        logger.info(f"Progress reset for user {user_id}")
        return stats
