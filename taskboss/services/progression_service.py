# taskboss/services/progression_service.py
import logging
from datetime import datetime
from typing import List, Tuple

from sqlalchemy.orm import Session

from taskboss import models
from taskboss.repositories.user_stats_repository import UserStatsRepository
from taskboss.services.gamification_service import (
    calculate_level,
    evaluate_achievements,
    next_streak,
)

logger = logging.getLogger(__name__)


class ProgressionService:
    """
    Applies the effects of a completed task or goal to the user's stats.

    Nothing in here commits: the caller owns the transaction so the task
    (or goal) and the stats are written together.
    """

    def __init__(self, db: Session):
        self.db = db
        self.stats_repository = UserStatsRepository(db)

    def handle_task_completion(
        self, user_id: int, task: models.Task, now: datetime
    ) -> Tuple[models.UserStats, List[str]]:
        """Returns the updated stats and the achievement ids unlocked just now."""
        stats = self.stats_repository.get_or_add(user_id)
        stats.tasks_completed = (stats.tasks_completed or 0) + 1
        newly_unlocked = self._apply_points(
            stats, task.points_earned or 0, now, f"task {task.id}"
        )
        return stats, newly_unlocked

    def handle_goal_completion(
        self, user_id: int, goal: models.Goal, now: datetime
    ) -> Tuple[models.UserStats, List[str]]:
        stats = self.stats_repository.get_or_add(user_id)
        stats.goals_completed = (stats.goals_completed or 0) + 1
        newly_unlocked = self._apply_points(
            stats, goal.points_earned or 0, now, f"goal {goal.id}"
        )
        return stats, newly_unlocked

    def _apply_points(
        self, stats: models.UserStats, points: int, now: datetime, source: str
    ) -> List[str]:
        initial_level = stats.current_level or 1

        stats.total_points = (stats.total_points or 0) + points
        stats.experience_points = (stats.experience_points or 0) + points
        stats.current_level = calculate_level(stats.experience_points)

        stats.current_streak, stats.longest_streak = next_streak(
            stats.current_streak, stats.longest_streak, stats.last_activity, now
        )
        stats.last_activity = now

        newly_unlocked = self._unlock_achievements(stats)

        logger.info(
            f"User {stats.user_id} earned {points} points for {source} "
            f"(level {initial_level} -> {stats.current_level}, "
            f"streak {stats.current_streak})"
        )
        return newly_unlocked

    def _unlock_achievements(self, stats: models.UserStats) -> List[str]:
        unlocked = list(stats.achievements_unlocked or [])
        newly_unlocked = [
            achievement_id
            for achievement_id in evaluate_achievements(stats)
            if achievement_id not in unlocked
        ]
        if newly_unlocked:
            # Assign a new list so the JSON column is marked dirty
            stats.achievements_unlocked = unlocked + newly_unlocked
            logger.info(f"Unlocked achievements: {', '.join(newly_unlocked)}")
        return newly_unlocked
