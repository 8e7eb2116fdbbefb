# taskboss/services/achievement_service.py
from typing import List

from sqlalchemy.orm import Session

from taskboss import schemas
from taskboss.core.constants import ACHIEVEMENTS
from taskboss.repositories.user_stats_repository import UserStatsRepository
from taskboss.services.gamification_service import achievement_progress


class AchievementService:
    def __init__(self, db: Session):
        self.db = db
        self.stats_repository = UserStatsRepository(db)

    def get_user_achievements(self, user_id: int) -> List[schemas.AchievementStatus]:
        """
        The catalogue with the caller's progress. An entry counts as unlocked
        if it was recorded on completion or the stats meet it now.
        """
        stats = self.stats_repository.get_for_user(user_id)
        recorded = set(stats.achievements_unlocked or []) if stats else set()

        result = []
        for achievement in ACHIEVEMENTS:
            progress = achievement_progress(stats, achievement) if stats else 0
            result.append(
                schemas.AchievementStatus(
                    **achievement,
                    progress=min(progress, achievement["target"]),
                    unlocked=achievement["id"] in recorded
                    or progress >= achievement["target"],
                )
            )
        return result
