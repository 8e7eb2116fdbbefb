# taskboss/schemas/achievement.py
from pydantic import BaseModel

from taskboss.core.constants import AchievementRarity


class Achievement(BaseModel):
    id: str
    title: str
    description: str
    rarity: AchievementRarity
    points: int
    metric: str
    target: int


class AchievementStatus(Achievement):
    progress: int
    unlocked: bool
