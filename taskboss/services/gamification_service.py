"""
Points, levels, streaks and achievements.

Everything here is a pure function of its arguments so the same rules are
used by every code path that completes a task, and so they are easy to test.
"""
import math
from datetime import datetime
from typing import Any, Iterable, List, Optional, Tuple

from taskboss.core.config import settings
from taskboss.core.constants import ACHIEVEMENTS


def calculate_task_points(
    difficulty: Optional[int] = None, estimated_time: Optional[int] = None
) -> int:
    """
    Points awarded for completing a task.

    difficulty * 10 + floor(estimated_time / 15) * 5, with missing values
    taken from the task defaults.
    """
    if difficulty is None:
        difficulty = settings.DEFAULT_TASK_DIFFICULTY
    if estimated_time is None:
        estimated_time = settings.DEFAULT_TASK_ESTIMATED_TIME

    time_bonus = math.floor(estimated_time / settings.TIME_BONUS_MINUTES)
    return difficulty * settings.POINTS_PER_DIFFICULTY + time_bonus * settings.TIME_BONUS_POINTS


def calculate_goal_points(
    difficulty: Optional[int] = None, all_tasks_completed: bool = False
) -> int:
    """100 + difficulty * 20, plus 50 when every linked task is done."""
    if difficulty is None:
        difficulty = settings.DEFAULT_TASK_DIFFICULTY

    points = settings.GOAL_BASE_POINTS + difficulty * settings.GOAL_POINTS_PER_DIFFICULTY
    if all_tasks_completed:
        points += settings.GOAL_ALL_TASKS_BONUS
    return points


def calculate_level(experience_points: int) -> int:
    """Level for a given amount of XP. Level 1 starts at 0 XP."""
    return max(experience_points // settings.XP_PER_LEVEL + 1, 1)


def next_streak(
    current: int,
    longest: int,
    last_activity: Optional[datetime],
    now: datetime,
) -> Tuple[int, int]:
    """
    Return (current_streak, longest_streak) after activity at `now`.

    Calendar days are compared, not 24h windows. Activity on the same day
    keeps a running streak, activity on the next day extends it, and
    anything else starts over at 1.
    """
    current = current or 0
    longest = longest or 0

    if last_activity is None or current <= 0:
        new_current = 1
    else:
        days = (now.date() - last_activity.date()).days
        if days == 0:
            new_current = current
        elif days == 1:
            new_current = current + 1
        else:
            new_current = 1

    return new_current, max(longest, new_current)


def _metric_value(stats: Any, metric: str) -> int:
    if isinstance(stats, dict):
        value = stats.get(metric)
    else:
        value = getattr(stats, metric, None)
    return value or 0


def achievement_progress(stats: Any, achievement: dict) -> int:
    return _metric_value(stats, achievement["metric"])


def evaluate_achievements(
    stats: Any, catalogue: Iterable[dict] = ACHIEVEMENTS
) -> List[str]:
    """Ids of every achievement whose target the stats have reached."""
    return [
        achievement["id"]
        for achievement in catalogue
        if achievement_progress(stats, achievement) >= achievement["target"]
    ]
