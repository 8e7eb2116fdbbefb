# taskboss/models/__init__.py
from taskboss.models.user import User
from taskboss.models.task import Task, TaskStatus, Priority
from taskboss.models.goal import Goal, GoalStatus
from taskboss.models.user_stats import UserStats
from taskboss.models.user_preferences import UserPreferences
