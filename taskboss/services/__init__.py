"""
Service registry module.

This module registers all services with the dependency injection system.
"""
# Import all service classes
from taskboss.services.achievement_service import AchievementService
from taskboss.services.goal_service import GoalService
from taskboss.services.llm_service import LLMService
from taskboss.services.preferences_service import PreferencesService
from taskboss.services.task_service import TaskService
from taskboss.services.user_service import UserService
from taskboss.services.user_stats_service import UserStatsService


def register_services():
    """Register all services with the dependency injection system."""
    # Import register_service inside the function to avoid circular imports
    from taskboss.utils.dependencies import register_service

    # Register each service with its factory function
    register_service(UserService, lambda db: UserService(db))
    register_service(TaskService, lambda db: TaskService(db))
    register_service(GoalService, lambda db: GoalService(db))
    register_service(UserStatsService, lambda db: UserStatsService(db))
    register_service(PreferencesService, lambda db: PreferencesService(db))
    register_service(AchievementService, lambda db: AchievementService(db))
    register_service(LLMService, lambda db: LLMService(db))
