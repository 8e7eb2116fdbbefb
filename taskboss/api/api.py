# taskboss/api/api.py
from fastapi import APIRouter

from taskboss.api.routes import (
    achievements,
    auth,
    goals,
    health,
    llm,
    preferences,
    tasks,
    user_stats,
    users,
)

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(goals.router, prefix="/goals", tags=["goals"])
api_router.include_router(
    user_stats.router, prefix="/user-stats", tags=["user_stats"]
)
api_router.include_router(
    preferences.router, prefix="/user/preferences", tags=["preferences"]
)
api_router.include_router(
    achievements.router, prefix="/achievements", tags=["achievements"]
)
api_router.include_router(llm.router, tags=["llm"])
