# taskboss/schemas/__init__.py
from taskboss.schemas.token import AuthResponse
from taskboss.schemas.user import User, UserCreate, UserLogin, UserUpdate
from taskboss.schemas.task import Task, TaskCreate, TaskUpdate
from taskboss.schemas.goal import Goal, GoalCreate, GoalUpdate
from taskboss.schemas.user_stats import UserStats, UserStatsUpdate
from taskboss.schemas.preferences import (
    AIModelPreferences,
    AIModelPreferencesUpdate,
    Preferences,
    PreferencesUpdate,
)
from taskboss.schemas.achievement import Achievement, AchievementStatus
from taskboss.schemas.llm import (
    AdviceRequest,
    AssistantReply,
    AssistantRequest,
    ChatChoice,
    ChatCompletionResult,
    ChatMessage,
    ChatRequest,
    HealthStatus,
    LLMInvokeRequest,
    Quote,
    QuoteRequest,
    SuggestedTask,
    TaskAdvice,
)
