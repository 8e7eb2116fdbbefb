# taskboss/core/config.py
import secrets
from typing import List, Optional, Union, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Environment settings
    ENVIRONMENT: Literal["development", "testing", "production"] = "development"

    # API settings
    API_PREFIX: str = "/api"
    PORT: int = 3001
    JWT_SECRET: str = secrets.token_urlsafe(32)
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 24 hours
    BCRYPT_ROUNDS: int = 10

    # CORS settings
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://localhost:3000",
        "http://localhost:3001",
        "http://localhost:5173",
    ]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None  # Path to log file if file logging is enabled

    # Database settings
    SQLALCHEMY_DATABASE_URI: str = "sqlite:///./taskboss.db"

    # Gamification settings
    POINTS_PER_DIFFICULTY: int = 10
    TIME_BONUS_MINUTES: int = 15
    TIME_BONUS_POINTS: int = 5
    DEFAULT_TASK_DIFFICULTY: int = 5
    DEFAULT_TASK_ESTIMATED_TIME: int = 30
    XP_PER_LEVEL: int = 1000
    GOAL_BASE_POINTS: int = 100
    GOAL_POINTS_PER_DIFFICULTY: int = 20
    GOAL_ALL_TASKS_BONUS: int = 50

    # API Call Timeouts (in seconds)
    LLM_TIMEOUT: int = 60

    # OpenAI
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_API_URL: Optional[str] = None  # None means the SDK default endpoint
    OPENAI_DEFAULT_MODEL: str = "gpt-4o"

    # Per use-case model defaults, overridable per user via preferences
    DEFAULT_CHAT_MODEL: str = "gpt-4o"
    DEFAULT_QUOTE_MODEL: str = "gpt-4o-mini"
    DEFAULT_FALLBACK_MODEL: str = "gpt-4o-mini"

    # Feature flags
    ENABLE_LLM_FEATURES: bool = True

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )


# Create settings instance
settings = Settings()
