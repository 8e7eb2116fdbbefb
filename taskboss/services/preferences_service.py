# taskboss/services/preferences_service.py
import logging
from typing import Dict, Optional

from sqlalchemy.orm import Session

from taskboss import schemas
from taskboss.core.config import settings
from taskboss.core.constants import AIUseCase
from taskboss.repositories.preferences_repository import PreferencesRepository

logger = logging.getLogger(__name__)

# Which stored preference picks the model for each use case
USE_CASE_PREFERENCE = {
    AIUseCase.CHAT: "chat_model",
    AIUseCase.QUOTE: "quote_model",
    AIUseCase.TASK_ADVICE: "chat_model",
}


def default_ai_models() -> Dict[str, str]:
    return {
        "chat_model": settings.DEFAULT_CHAT_MODEL,
        "quote_model": settings.DEFAULT_QUOTE_MODEL,
        "fallback_model": settings.DEFAULT_FALLBACK_MODEL,
    }


class PreferencesService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = PreferencesRepository(db)

    def get_ai_models(self, user_id: int) -> Dict[str, str]:
        """Stored choices layered over the defaults."""
        ai_models = default_ai_models()
        preferences = self.repository.get_for_user(user_id)
        if preferences and preferences.ai_models:
            ai_models.update(
                {key: value for key, value in preferences.ai_models.items() if value}
            )
        return ai_models

    def get_preferences(self, user_id: int) -> schemas.Preferences:
        return schemas.Preferences(ai_models=self.get_ai_models(user_id))

    def update_preferences(
        self, user_id: int, update_data: schemas.PreferencesUpdate
    ) -> schemas.Preferences:
        preferences = self.repository.get_for_user(user_id)
        stored = dict(preferences.ai_models or {}) if preferences else {}
        stored.update(update_data.ai_models.model_dump(exclude_none=True))
        self.repository.upsert_ai_models(user_id, stored)
        logger.info(f"AI model preferences updated for user {user_id}")
        return self.get_preferences(user_id)

    def model_for(self, user_id: int, use_case: Optional[AIUseCase]) -> str:
        if use_case is None:
            return settings.OPENAI_DEFAULT_MODEL
        return self.get_ai_models(user_id)[USE_CASE_PREFERENCE[use_case]]

    def fallback_model(self, user_id: int) -> str:
        return self.get_ai_models(user_id)["fallback_model"]
