# taskboss/repositories/preferences_repository.py
from typing import Any, Dict, Optional
from sqlalchemy.orm import Session

from taskboss.repositories.base_repository import BaseRepository
from taskboss.models.user_preferences import UserPreferences


class PreferencesRepository(BaseRepository[UserPreferences]):
    def __init__(self, db: Session):
        super().__init__(UserPreferences, db)

    def get_for_user(self, user_id: int) -> Optional[UserPreferences]:
        return (
            self.db.query(UserPreferences)
            .filter(UserPreferences.user_id == user_id)
            .first()
        )

    def upsert_ai_models(
        self, user_id: int, ai_models: Dict[str, Any]
    ) -> UserPreferences:
        """Replace the stored model map, creating the row on first save."""
        preferences = self.get_for_user(user_id)
        if preferences is None:
            preferences = UserPreferences(user_id=user_id)
        # Assign a new dict so the change is detected on flush
        preferences.ai_models = dict(ai_models)
        return self.save(preferences)
