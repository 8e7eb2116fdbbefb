# taskboss/schemas/preferences.py
from typing import Optional

from pydantic import BaseModel

from taskboss.schemas.base import RequestModel


class AIModelPreferencesUpdate(RequestModel):
    chat_model: Optional[str] = None
    quote_model: Optional[str] = None
    fallback_model: Optional[str] = None


class PreferencesUpdate(RequestModel):
    ai_models: AIModelPreferencesUpdate


class AIModelPreferences(BaseModel):
    chat_model: str
    quote_model: str
    fallback_model: str


class Preferences(BaseModel):
    ai_models: AIModelPreferences
