# taskboss/schemas/llm.py
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from taskboss.core.constants import AdviceMode, AIUseCase
from taskboss.schemas.base import RequestModel


class LLMInvokeRequest(RequestModel):
    prompt: str = Field(..., min_length=1)
    # Either a JSON schema describing the expected reply, or just `true`
    response_json_schema: Optional[Union[Dict[str, Any], bool]] = None
    model: Optional[str] = None
    use_case: Optional[AIUseCase] = None


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(RequestModel):
    messages: List[ChatMessage] = Field(..., min_length=1)
    model: Optional[str] = None


class ChatChoice(BaseModel):
    index: int = 0
    message: ChatMessage
    finish_reason: Optional[str] = None


class ChatCompletionResult(BaseModel):
    """What came back from the provider for one completion."""

    content: str
    model: str
    finish_reason: Optional[str] = None


class QuoteRequest(RequestModel):
    language: Optional[str] = None


class Quote(BaseModel):
    quote: str
    author: Optional[str] = None
    translation: Optional[str] = None


class AssistantRequest(RequestModel):
    message: str = Field(..., min_length=1)
    language: Optional[str] = None


class SuggestedTask(BaseModel):
    title: str
    description: Optional[str] = None
    estimated_time: Optional[int] = None
    difficulty: Optional[int] = None
    category: Optional[str] = None
    priority: Optional[str] = None

    @field_validator("estimated_time", "difficulty", mode="before")
    @classmethod
    def round_numbers(cls, v):
        # Models happily answer 22.5 minutes
        if isinstance(v, float):
            return round(v)
        return v


class AssistantReply(BaseModel):
    response: str
    suggested_tasks: List[SuggestedTask] = []


class AdviceRequest(RequestModel):
    mode: AdviceMode
    language: Optional[str] = None


class TaskAdvice(BaseModel):
    task_id: int
    mode: AdviceMode
    response: str


class HealthStatus(BaseModel):
    status: str
    database: bool
    timestamp: datetime
