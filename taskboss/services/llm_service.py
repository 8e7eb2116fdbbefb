# taskboss/services/llm_service.py
import json
import logging
import random
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError
from sqlalchemy.orm import Session

from taskboss import schemas
from taskboss.core.constants import ADVICE_PROMPTS, FALLBACK_QUOTES, AIUseCase
from taskboss.core.exceptions import (
    LLMResponseParseException,
    LLMServiceException,
    ResourceNotFoundException,
    ServiceTimeoutException,
)
from taskboss.integrations.chat_completion import ChatCompletionService
from taskboss.repositories.task_repository import TaskRepository
from taskboss.services.preferences_service import PreferencesService

logger = logging.getLogger(__name__)

JSON_INSTRUCTION = "You must respond with a single JSON object, nothing else."

QUOTE_SCHEMA = {
    "type": "object",
    "properties": {
        "quote": {"type": "string"},
        "author": {"type": "string"},
        "translation": {"type": "string"},
    },
    "required": ["quote", "author"],
}

ASSISTANT_SCHEMA = {
    "type": "object",
    "properties": {
        "response": {"type": "string"},
        "suggested_tasks": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "title": {"type": "string"},
                    "description": {"type": "string"},
                    "estimated_time": {"type": "number"},
                    "difficulty": {"type": "number"},
                    "category": {"type": "string"},
                    "priority": {
                        "type": "string",
                        "enum": ["low", "medium", "high", "urgent"],
                    },
                },
                "required": ["title"],
            },
        },
    },
    "required": ["response"],
}


def build_messages(
    prompt: str,
    response_json_schema: Optional[Union[Dict[str, Any], bool]] = None,
    system_prompt: Optional[str] = None,
) -> List[Dict[str, str]]:
    """
    Messages for a single-prompt call. When a schema is requested the
    system message asks for JSON and carries the schema itself.
    """
    system_parts = [system_prompt] if system_prompt else []
    if response_json_schema:
        system_parts.append(JSON_INSTRUCTION)
        if isinstance(response_json_schema, dict):
            system_parts.append(
                "The JSON must match this schema:\n"
                + json.dumps(response_json_schema, ensure_ascii=False)
            )

    messages = []
    if system_parts:
        messages.append({"role": "system", "content": "\n\n".join(system_parts)})
    messages.append({"role": "user", "content": prompt})
    return messages


def parse_json_reply(content: str) -> Any:
    try:
        return json.loads(content)
    except ValueError:
        logger.error(f"Invalid JSON response from LLM: {content[:100]}...")
        raise LLMResponseParseException(
            "Failed to parse LLM response as JSON",
            details={"raw_response": content},
        )


class LLMService:
    """
    Server side of every AI feature: model selection, the fallback retry,
    JSON prompting and the prompt templates.
    """

    def __init__(
        self, db: Session, chat_completion_service: Optional[ChatCompletionService] = None
    ):
        self.db = db
        self.chat_completion_service = chat_completion_service or ChatCompletionService()
        self.preferences_service = PreferencesService(db)
        self.task_repository = TaskRepository(db)

    async def _complete(
        self,
        user_id: int,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        use_case: Optional[AIUseCase] = None,
        json_response: bool = False,
    ) -> schemas.ChatCompletionResult:
        """Call the primary model, retrying once with the fallback on provider failure."""
        primary = model or self.preferences_service.model_for(user_id, use_case)
        fallback = self.preferences_service.fallback_model(user_id)

        try:
            return await self.chat_completion_service.complete(
                messages, model=primary, json_response=json_response
            )
        except LLMServiceException as e:
            if not fallback or fallback == primary:
                raise
            logger.warning(
                f"Model {primary} failed ({e.message}), retrying with {fallback}"
            )
            return await self.chat_completion_service.complete(
                messages, model=fallback, json_response=json_response
            )

    async def invoke(self, user_id: int, request: schemas.LLMInvokeRequest) -> Any:
        """
        Forward a prompt to the LLM.

        With a schema the parsed JSON value is returned, otherwise
        `{"response": text}`.
        """
        json_response = bool(request.response_json_schema)
        result = await self._complete(
            user_id,
            build_messages(request.prompt, request.response_json_schema),
            model=request.model,
            use_case=request.use_case,
            json_response=json_response,
        )
        if json_response:
            return parse_json_reply(result.content)
        return {"response": result.content}

    async def chat(self, user_id: int, request: schemas.ChatRequest) -> schemas.ChatChoice:
        result = await self._complete(
            user_id,
            [message.model_dump() for message in request.messages],
            model=request.model,
            use_case=AIUseCase.CHAT,
        )
        return schemas.ChatChoice(
            index=0,
            message=schemas.ChatMessage(role="assistant", content=result.content),
            finish_reason=result.finish_reason,
        )

    async def motivational_quote(
        self, user_id: int, request: schemas.QuoteRequest
    ) -> schemas.Quote:
        """A short motivational quote; a built-in one if no model delivers."""
        prompt = "Give me a short, inspiring motivational quote about productivity and getting things done."
        if request.language:
            prompt += f" Also provide a translation of the quote into {request.language} in the `translation` field."

        try:
            result = await self._complete(
                user_id,
                build_messages(prompt, QUOTE_SCHEMA),
                use_case=AIUseCase.QUOTE,
                json_response=True,
            )
            return schemas.Quote.model_validate(parse_json_reply(result.content))
        except (
            LLMServiceException,
            LLMResponseParseException,
            ServiceTimeoutException,
            ValidationError,
        ) as e:
            logger.warning(f"Serving a fallback quote: {str(e)}")
            return schemas.Quote(**random.choice(FALLBACK_QUOTES))

    async def assistant(
        self, user_id: int, request: schemas.AssistantRequest
    ) -> schemas.AssistantReply:
        system_prompt = (
            "You are a productivity assistant. Answer the user's message helpfully "
            "and, where it makes sense, suggest concrete tasks they could add. "
            "Difficulty is 1-10, estimated_time is in minutes."
        )
        if request.language:
            system_prompt += f" Respond in {request.language}."

        result = await self._complete(
            user_id,
            build_messages(request.message, ASSISTANT_SCHEMA, system_prompt),
            use_case=AIUseCase.CHAT,
            json_response=True,
        )
        data = parse_json_reply(result.content)
        try:
            return schemas.AssistantReply.model_validate(data)
        except ValidationError:
            raise LLMResponseParseException(
                "LLM response did not match the expected format",
                details={"raw_response": result.content},
            )

    async def task_advice(
        self, user_id: int, task_id: int, request: schemas.AdviceRequest
    ) -> schemas.TaskAdvice:
        task = self.task_repository.get_user_task_by_id(user_id, task_id)
        if not task:
            raise ResourceNotFoundException(f"Task with ID {task_id} not found")

        prompt = ADVICE_PROMPTS[request.mode].format(title=task.title)
        if task.description:
            prompt += f"\nTask details: {task.description}"
        if request.language:
            prompt += f"\nRespond in {request.language}."

        result = await self._complete(
            user_id, build_messages(prompt), use_case=AIUseCase.TASK_ADVICE
        )
        return schemas.TaskAdvice(
            task_id=task.id, mode=request.mode, response=result.content
        )
