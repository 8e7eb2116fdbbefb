# taskboss/api/routes/llm.py
from typing import Any, Optional
import logging

from fastapi import APIRouter, Depends

from taskboss import models, schemas
from taskboss.api import deps
from taskboss.core.logging import log_context
from taskboss.services.llm_service import LLMService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/llm/invoke")
async def invoke_llm(
    *,
    request_in: schemas.LLMInvokeRequest,
    current_user: models.User = Depends(deps.get_current_user),
    llm_service: LLMService = Depends(deps.get_llm_service()),
) -> Any:
    """
    Forward a prompt to the language model.

    Returns the parsed JSON object when `response_json_schema` is given,
    otherwise `{"response": "..."}`.
    """
    with log_context(user_id=current_user.id, action="llm_invoke"):
        logger.info(
            f"LLM request from user {current_user.id}: {request_in.prompt[:100]}"
        )
        return await llm_service.invoke(current_user.id, request_in)


@router.post("/chat", response_model=schemas.ChatChoice)
async def chat(
    *,
    request_in: schemas.ChatRequest,
    current_user: models.User = Depends(deps.get_current_user),
    llm_service: LLMService = Depends(deps.get_llm_service()),
) -> Any:
    with log_context(user_id=current_user.id, action="chat"):
        logger.info(
            f"Chat request from user {current_user.id} with {len(request_in.messages)} messages"
        )
        return await llm_service.chat(current_user.id, request_in)


@router.post("/ai/quote", response_model=schemas.Quote)
async def motivational_quote(
    *,
    request_in: Optional[schemas.QuoteRequest] = None,
    current_user: models.User = Depends(deps.get_current_user),
    llm_service: LLMService = Depends(deps.get_llm_service()),
) -> Any:
    """
    A motivational quote, optionally translated. The body may be omitted.
    """
    with log_context(user_id=current_user.id, action="ai_quote"):
        return await llm_service.motivational_quote(
            current_user.id, request_in or schemas.QuoteRequest()
        )


@router.post("/ai/assistant", response_model=schemas.AssistantReply)
async def assistant(
    *,
    request_in: schemas.AssistantRequest,
    current_user: models.User = Depends(deps.get_current_user),
    llm_service: LLMService = Depends(deps.get_llm_service()),
) -> Any:
    """
    Answer a free-form message and suggest tasks.
    """
    with log_context(user_id=current_user.id, action="ai_assistant"):
        return await llm_service.assistant(current_user.id, request_in)


@router.post("/ai/tasks/{task_id}/advice", response_model=schemas.TaskAdvice)
async def task_advice(
    *,
    task_id: int,
    request_in: schemas.AdviceRequest,
    current_user: models.User = Depends(deps.get_current_user),
    llm_service: LLMService = Depends(deps.get_llm_service()),
) -> Any:
    with log_context(
        user_id=current_user.id, action="task_advice", task_id=task_id
    ):
        logger.info(f"User {current_user.id} asked for {request_in.mode.value} advice")
        return await llm_service.task_advice(current_user.id, task_id, request_in)
