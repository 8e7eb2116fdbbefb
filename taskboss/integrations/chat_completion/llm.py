# taskboss/integrations/chat_completion/llm.py
import logging
from typing import Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError

from taskboss.core.config import settings
from taskboss.core.exceptions import FeatureNotAvailableException, LLMServiceException
from taskboss.schemas.llm import ChatCompletionResult
from taskboss.utils.timeout import with_timeout

logger = logging.getLogger(__name__)


class ChatCompletionService:
    """
    Thin async wrapper around the OpenAI chat-completions API.

    The SDK client is created on first use so the app starts without an
    API key; calls made without one fail with an `llm_error`.
    """

    def __init__(self, client: Optional[AsyncOpenAI] = None):
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            if not settings.OPENAI_API_KEY:
                raise LLMServiceException("OpenAI API key is not configured")
            self._client = AsyncOpenAI(
                api_key=settings.OPENAI_API_KEY, base_url=settings.OPENAI_API_URL
            )
        return self._client

    async def complete(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        json_response: bool = False,
        temperature: float = 0.7,
    ) -> ChatCompletionResult:
        """
        Run one chat completion.

        Raises:
            LLMServiceException: provider error or empty reply
            ServiceTimeoutException: no answer within LLM_TIMEOUT
        """
        if not settings.ENABLE_LLM_FEATURES:
            raise FeatureNotAvailableException("LLM features are disabled")

        model = model or settings.OPENAI_DEFAULT_MODEL
        request = {
            "model": model,
            "messages": messages,
            "temperature": temperature,
        }
        if json_response:
            request["response_format"] = {"type": "json_object"}

        logger.info(f"Calling LLM API with model: {model}, json_response: {json_response}")

        try:
            response = await with_timeout(
                self.client.chat.completions.create(**request),
                timeout=settings.LLM_TIMEOUT,
                error_message="LLM API call timed out",
            )
        except OpenAIError as e:
            logger.error(f"Error calling LLM API with model {model}: {str(e)}")
            raise LLMServiceException(
                "LLM provider request failed",
                details={"model": model, "reason": str(e)},
            )

        if not response.choices:
            raise LLMServiceException(
                "LLM provider returned no choices", details={"model": model}
            )

        choice = response.choices[0]
        return ChatCompletionResult(
            content=choice.message.content or "",
            model=getattr(response, "model", None) or model,
            finish_reason=choice.finish_reason,
        )
