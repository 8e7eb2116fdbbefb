from taskboss.integrations.chat_completion.llm import ChatCompletionService


def get_chat_completion_service() -> ChatCompletionService:
    """
    Provides a ChatCompletionService instance for dependency injection.
    """
    return ChatCompletionService()
