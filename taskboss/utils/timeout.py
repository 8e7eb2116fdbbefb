import asyncio
import logging
from typing import Any, Awaitable

from taskboss.core.exceptions import ServiceTimeoutException

# Set up module logger
logger = logging.getLogger(__name__)


async def with_timeout(
    coro: Awaitable[Any], timeout: float, error_message: str = "Operation timed out"
) -> Any:
    """
    Execute a coroutine with a timeout.

    Args:
        coro: The coroutine to execute
        timeout: Timeout in seconds
        error_message: Custom error message for timeout

    Returns:
        The result of the coroutine

    Raises:
        ServiceTimeoutException: If the operation times out
    """
    try:
        return await asyncio.wait_for(coro, timeout=timeout)
    except asyncio.TimeoutError:
        logger.error(f"Timeout error: {error_message} (limit: {timeout}s)")
        raise ServiceTimeoutException(
            error_message, details={"timeout_seconds": timeout}
        )
