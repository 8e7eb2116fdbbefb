import logging
import time
import uuid
from typing import Any, Dict

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from taskboss.core.logging import request_context

logger = logging.getLogger(__name__)


def _request_url(request: Request) -> str:
    if request.query_params:
        return f"{request.url.path}?{request.query_params}"
    return request.url.path


class RequestIdMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an ID and log its outcome.

    An incoming X-Request-ID header is reused so callers can correlate
    their own logs; otherwise a new UUID is generated. The ID is echoed
    back on the response.
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception as exc:
            self._log_exception(request, exc, start_time)
            raise

        response.headers[self.header_name] = request_id
        self._log_request(request, response, start_time)
        return response

    def _base_log_dict(self, request: Request, start_time: float) -> Dict[str, Any]:
        return {
            "request_id": getattr(request.state, "request_id", "unknown"),
            "method": request.method,
            "url": _request_url(request),
            "process_time_ms": round((time.time() - start_time) * 1000, 2),
            "client_host": request.client.host if request.client else "unknown",
        }

    def _log_request(
        self, request: Request, response: Response, start_time: float
    ) -> None:
        log_dict = self._base_log_dict(request, start_time)
        log_dict["status_code"] = response.status_code

        if response.status_code >= 500:
            logger.error(f"Request failed: {log_dict}")
        elif response.status_code >= 400:
            logger.warning(f"Request error: {log_dict}")
        else:
            logger.info(f"Request completed: {log_dict}")

    def _log_exception(
        self, request: Request, exc: Exception, start_time: float
    ) -> None:
        log_dict = self._base_log_dict(request, start_time)
        log_dict["exception"] = str(exc)
        logger.error(f"Unhandled exception during request: {log_dict}", exc_info=True)


class LogContextMiddleware(BaseHTTPMiddleware):
    """
    Put request information into the logging context for the duration
    of the request, so every record emitted while handling it carries
    the request id and path.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        token = request_context.set(
            {
                "request_id": getattr(request.state, "request_id", "unknown"),
                "method": request.method,
                "path": request.url.path,
            }
        )
        try:
            return await call_next(request)
        finally:
            request_context.reset(token)


def register_middlewares(app: FastAPI) -> None:
    """
    Register all middlewares with the FastAPI app.

    Middleware runs in reverse order of registration, so LogContextMiddleware
    is added first to run after RequestIdMiddleware has assigned the ID.
    """
    app.add_middleware(LogContextMiddleware)
    app.add_middleware(RequestIdMiddleware, header_name="X-Request-ID")
