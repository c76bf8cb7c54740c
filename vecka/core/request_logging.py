# vecka/core/request_logging.py
"""
Request logging middleware for the HTTP API.
"""

import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from vecka.core.logging_config import get_logger

logger = get_logger(__name__)

# Paths logged at DEBUG to keep monitoring probes out of the INFO log
QUIET_PATHS = frozenset({"/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every HTTP request with method, path, status and duration.

    Each request gets a unique id, exposed as the X-Request-ID response header.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"{request.method} {request.url.path} - 500 ({duration_ms:.2f}ms)",
                extra=_extra(request, request_id, 500, duration_ms),
                exc_info=True,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        status_code = response.status_code
        message = f"{request.method} {request.url.path} - {status_code} ({duration_ms:.2f}ms)"
        extra = _extra(request, request_id, status_code, duration_ms)

        if status_code >= 500:
            logger.error(message, extra=extra)
        elif status_code >= 400:
            logger.warning(message, extra=extra)
        elif request.url.path in QUIET_PATHS:
            logger.debug(message, extra=extra)
        else:
            logger.info(message, extra=extra)

        response.headers["X-Request-ID"] = request_id
        return response


def _extra(request: Request, request_id: str, status_code: int, duration_ms: float) -> dict:
    return {
        "extra_fields": {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": round(duration_ms, 2),
        }
    }
