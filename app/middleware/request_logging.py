"""Per-request access log for the Timeline API."""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("app.requests")


def _describe(request: Request) -> str:
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    return f"{request.method} {target}"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request and its response status with the handling time."""

    async def dispatch(self, request: Request, call_next):
        description = _describe(request)
        logger.debug(f"Request: {description}")

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        log = logger.warning if response.status_code >= 500 else logger.info
        log(f"{description} -> {response.status_code} ({elapsed_ms:.1f}ms)")
        return response
