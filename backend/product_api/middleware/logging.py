"""
Product API: Request Logging Middleware
=========================================

What:  Logs every HTTP request on arrival and again on completion.
How:   Emits a timestamped `[<ISO time>] METHOD URL` line before passing
       the request on, then a summary line with status, duration and
       client IP once the response is ready.
Who:   Applied to every request via Starlette middleware.
When:  Right inside the error boundary, before the authentication check.

Levels for the completion line:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Request bodies and header values are never logged.
"""

import logging
import time
from datetime import datetime, timezone

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("product_api.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, URL and timestamp for each request, then its outcome.

    This stage never produces a response of its own. If a downstream
    stage raises, the exception passes straight through to the error
    boundary and no completion line is written.
    """

    # Health checks are polled frequently; keep them out of the access log
    EXCLUDED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        method = request.method
        path = request.url.path

        if path in self.EXCLUDED_PATHS:
            return await call_next(request)

        url = path if not request.url.query else f"{path}?{request.url.query}"
        timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
        logger.info("[%s] %s %s", timestamp, method, url)

        start_time = time.perf_counter()
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms from %s",
            method,
            path,
            status,
            duration_ms,
            client_ip,
            extra={
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
