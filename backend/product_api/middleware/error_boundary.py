"""
Product API: Error Boundary Middleware
========================================

What:  Converts any exception escaping the rest of the pipeline into a
       uniform HTTP 500 JSON response.
How:   Outermost application middleware; wraps `call_next` in a single
       try/except and builds the response itself.
When:  Only for unexpected errors. Not-found and validation failures are
       raised as ProductAPIError subclasses and turned into 404/400 by the
       exception handlers in main.py before they ever reach this stage.

Response body:
    {
        "message": "Something went wrong on the server.",
        "error": "<str(exception)>"
    }

The full traceback is logged server-side.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong on the server."


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """Terminal fallback turning uncaught exceptions into 500 responses."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                "Unhandled error on %s %s: %s",
                request.method,
                request.url.path,
                exc,
                exc_info=True,
            )
            return JSONResponse(
                status_code=500,
                content={"message": GENERIC_ERROR_MESSAGE, "error": str(exc)},
            )
