"""
Product API: Authentication Check Middleware
==============================================

What:  Looks for a credential token in the configured request header and
       logs whether one was sent.
How:   Reads `settings.auth_header` (default `authorization`), records the
       result on `request.state.auth_token_present`, then always forwards.

This stage only observes. It has no rejection path: requests without a
token reach the route handlers exactly like requests with one. The token
value itself is never logged.
"""

import logging
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from product_api.config import settings

logger = logging.getLogger(__name__)


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Non-enforcing check for the presence of an auth header."""

    def __init__(self, app, header_name: Optional[str] = None, **kwargs):
        super().__init__(app, **kwargs)
        self.header_name = (header_name or settings.auth_header).lower()

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        token_present = bool(request.headers.get(self.header_name))
        request.state.auth_token_present = token_present

        if token_present:
            logger.info("Authentication check: Token present.")
        else:
            logger.info("Authentication check: No token present.")

        return await call_next(request)
