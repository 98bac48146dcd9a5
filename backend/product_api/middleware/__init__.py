# Middleware package init
"""
Product API: Middleware Package
=================================

What:  Cross-cutting stages applied to every request before route dispatch.

Middleware Chain (order matters!):
    Request → [Error Boundary] → [Logging] → [Auth Check] → Route Handler

    1. Error Boundary FIRST: Wraps everything after it, so an exception
       from any later stage or handler becomes a uniform 500 response
    2. Logging: Timestamped request line, then status and duration
    3. Auth Check: Notes whether a credential header was sent; never rejects

    Every stage forwards unconditionally. Only the error boundary produces
    a response of its own, and only when something downstream raised.
"""

from product_api.middleware.authentication import AuthenticationMiddleware
from product_api.middleware.error_boundary import ErrorBoundaryMiddleware
from product_api.middleware.logging import RequestLoggingMiddleware

__all__ = [
    "AuthenticationMiddleware",
    "ErrorBoundaryMiddleware",
    "RequestLoggingMiddleware",
]
