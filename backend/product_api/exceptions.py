"""
Product API: Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the expected failure cases.
How:   Each exception carries a client-facing message and an optional
       context dict. Handlers registered in main.py turn them into
       `{"message": ...}` JSON responses with the matching status code.
Who:   Raised by the service layer; caught by the global handlers.

Exception Hierarchy:
    ProductAPIError (base)
    ├── ValidationError   → 400 Bad Request
    └── NotFoundError     → 404 Not Found

Anything outside this hierarchy is unexpected and ends up in the error
boundary middleware as a 500.
"""

from typing import Any, Dict, Optional


class ProductAPIError(Exception):
    """
    Base exception for all Product API application errors.

    Attributes:
        message:  User-facing error description (returned in the response body)
        context:  Additional debug info (logged, never returned to the client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ProductAPIError):
    """
    Raised when client input fails the create/update checks.

    When:    Missing name or price on create, non-numeric price on create
             or update.
    HTTP:    400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(ProductAPIError):
    """
    Raised when a product id does not exist in the store.

    The message always names the id, with an optional suffix describing
    the attempted action:

        NotFoundError("42")                → "Product with id 42 not found."
        NotFoundError("42", "for update")  → "Product with id 42 not found for update."

    HTTP:    404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        resource_id: str,
        action: Optional[str] = None,
        resource: str = "Product",
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} with id {resource_id} not found"
        if action:
            message = f"{message} {action}"
        ctx = context or {}
        ctx["resource"] = resource
        ctx["resource_id"] = resource_id
        super().__init__(message=f"{message}.", context=ctx)
        self.resource_id = resource_id
