"""
Product API: Pydantic Request/Response Schemas
================================================

What:  Pydantic models defining the API contract.
How:   FastAPI uses these models to parse request bodies, serialize
       responses, and generate the OpenAPI document.

Wire naming:
    The stock flag is `inStock` on the wire and `in_stock` in Python.
    Every model accepts either spelling on input and FastAPI serializes
    responses by alias, so clients only ever see `inStock`.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Stored Record
# ══════════════════════════════════════════════════════════════════════════


class Product(BaseModel):
    """
    What:  A product as held in the store and returned by the API.
    Who:   Returned by every product endpoint except DELETE.

    Only `id` is guaranteed non-null. Creation always fills the other
    fields, but an update may overwrite any of them with an explicit null.
    """

    id: str = Field(description="Unique product identifier")
    name: Optional[str] = Field(default=None, description="Product name")
    description: Optional[str] = Field(default="", description="Free-text description")
    price: Optional[Union[int, float]] = Field(default=None, description="Unit price")
    category: Optional[str] = Field(default="miscellaneous", description="Catalog category")
    in_stock: Optional[bool] = Field(
        default=True,
        alias="inStock",
        description="Whether the product is currently available",
    )

    model_config = ConfigDict(populate_by_name=True)


# ══════════════════════════════════════════════════════════════════════════
# Request Bodies
# ══════════════════════════════════════════════════════════════════════════


class ProductCreate(BaseModel):
    """
    What:  Body of POST /api/products.

    Every field is optional at the schema level. Presence of `name` and
    `price` is checked by ProductService so that a missing field produces
    the service's own 400 message instead of a schema error. `price` may
    arrive as a numeric string; `inStock` may be any JSON value and is
    reduced to its truthiness. Unknown keys, including `id`, are dropped.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Union[int, float, str]] = None
    category: Optional[str] = None
    in_stock: Optional[Any] = Field(default=None, alias="inStock")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def in_stock_provided(self) -> bool:
        """True when the client sent `inStock` at all, even as null."""
        return "in_stock" in self.model_fields_set


class ProductUpdate(BaseModel):
    """
    What:  Whitelisted changes taken from the body of PUT /api/products/{id}.

    The fields below are the complete set of updatable fields. Anything
    else in the body, including `id`, is ignored. Values are never
    rejected here: text fields are stringified, `inStock` is reduced to
    its truthiness, and nulls pass through. `price` is left as sent;
    ProductService runs it through the same numeric check as create.

    The route accepts the body as a raw mapping and ProductService builds
    this model only after the product id has been found, so an unknown id
    is a 404 whatever the body holds.
    """

    name: Optional[Any] = None
    description: Optional[Any] = None
    price: Optional[Any] = None
    category: Optional[Any] = None
    in_stock: Optional[Any] = Field(default=None, alias="inStock")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("name", "description", "category")
    @classmethod
    def _as_text(cls, v: Any) -> Optional[str]:
        return v if v is None or isinstance(v, str) else str(v)

    @field_validator("in_stock")
    @classmethod
    def _as_flag(cls, v: Any) -> Optional[bool]:
        return v if v is None else bool(v)

    @classmethod
    def from_body(cls, body: Any) -> "ProductUpdate":
        """Build from a decoded JSON body; anything but an object means no changes."""
        return cls.model_validate(body if isinstance(body, dict) else {})

    def changes(self) -> Dict[str, Any]:
        """
        Fields the client actually sent, keyed by Python attribute name.

        An explicit null is a change; an omitted field is not.
        """
        return self.model_dump(exclude_unset=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Wrappers
# ══════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. after a successful delete."""

    message: str = Field(description="Human-readable result")


class ErrorResponse(BaseModel):
    """
    What:  Error body returned by every failing endpoint.

    `error` is only populated by the error boundary (HTTP 500), where it
    carries the text of the unexpected exception.
    """

    message: str = Field(description="Human-readable error description")
    error: Optional[str] = Field(default=None, description="Underlying error detail (500 only)")


class HealthResponse(BaseModel):
    """Returned by GET /health."""

    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    products: int = Field(description="Number of products currently in the store")
    uptime_seconds: float = Field(description="Seconds since the service started")
