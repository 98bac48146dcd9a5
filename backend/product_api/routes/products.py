"""
Product API: Product Route Handlers
=====================================

What:  The five product endpoints under /api/products.
How:   Each handler receives the app's ProductStore through the
       `get_product_store` dependency and delegates to ProductService.
Who:   Called by any HTTP client of the API.

Status codes:
    200  list / get / update / delete
    201  create
    400  create without name or price, non-numeric price (ValidationError)
    404  unknown id on get / update / delete (NotFoundError)
    500  anything unexpected (error boundary)

The path parameter is the only id that matters. Ids in request bodies
are ignored on both create and update.
"""

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends

from product_api.schemas.product import (
    ErrorResponse,
    MessageResponse,
    Product,
    ProductCreate,
)
from product_api.services.product_service import product_service
from product_api.store import ProductStore, get_product_store

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Products"])


@router.get(
    "/products",
    response_model=List[Product],
    summary="List all products",
)
async def list_products(
    store: ProductStore = Depends(get_product_store),
) -> List[Product]:
    return await product_service.list_products(store)


@router.get(
    "/products/{product_id}",
    response_model=Product,
    responses={
        404: {"description": "Product not found", "model": ErrorResponse},
    },
    summary="Get a single product by id",
)
async def get_product(
    product_id: str,
    store: ProductStore = Depends(get_product_store),
) -> Product:
    return await product_service.get_product(store, product_id)


@router.post(
    "/products",
    status_code=201,
    response_model=Product,
    responses={
        201: {"description": "Product created", "model": Product},
        400: {"description": "Name or price missing", "model": ErrorResponse},
    },
    summary="Create a product",
)
async def create_product(
    payload: Optional[ProductCreate] = Body(default=None),
    store: ProductStore = Depends(get_product_store),
) -> Product:
    """
    Create a product from `{name, price, description?, category?, inStock?}`.

    A missing body is treated like `{}` and therefore fails the
    name/price check with 400.
    """
    return await product_service.create_product(store, payload or ProductCreate())


@router.put(
    "/products/{product_id}",
    response_model=Product,
    responses={
        400: {"description": "Price is not a number", "model": ErrorResponse},
        404: {"description": "Product not found", "model": ErrorResponse},
    },
    summary="Update a product",
)
async def update_product(
    product_id: str,
    body: Any = Body(default=None),
    store: ProductStore = Depends(get_product_store),
) -> Product:
    """
    Shallow-merge the body into the stored product.

    Fields present in the body overwrite, explicit nulls included; fields
    left out keep their current value. The body is passed through raw so
    the service can answer 404 for an unknown id before looking at it.
    """
    return await product_service.update_product(store, product_id, body)


@router.delete(
    "/products/{product_id}",
    response_model=MessageResponse,
    responses={
        404: {"description": "Product not found", "model": ErrorResponse},
    },
    summary="Delete a product",
)
async def delete_product(
    product_id: str,
    store: ProductStore = Depends(get_product_store),
) -> MessageResponse:
    return await product_service.delete_product(store, product_id)
