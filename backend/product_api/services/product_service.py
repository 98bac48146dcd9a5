"""
Product API: Product Service (Business Logic)
===============================================

What:  The rules behind the five product operations: presence checks and
       defaults on create, whitelisted merge on update, not-found handling.
How:   Stateless methods that receive the ProductStore for each call and
       raise ValidationError / NotFoundError for the expected failures.
Who:   Called by route handlers in routes/products.py.

Error Handling Strategy:
    Expected failures are raised as ProductAPIError subclasses and mapped
    to 400/404 by the handlers in main.py. Anything else propagates
    untouched to the error boundary.
"""

import logging
import math
from typing import Any, List, Union

from product_api.exceptions import NotFoundError, ValidationError
from product_api.schemas.product import (
    MessageResponse,
    Product,
    ProductCreate,
    ProductUpdate,
)
from product_api.store import ProductStore

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "miscellaneous"


def coerce_price(value: Any) -> Union[int, float]:
    """
    Convert a client-supplied price to a number.

    Integers and floats pass through, booleans become 0/1, and numeric
    strings are parsed (integer form preferred, so "15" → 15, "9.5" → 9.5).

    Raises:
        ValidationError: The value is not numeric, or is NaN/infinite.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        number = value
    else:
        text = str(value).strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                raise ValidationError("Price must be a number.", field="price")
    if isinstance(number, float) and not math.isfinite(number):
        raise ValidationError("Price must be a number.", field="price")
    return number


class ProductService:
    """
    Business logic for product operations.

    Responsibilities:
        - list_products(): Every product in store order
        - get_product(): Single lookup with not-found handling
        - create_product(): Presence checks, defaults, price coercion
        - update_product(): Shallow merge of whitelisted fields
        - delete_product(): Removal with not-found handling
    """

    async def list_products(self, store: ProductStore) -> List[Product]:
        return store.list_all()

    async def get_product(self, store: ProductStore, product_id: str) -> Product:
        """
        Raises:
            NotFoundError: No product has this id.
        """
        product = store.find_by_id(product_id)
        if product is None:
            raise NotFoundError(product_id)
        return product

    async def create_product(self, store: ProductStore, payload: ProductCreate) -> Product:
        """
        Validate a creation payload, apply defaults, and insert it.

        Rules:
            name, price   required and truthy (0 and "" count as missing)
            description   falsy → ""
            category      falsy → "miscellaneous"
            inStock       absent → True, otherwise truthiness of the value

        Raises:
            ValidationError: Missing name/price, or price not numeric.
        """
        if not payload.name or not payload.price:
            raise ValidationError("Name and price are required fields.")

        fields = {
            "name": payload.name,
            "description": payload.description or "",
            "price": coerce_price(payload.price),
            "category": payload.category or DEFAULT_CATEGORY,
            "in_stock": bool(payload.in_stock) if payload.in_stock_provided else True,
        }
        product = store.insert(fields)
        logger.info("Product created: %s (%s)", product.id, product.name)
        return product

    async def update_product(
        self,
        store: ProductStore,
        product_id: str,
        body: Any,
    ) -> Product:
        """
        Merge the whitelisted fields present in `body` over an existing product.

        The id is looked up before the body is read, so an unknown id is a
        404 even when the body is unusable. The id always comes from the
        path; ProductUpdate drops any id in the body.

        Raises:
            NotFoundError: No product has this id.
            ValidationError: `price` is present, not null, and not numeric.
        """
        if store.find_by_id(product_id) is None:
            raise NotFoundError(product_id, action="for update")

        changes = ProductUpdate.from_body(body).changes()
        if changes.get("price") is not None:
            changes["price"] = coerce_price(changes["price"])

        updated = store.replace(product_id, changes)
        if updated is None:
            raise NotFoundError(product_id, action="for update")
        logger.info("Product updated: %s (fields=%s)", product_id, sorted(changes))
        return updated

    async def delete_product(self, store: ProductStore, product_id: str) -> MessageResponse:
        """
        Raises:
            NotFoundError: No product has this id.
        """
        if not store.remove(product_id):
            raise NotFoundError(product_id, action="for deletion")
        logger.info("Product deleted: %s", product_id)
        return MessageResponse(message=f"Product with id {product_id} deleted successfully.")


# Singleton instance used by the route handlers
product_service = ProductService()
