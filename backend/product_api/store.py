"""
Product API: In-Memory Product Store
======================================

What:  The ordered, process-local collection of products, plus the FastAPI
       dependency that hands it to route handlers.
How:   A plain list guarded by a lock. Each application instance owns one
       store (attached to `app.state` by create_app), so separate apps never
       share data.
When:  Created once per application; discarded with the process.

Concurrency:
    Async handlers run on the event loop, but sync code paths (and tests)
    may touch the store from worker threads. Every read and write goes
    through `self._lock`, so each operation is atomic on its own. There is
    no multi-operation transaction.
"""

import logging
import threading
import uuid
from typing import Any, Dict, List, Optional

from fastapi import Request

from product_api.schemas.product import Product

logger = logging.getLogger(__name__)


# Sample catalog loaded by with_seed_data(). The stock flag is stored as
# `in_stock` and serialized as `inStock`, the same as created records,
# although the legacy seed data spelled it `instock`.
SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "in_stock": True,
    },
    {
        "id": "2",
        "name": "smartphone",
        "description": "latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "in_stock": True,
    },
    {
        "id": "3",
        "name": "coffee Maker",
        "description": "programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "in_stock": False,
    },
]


class ProductStore:
    """
    Ordered in-memory container of Product records.

    Insertion order is preserved for listing. Ids are unique: created
    records get a fresh uuid4, and `replace` always re-pins the id.
    """

    def __init__(self, products: Optional[List[Product]] = None):
        self._products: List[Product] = list(products or [])
        self._lock = threading.Lock()

    @classmethod
    def with_seed_data(cls) -> "ProductStore":
        """Build a store holding the three sample products."""
        return cls([Product(**record) for record in SEED_PRODUCTS])

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def list_all(self) -> List[Product]:
        """Snapshot of every product, in insertion order."""
        with self._lock:
            return list(self._products)

    def find_by_id(self, product_id: str) -> Optional[Product]:
        with self._lock:
            return self._find(product_id)

    def insert(self, fields: Dict[str, Any]) -> Product:
        """
        Append a new product built from `fields`.

        Any `id` in `fields` is discarded; the store assigns its own.
        """
        values = {key: value for key, value in fields.items() if key != "id"}
        with self._lock:
            product = Product(id=self._new_id(), **values)
            self._products.append(product)
        logger.debug("Inserted product %s", product.id)
        return product

    def replace(self, product_id: str, changes: Dict[str, Any]) -> Optional[Product]:
        """
        Shallow-merge `changes` over an existing product.

        Keys in `changes` overwrite, keys absent keep their old value, and
        the id is pinned to `product_id`. The record keeps its position.

        Returns:
            The updated product, or None if `product_id` is unknown.
        """
        with self._lock:
            for index, current in enumerate(self._products):
                if current.id == product_id:
                    updated = current.model_copy(update={**changes, "id": product_id})
                    self._products[index] = updated
                    return updated
        return None

    def remove(self, product_id: str) -> bool:
        """Delete a product. Returns False if it was not present."""
        with self._lock:
            remaining = [p for p in self._products if p.id != product_id]
            removed = len(remaining) < len(self._products)
            self._products = remaining
        if removed:
            logger.debug("Removed product %s", product_id)
        return removed

    # ── Internals (caller holds the lock) ─────────────────────────────────

    def _find(self, product_id: str) -> Optional[Product]:
        return next((p for p in self._products if p.id == product_id), None)

    def _new_id(self) -> str:
        new_id = str(uuid.uuid4())
        while self._find(new_id) is not None:
            new_id = str(uuid.uuid4())
        return new_id


def get_product_store(request: Request) -> ProductStore:
    """
    FastAPI dependency returning the store owned by the running app.

    Usage:
        @router.get("/products")
        async def list_products(store: ProductStore = Depends(get_product_store)):
            ...
    """
    return request.app.state.product_store
