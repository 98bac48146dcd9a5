"""
Product API: Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── seeded_store: ProductStore holding the three sample products
    ├── empty_store: ProductStore with no products
    ├── app: FastAPI app built around seeded_store
    └── test_client: HTTPX AsyncClient talking to `app` in-process
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_PRODUCTS"] = "true"
os.environ["AUTH_HEADER"] = "authorization"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from product_api.main import create_app
from product_api.store import ProductStore


@pytest.fixture
def seeded_store():
    """A fresh store with products 1 (Laptop), 2 (smartphone), 3 (coffee Maker)."""
    return ProductStore.with_seed_data()


@pytest.fixture
def empty_store():
    return ProductStore()


@pytest.fixture
def app(seeded_store):
    """
    A fresh application per test.

    Each app owns its store, so mutations in one test never leak into
    another.
    """
    return create_app(store=seeded_store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/products")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
