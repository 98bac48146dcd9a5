"""
Product API: Application Package
==================================

What: A small REST service exposing CRUD over an in-memory product catalog.
Who:  Imported by uvicorn (`product_api.main:app`), pytest, and the
      `product-api` console script.

Layering:

    ┌─────────────────────────────────────┐
    │      Middleware (Request Pipeline)  │  ← error boundary, access log,
    │                                     │    auth presence check
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← defaults, coercion, not-found
    ├─────────────────────────────────────┤
    │           Schemas (Data)            │  ← Pydantic models
    ├─────────────────────────────────────┤
    │        Store (In-Memory State)      │  ← one ProductStore per app
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
