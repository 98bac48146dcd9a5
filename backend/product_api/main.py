"""
Product API: FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own ProductStore on `app.state.product_store`.
Who:   Called by uvicorn (`uvicorn product_api.main:app`), by `run()`, and
       by the test suite (one fresh app per test).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                        │
    │  ┌───────────────────────────────────────────────┐  │
    │  │ Middleware Stack (outermost first)             │  │
    │  │  ErrorBoundary → Logging → AuthCheck           │  │
    │  └───────────────────────────────────────────────┘  │
    │  ┌───────────────────────────────────────────────┐  │
    │  │ Exception Handlers                             │  │
    │  │  ProductAPIError → 400/404 {"message"}         │  │
    │  │  RequestValidationError → 400 {"message"}      │  │
    │  │  HTTPException → status {"message"}            │  │
    │  └───────────────────────────────────────────────┘  │
    │  ┌───────────────────────────────────────────────┐  │
    │  │ Routes                                         │  │
    │  │  GET /   /api/products[/{id}]   /health        │  │
    │  └───────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_api import __version__
from product_api.config import settings
from product_api.exceptions import ProductAPIError
from product_api.middleware import (
    AuthenticationMiddleware,
    ErrorBoundaryMiddleware,
    RequestLoggingMiddleware,
)
from product_api.routes import health, products, root
from product_api.store import ProductStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    When:   Called once at startup, before anything else logs.
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Override any existing logging config
    )

    # The access middleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and report the listening address.
    Shutdown: log it. The store is in memory and simply goes away.
    """
    setup_logging()
    logger.info("Product API starting up (%d products loaded)", len(app.state.product_store))
    logger.info("Server is running on http://localhost:%d", settings.port)

    yield  # Application runs here

    logger.info("Product API shutting down; in-memory products discarded.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register handlers that give every expected failure a `{"message"}` body.

    Handler hierarchy:
        ProductAPIError          → exc.status_code (ValidationError 400, NotFoundError 404)
        RequestValidationError   → 400 (body is not valid JSON, or not an object on POST)
        StarletteHTTPException   → exc.status_code (unknown route 404, wrong method 405)

    Unexpected exceptions are deliberately not handled here; they continue
    to ErrorBoundaryMiddleware, which answers 500.
    """

    @app.exception_handler(ProductAPIError)
    async def handle_product_api_error(request: Request, exc: ProductAPIError):
        if exc.status_code >= 500:
            logger.error("%s | Context: %s", exc.message, exc.context)
        else:
            logger.warning(
                "%s %s -> %s: %s",
                request.method,
                request.url.path,
                type(exc).__name__,
                exc.message,
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """
        Malformed request body.

        Product bodies are loose at the schema level, so in practice this is
        a body that is not valid JSON, or a POST body that is not an object.
        Both answer 400 with a readable message, never the error boundary's
        500. Body parsing runs before the handler, so invalid JSON on PUT is
        a 400 even for an unknown id.
        """
        message = _describe_validation_errors(exc)
        logger.warning(
            "%s %s -> request validation failed: %s",
            request.method,
            request.url.path,
            message,
        )
        return JSONResponse(status_code=400, content={"message": message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """
    Turn FastAPI's error list into one readable sentence.

    Example: "Invalid request body: price: Input should be a valid number"
    """
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        detail = error.get("msg", "invalid value")
        parts.append(f"{location}: {detail}" if location else detail)
    if not parts:
        return "Invalid request body."
    return "Invalid request body: " + "; ".join(parts)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Product store to serve. Defaults to a new store, seeded with
               the sample products unless SEED_PRODUCTS is false.

    Returns:
        Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Product API",
        description="CRUD over an in-memory product catalog.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    if store is None:
        store = ProductStore.with_seed_data() if settings.seed_products else ProductStore()
    app.state.product_store = store

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added = first
    # to execute), so the stages below run bottom to top.

    # Authentication check: logs whether a token was sent, never rejects
    app.add_middleware(AuthenticationMiddleware)

    # Request logging: timestamped request line, then status and duration
    app.add_middleware(RequestLoggingMiddleware)

    # Error boundary: wraps everything above, so it must be added last
    app.add_middleware(ErrorBoundaryMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(root.router)
    app.include_router(products.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn on settings.host:port."""
    setup_logging()
    uvicorn.run(
        "product_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `product_api.main:app` to be importable
app = create_app()


if __name__ == "__main__":
    run()
