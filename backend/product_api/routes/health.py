"""
Product API: Health Check Route
=================================

What:  Liveness endpoint for monitoring and load balancer health checks.
How:   Reports version, uptime and the current product count. The store
       is in memory, so there are no external dependencies to check and
       the service is healthy whenever it can answer.
"""

import logging
import time

from fastapi import APIRouter, Depends

from product_api import __version__
from product_api.schemas.product import HealthResponse
from product_api.store import ProductStore, get_product_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: ProductStore = Depends(get_product_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        products=len(store),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
