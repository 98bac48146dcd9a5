"""
Product API: Root Route
=========================

What:  Plain-text welcome message at `/` pointing clients at the API.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Root"])

WELCOME_MESSAGE = "Welcome to the Product API! Go to /api/products to see all products."


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Welcome message",
)
async def welcome() -> str:
    return WELCOME_MESSAGE
