"""Welcome banner served at the API root."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Root"])

WELCOME_MESSAGE = "Welcome to my Movie API!"


@router.get("/", response_class=PlainTextResponse, summary="Welcome message")
async def home() -> str:
    return WELCOME_MESSAGE
