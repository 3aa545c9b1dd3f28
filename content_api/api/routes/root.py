"""Root Route — plain-text greeting at GET /."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["root"])


@router.get("/", response_class=PlainTextResponse)
async def hello() -> str:
    return "Hello World"
