"""Health check endpoint used by the container and cluster probes."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_class=PlainTextResponse)
async def health_check():
    """Liveness/readiness probe target. Always answers `ok`."""
    return PlainTextResponse("ok")
