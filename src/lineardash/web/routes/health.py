"""Health check endpoint for the hosting layer."""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Basic liveness check. Does not call Linear."""
    return {"status": "healthy"}
