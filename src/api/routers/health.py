"""Application health endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter

from src.api.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check."""
    return HealthResponse(
        ok=True,
        service="right4all-backend",
        time=datetime.now(timezone.utc).isoformat(),
    )
