from typing import Literal

from fastapi import APIRouter, Request
from pydantic import BaseModel


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok", "degraded", "error"]
    version: str
    environment: str
    leave_requests: int


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    """Return the health status of the API service."""
    settings = request.app.state.settings
    service = getattr(request.app.state, "leave_service", None)
    status: Literal["ok", "degraded", "error"] = "ok" if service is not None else "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        environment=settings.environment,
        leave_requests=len(service.store) if service is not None else 0,
    )
