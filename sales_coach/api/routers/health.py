"""
Liveness endpoint.

Routes: GET /health

Answers without touching the agent, so it stays up even when provider
credentials are missing.
"""

from fastapi import APIRouter

from sales_coach.models.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", message="Server Healthy")
