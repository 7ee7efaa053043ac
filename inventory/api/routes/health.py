"""
Health check endpoints

- /health (liveness): the process is up, dependencies are not checked
- /health/ready (readiness): the database answers a trivial query

Reference:
- https://kubernetes.io/docs/tasks/configure-pod-container/configure-liveness-readiness-startup-probes/
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory.core.database import get_session_maker

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["health"],
)


class HealthResponse(BaseModel):
    """Response model for health check endpoints"""
    status: str
    message: str


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check (liveness)",
    status_code=status.HTTP_200_OK,
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", message="Service is running")


@router.get(
    "/ready",
    response_model=HealthResponse,
    summary="Readiness check",
    status_code=status.HTTP_200_OK,
    responses={
        200: {"description": "Service is ready"},
        503: {"description": "Service is not ready (database unavailable)"}
    }
)
async def readiness_check(
    session_maker: async_sessionmaker[AsyncSession] = Depends(get_session_maker),
) -> HealthResponse:
    """
    Readiness probe endpoint

    **Raises:**
        HTTPException: 503 if database is unavailable
    """
    try:
        async with session_maker() as session:
            await session.execute(text("SELECT 1"))
        return HealthResponse(status="ready", message="Service is ready to serve traffic")
    except Exception as e:
        logger.warning(f"Readiness check failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service is not ready - database unavailable"
        ) from e
