"""
Health check endpoints.

Provides liveness and readiness probes with database connectivity checks.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ragnarok_cards.db.database import get_session

router = APIRouter(tags=["system"])


class HealthResponse(BaseModel):
    """Liveness response."""

    ok: bool
    realm: str


class ReadyResponse(BaseModel):
    """Readiness response."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns a fixed payload if the service is running.
    Does not check dependencies.
    """
    return HealthResponse(ok=True, realm="midgard")


@router.get(
    "/ready",
    response_model=ReadyResponse,
    responses={503: {"model": ReadyResponse}},
)
async def ready(
    response: Response,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ReadyResponse:
    """
    Readiness probe.

    Checks database connectivity. Returns 503 if the database is unavailable.
    """
    try:
        await session.execute(text("SELECT 1"))
        return ReadyResponse(status="ready", database="connected")
    except (SQLAlchemyError, OSError):
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return ReadyResponse(status="not ready", database="disconnected")
