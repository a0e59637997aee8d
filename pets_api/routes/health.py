"""
Pets API — Health Check Route
===============================

What:  Health check endpoint for container probes and monitoring.
How:   Runs `SELECT 1` against the database when the SQLAlchemy store is
       configured; the in-memory store has no dependency to probe.

Status levels:
    - healthy:   store reachable
    - unhealthy: database unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Response
from sqlalchemy import text

from pets_api import __version__
from pets_api.config import settings
from pets_api.database import engine
from pets_api.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(response: Response) -> HealthResponse:
    db_status = "not_used"
    overall = "healthy"

    if settings.storage_backend == "sqlalchemy":
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            db_status = "connected"
        except Exception as e:
            db_status = "disconnected"
            overall = "unhealthy"
            response.status_code = 503
            logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        storage_backend=settings.storage_backend,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
