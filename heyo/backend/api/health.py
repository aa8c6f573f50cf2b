"""
Health Check Endpoints.

Endpoints:
- /health: Liveness check (process running)
- /health/ready: Readiness check (database answers)
"""

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from heyo.backend.core.dependencies import NoteServiceDep
from heyo.backend.core.exceptions import DatabaseError
from heyo.backend.core.logging import get_logger
from heyo.backend.core.utils import utc_now

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Liveness check. Returns healthy whenever the process can serve requests."""
    return {"status": "healthy", "timestamp": utc_now().isoformat()}


@router.get("/health/ready")
async def readiness_check(service: NoteServiceDep) -> JSONResponse:
    """
    Readiness check.

    Runs a count against the notes table; 503 if the database is unreachable.
    """
    start = utc_now()
    try:
        total = await service.count_notes()
    except DatabaseError as e:
        logger.warning("Readiness check failed", extra={"error": e.message})
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": {"status": "unhealthy"}},
        )

    latency_ms = int((utc_now() - start).total_seconds() * 1000)
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "database": {"status": "healthy", "latency_ms": latency_ms},
            "notes": total,
        },
    )
