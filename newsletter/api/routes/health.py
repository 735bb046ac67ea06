"""Health & Readiness Probes: liveness and readiness endpoints for load balancers.

Invariants:
    - GET /health_check always returns 200 with an empty body if the process is up (liveness)
    - GET /health_check never touches the database
    - GET /health_check/ready returns 503 if the database is unreachable (readiness)

Design Decisions:
    - Separate liveness/readiness: a database outage should take the instance
      out of rotation, not get the process restarted
"""

import logging

from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse

from newsletter.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health_check", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK, response_class=Response)
async def health_check() -> Response:
    """Basic liveness probe. Returns 200 if the process is up."""
    return Response(status_code=status.HTTP_200_OK)


@router.get("/ready")
async def readiness_check():
    """Readiness probe; includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
