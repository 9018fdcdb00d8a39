"""
Records API - Health Check Route
================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Runs SELECT 1 through the shared engine and reports the result.

Status levels:
    - healthy:   Database reachable (HTTP 200)
    - unhealthy: Database unreachable (HTTP 503, stop routing traffic)

The process keeps serving even when the database is down; every record
endpoint then fails with a 500 envelope until the database returns.
"""

import logging
import time

from fastapi import APIRouter, Request, Response

from records_api import __version__
from records_api.database import check_connection
from records_api.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request, response: Response) -> HealthResponse:
    db_ok = await check_connection()
    if not db_ok:
        logger.warning("Health check: database unreachable, reporting 503")
        response.status_code = 503

    return HealthResponse(
        status="healthy" if db_ok else "unhealthy",
        version=__version__,
        database="connected" if db_ok else "disconnected",
        resources=list(getattr(request.app.state, "resources", [])),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
