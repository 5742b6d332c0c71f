"""
Employee API — Health Check Route
===================================

What:  Health check endpoint for monitoring and load balancer checks.
How:   Round-trips SELECT 1 through the connection pool.
Who:   Called by container health checks, load balancers and monitoring.

Status levels:
    - healthy:   Database reachable
    - unhealthy: Database unreachable (the API cannot serve any request)
"""

import logging
import time

from fastapi import APIRouter, Depends

from employee_api import __version__
from employee_api.database import ConnectionPool, get_pool
from employee_api.schemas.employee import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(pool: ConnectionPool = Depends(get_pool)) -> HealthResponse:
    """Probe the database and report aggregate status and uptime."""
    if await pool.ping():
        db_status, overall = "connected", "healthy"
    else:
        db_status, overall = "disconnected", "unhealthy"
        logger.warning("Health check: database unreachable")

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
