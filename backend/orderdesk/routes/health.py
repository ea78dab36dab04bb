"""
OrderDesk Backend - Health Check Route
========================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Runs SELECT 1 through the shared pool and reports the result.
Who:   Called by container health checks and monitoring systems.

Status levels:
    - healthy:   Database reachable (HTTP 200)
    - unhealthy: Database unreachable or pool not initialized (HTTP 503)
"""

import logging
import time

from fastapi.responses import JSONResponse
from sqlalchemy import text

from orderdesk import __version__
from orderdesk.database import get_engine
from orderdesk.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

# Uptime is measured from module import
_start_time = time.time()


async def health_check() -> JSONResponse:
    """
    Check the health of the service and its database.

    Returns:
        HealthResponse body, with HTTP 503 when the database is unreachable.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        engine = get_engine()
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    body = HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    return JSONResponse(
        status_code=200 if overall == "healthy" else 503,
        content=body.model_dump(),
    )
