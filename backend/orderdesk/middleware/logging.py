"""
OrderDesk Backend - Request Logging Middleware
================================================

What:  One access-log line per HTTP request.
How:   Measures the time spent in the rest of the stack and logs method,
       path, status, duration and request ID.
When:  Inside RequestIDMiddleware (uses the request ID for correlation).

Line format:
    GET /orders 200 4.2ms [a1b2c3d4] from 127.0.0.1

The same values are attached as `extra` fields for structured handlers.
Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from orderdesk.middleware.request_id import request_id_var

logger = logging.getLogger("orderdesk.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration of each request.

    Level by status: 5xx → ERROR, 4xx → WARNING, otherwise INFO.
    Health checks are not logged.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client is None under some test transports
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        if path == "/health":
            return await call_next(request)

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
