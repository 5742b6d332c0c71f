"""
Employee API — Request Logging Middleware
===========================================

What:  One access log line per API request.
How:   Times the request and, once the response is ready, logs method, the
       matched route template, status, duration, request ID and client IP.

Log level follows the status class:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Health checks and the interactive docs are not logged. Request bodies are
never logged (they carry names and salaries). The route template
(`/employees/{employee_id}`) is logged next to the concrete path so lines
can be grouped per endpoint.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("employee_api.access")

SKIPPED_PATHS = frozenset({"/health", "/docs", "/docs/oauth2-redirect", "/redoc", "/openapi.json"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs structured information about each HTTP request and response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        route = request.scope.get("route")
        template = getattr(route, "path", request.url.path)
        rid = getattr(request.state, "request_id", "")
        client_ip = request.client.host if request.client else "unknown"

        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "route": template,
                "status": response.status_code,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
