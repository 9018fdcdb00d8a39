"""
Records API - Request Logging Middleware
========================================

What:  One log line per HTTP request: method, route, record id, status,
       duration, client.
When:  After RequestIDMiddleware, so every line carries the request ID.

Route and record id:
    The router stores the matched route in the ASGI scope, so after the
    handler runs the line can name the route template
    (`DELETE /api/author/{author_id}`) and the record id separately. Lines
    for the same endpoint group together regardless of which record was hit.
    Unmatched paths fall back to the raw path.

Level by status class:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Request bodies are never logged (student emails are personal data).
"""

import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from records_api.middleware.request_id import request_id_var

logger = logging.getLogger("records_api.access")


def route_template(request: Request) -> str:
    """Path template of the matched route, or the raw path if none matched."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


def record_id(request: Request) -> Optional[str]:
    """The `{..._id}` path parameter of the matched route, if any."""
    for name, value in request.path_params.items():
        if name.endswith("_id"):
            return str(value)
    return None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs the route, record id, status and duration of each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # Health probes run every few seconds
        if request.url.path == "/health":
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        rid = request_id_var.get("")
        route = route_template(request)
        target = record_id(request)
        client_ip = request.client.host if request.client else "unknown"

        logger.log(
            log_level,
            "%s %s%s %d %.1fms [%s] from %s",
            request.method,
            route,
            f" id={target}" if target else "",
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "route": route,
                "record_id": target,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
