"""
Contacts API — Request Logging Middleware
===========================================

What:  One access log line per request: method, path, status, duration,
       request id and client address.
How:   Severity follows the status code so 5xx responses can be alerted on:
           5xx → ERROR, 4xx → WARNING, everything else → INFO
       /health is skipped; probes hit it every few seconds.

Request bodies are never logged (contacts carry personal data).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from contacts_api.middleware.request_id import request_id_var

logger = logging.getLogger("contacts_api.access")

QUIET_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each HTTP request with its outcome and duration."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        rid = request_id_var.get("") or getattr(request.state, "request_id", "")
        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
