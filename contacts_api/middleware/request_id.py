"""
Contacts API — Request ID Middleware
======================================

What:  Assigns a correlation id to each request and echoes it back in the
       X-Request-ID response header.
How:   Uses the client's X-Request-ID when supplied, otherwise the first eight
       characters of a fresh UUID4. The id is stored in a ContextVar so log
       calls and exception handlers anywhere in the request can read it.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Sets request_id_var and request.state.request_id for every request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]
        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        response.headers["X-Request-ID"] = rid
        return response
