"""
Employee API — Request ID Middleware
======================================

What:  Assigns an ID to each incoming request and returns it in X-Request-ID.
How:   Reuses a well-formed client-supplied X-Request-ID or generates a short
       UUID, stores it in a ContextVar for loggers and error handlers, and in
       request.state for route handlers.

Client IDs end up verbatim in log lines and response headers, so only short
tokens of letters, digits, '.', '_' and '-' are accepted; anything else is
replaced with a generated ID.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
_VALID_REQUEST_ID = re.compile(r"[A-Za-z0-9._-]{1,64}")

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def resolve_request_id(client_value: Optional[str]) -> str:
    """The client's ID when it is a safe token, else the first 8 chars of a UUID4."""
    if client_value and _VALID_REQUEST_ID.fullmatch(client_value):
        return client_value
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
