"""
Pets API — Request ID Middleware
==================================

What:  Assigns a correlation id to each request and returns it in X-Request-ID.
Why:   Lets a mobile bug report be matched to the server log lines and error
       body (`request_id`) of the request that failed.
How:   Reuses a client-sent X-Request-ID when present, otherwise generates a
       short UUID prefix; stores it in a ContextVar for loggers and handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Use the client's X-Request-ID header if it sent one
        2. Otherwise generate an 8-character id
        3. Store it in request_id_var and request.state.request_id
        4. Echo it in the response's X-Request-ID header
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
