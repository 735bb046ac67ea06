"""Request Logging: assigns a request id and writes one access log line per request.

Invariants:
    - request_id_ctx_var is set for the whole request and reset afterwards
    - Every response carries an X-Request-ID header (the catch-all 500 handler
      copies it from request.state, since it renders outside this middleware)
    - Inbound X-Request-ID is honored when it is short and printable

Design Decisions:
    - BaseHTTPMiddleware: the downstream app runs in a copied context, so the
      request id set here is visible to every logger call in the handler
"""

import logging
import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from newsletter.infrastructure.observability import request_id_ctx_var

logger = logging.getLogger("newsletter.request")

REQUEST_ID_HEADER = "X-Request-ID"
_MAX_INBOUND_ID_LENGTH = 128


def _resolve_request_id(request: Request) -> str:
    inbound = request.headers.get(REQUEST_ID_HEADER, "")
    if inbound and len(inbound) <= _MAX_INBOUND_ID_LENGTH and inbound.isprintable():
        return inbound
    return str(uuid.uuid4())


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = _resolve_request_id(request)
        token = request_id_ctx_var.set(request_id)
        request.state.request_id = request_id
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            logger.info(
                "request",
                extra={
                    "request_id": request_id,
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": status_code,
                    "duration_ms": int((time.perf_counter() - start) * 1000),
                },
            )
            request_id_ctx_var.reset(token)
