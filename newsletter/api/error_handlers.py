"""Error Handlers: global exception handlers for the newsletter API.

Invariants:
    - NewsletterError → structured JSON with error code, message, severity
    - Exception (catch-all) → 500, never leaks internal details
    - 4xx domain errors logged at WARNING, 5xx at ERROR

Design Decisions:
    - Routes read the form body themselves, so every client error arrives as a
      NewsletterError; no Pydantic RequestValidationError layer is registered
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from newsletter.api.request_logging import REQUEST_ID_HEADER
from newsletter.core.errors import ErrorSeverity, NewsletterError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_newsletter_error_handler(app)
    _register_generic_error_handler(app)


def _register_newsletter_error_handler(app: FastAPI) -> None:

    @app.exception_handler(NewsletterError)
    async def newsletter_error_handler(request: Request, exc: NewsletterError):
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"NewsletterError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        response = JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=internal_error_response(),
        )
        # rendered outside RequestLoggingMiddleware; request.state lives in the scope
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response


def internal_error_response() -> dict:
    return {
        "error": {
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
            "category": "internal",
            "severity": ErrorSeverity.CRITICAL.value,
        },
    }
