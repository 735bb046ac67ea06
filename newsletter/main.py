"""Newsletter API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map NewsletterError → structured JSON responses
    - Database pool initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Two error handler layers: NewsletterError (domain) and Exception (catch-all);
      neither leaks internal details
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from newsletter.api.error_handlers import register_error_handlers
from newsletter.api.request_logging import RequestLoggingMiddleware
from newsletter.api.routes import health, subscriptions
from newsletter.config import get_settings
from newsletter.infrastructure.database import close_db, init_db
from newsletter.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout_seconds,
    )
    if settings.database_create_schema:
        await manager.create_schema()
        logger.info("Database schema ensured")
    logger.info("Newsletter API started")
    yield
    await close_db()
    logger.info("Newsletter API shutting down")


app = FastAPI(title="Newsletter API", version="0.1.0", lifespan=lifespan)

app.add_middleware(RequestLoggingMiddleware)

# Routes, registered explicitly
app.include_router(health.router)
app.include_router(subscriptions.router)

register_error_handlers(app)
