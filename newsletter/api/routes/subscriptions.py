"""Subscriptions: accepts form-encoded name/email submissions.

Invariants:
    - Body is read as application/x-www-form-urlencoded (other content types decode to no fields)
    - 200 with empty body on success, 400 on any rejection, 500 on store fault
    - One AsyncSession per request, released by get_db on every exit path

Design Decisions:
    - Body parsed manually via request.form() instead of Form(...) parameters:
      missing fields become a typed Rejection rather than a RequestValidationError
    - get_subscription_store is a separate dependency so tests can swap in a fake store
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from newsletter.config import get_settings
from newsletter.core.errors import ErrorContext, SubscriptionRejectedError
from newsletter.core.repository_protocols import SubscriptionStore
from newsletter.core.validate_subscription import Rejection
from newsletter.infrastructure.database import get_db
from newsletter.infrastructure.observability import request_id_ctx_var
from newsletter.infrastructure.subscription_store import SqlAlchemySubscriptionStore
from newsletter.services.subscribe import subscribe

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/subscriptions", tags=["subscriptions"])


async def get_subscription_store(
    db: AsyncSession = Depends(get_db),
) -> SubscriptionStore:
    """FastAPI dependency; request-scoped store over the pooled session."""
    return SqlAlchemySubscriptionStore(
        db, timeout_seconds=get_settings().database_statement_timeout_seconds,
    )


@router.post("", status_code=status.HTTP_200_OK, response_class=Response)
async def create_subscription(
    request: Request,
    store: SubscriptionStore = Depends(get_subscription_store),
) -> Response:
    """Validate and store a new subscriber."""
    form = await request.form()
    outcome = await subscribe(store, form)
    if isinstance(outcome, Rejection):
        raise SubscriptionRejectedError(
            outcome, ErrorContext(request_id=request_id_ctx_var.get()),
        )
    return Response(status_code=status.HTTP_200_OK)
