"""SQLAlchemy Subscription Store: persists Subscriber records into `subscriptions`.

Invariants:
    - add() issues exactly one INSERT and one COMMIT; no automatic retry
    - On any SQLAlchemy failure the transaction is rolled back before raising
    - The round-trip (pool checkout + insert + commit) is bounded by timeout_seconds
    - Raises StoreFaultError only; driver detail goes to the log, never to callers

Design Decisions:
    - Wraps the request-scoped AsyncSession from get_db: the session manager
      owns connection release, this class owns the write
"""

import asyncio
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from newsletter.core.errors import StoreFaultError
from newsletter.core.repository_protocols import Subscriber
from newsletter.models.subscription import Subscription

logger = logging.getLogger(__name__)


class SqlAlchemySubscriptionStore:
    """SubscriptionStore backed by a relational database."""

    def __init__(self, db: AsyncSession, timeout_seconds: float | None = None):
        self._db = db
        self._timeout_seconds = timeout_seconds

    async def add(self, subscriber: Subscriber) -> None:
        try:
            await asyncio.wait_for(
                self._insert(subscriber), timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.error(
                "Timed out saving subscriber",
                extra={"subscriber_id": str(subscriber.id), "operation": "timeout"},
            )
            raise StoreFaultError("timeout") from e
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Failed to save subscriber: {e}",
                extra={"subscriber_id": str(subscriber.id), "operation": "insert"},
            )
            raise StoreFaultError("insert") from e

    async def _insert(self, subscriber: Subscriber) -> None:
        self._db.add(Subscription.from_subscriber(subscriber))
        await self._db.commit()
