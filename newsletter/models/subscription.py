"""Subscription ORM: one row per accepted submission.

Invariants:
    - id is UUID primary key, generated by the application at acceptance time
    - email and name are non-nullable text, written once and never updated
    - subscribed_at is timezone-aware

Design Decisions:
    - No unique constraint on email: resubmitting the same address creates a
      second row. Deduplication is a product decision, not a storage default.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from newsletter.core.repository_protocols import Subscriber
from newsletter.db.base import Base


class Subscription(Base):
    """Persisted subscriber record."""
    __tablename__ = "subscriptions"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    subscribed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )

    @classmethod
    def from_subscriber(cls, subscriber: Subscriber) -> "Subscription":
        return cls(
            id=subscriber.id,
            email=subscriber.email,
            name=subscriber.name,
            subscribed_at=subscriber.subscribed_at,
        )
