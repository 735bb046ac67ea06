"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Structural Protocol: any object with a matching async add() is a store
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from newsletter.core.domain_types import SubscriberEmail, SubscriberId, SubscriberName


@dataclass(frozen=True)
class Subscriber:
    """An accepted submission; immutable once built."""
    id: SubscriberId
    email: SubscriberEmail
    name: SubscriberName
    subscribed_at: datetime


class SubscriptionStore(Protocol):
    """Contract for subscriber persistence; implemented by shell.

    add() must be atomic: on failure no part of the record is visible.
    Implementations raise StoreFaultError for every store-level failure.
    """
    async def add(self, subscriber: Subscriber) -> None: ...
