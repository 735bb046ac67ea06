"""Subscribe Service: validate a submission, then persist it.

Invariants:
    - Validation completes before any store call; a Rejection never touches the store
    - Exactly one store.add() per accepted submission, never retried
    - id and subscribed_at are fixed at acceptance time
    - StoreFaultError propagates unchanged to the caller

Design Decisions:
    - Impureim sandwich: pure parse_and_validate → store.add → tagged outcome
    - clock and id_factory injectable so tests can pin identity and time
"""

import logging
import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone

from newsletter.core.domain_types import SubscriberId
from newsletter.core.repository_protocols import Subscriber, SubscriptionStore
from newsletter.core.validate_subscription import Rejection, parse_and_validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Accepted:
    """Submission stored."""
    subscriber: Subscriber


SubscribeOutcome = Accepted | Rejection


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def subscribe(
    store: SubscriptionStore,
    fields: Mapping[str, str],
    *,
    clock: Callable[[], datetime] = _utc_now,
    id_factory: Callable[[], uuid.UUID] = uuid.uuid4,
) -> SubscribeOutcome:
    """Accept one submission. Returns Accepted or the first Rejection."""
    result = parse_and_validate(fields)
    if isinstance(result, Rejection):
        logger.info(
            f"Subscription rejected: {result.reason.value}",
            extra={"error_code": result.reason.value},
        )
        return result

    subscriber = Subscriber(
        id=SubscriberId(id_factory()),
        email=result.email,
        name=result.name,
        subscribed_at=clock(),
    )
    await store.add(subscriber)
    logger.info(
        "New subscriber saved",
        extra={"subscriber_id": str(subscriber.id)},
    )
    return Accepted(subscriber)
