"""Service test fixtures: in-memory fake SubscriptionStore.

Invariants:
    - FakeStore satisfies the SubscriptionStore Protocol structurally
    - fail_with, when set, is raised by add() and nothing is recorded
"""

import pytest


class FakeStore:
    """Records added subscribers; optionally raises to simulate store faults."""

    def __init__(self):
        self.added = []
        self.fail_with: Exception | None = None

    async def add(self, subscriber) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.added.append(subscriber)


@pytest.fixture
def fake_store():
    return FakeStore()
