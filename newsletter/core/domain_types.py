"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - SubscriberId wraps UUID; never use bare UUID in domain logic
    - SubscriberName is always trimmed, 1-256 chars, free of forbidden characters
    - SubscriberEmail is the address exactly as submitted (no normalization)
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

SubscriberId = NewType("SubscriberId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

SubscriberName = NewType("SubscriberName", str)     # trimmed, <= 256 chars
SubscriberEmail = NewType("SubscriberEmail", str)   # local-part@domain


# ─── Constants ───────────────────────────────────────────────────

MAX_NAME_LENGTH = 256
FORBIDDEN_NAME_CHARACTERS = frozenset('/()"<>\\{}')


# ─── Enums ───────────────────────────────────────────────────────

class RejectionReason(str, Enum):
    """Why a submission was refused before any write; maps to error codes."""
    MALFORMED_INPUT = "MALFORMED_INPUT"
    INVALID_NAME = "INVALID_NAME"
    INVALID_EMAIL = "INVALID_EMAIL"
