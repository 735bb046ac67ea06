"""Error Hierarchy: typed, categorized exceptions for all newsletter failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with NewsletterError base: FastAPI global handler catches all
    - Validation itself never raises (see validate_subscription); the route lifts
      a Rejection into SubscriptionRejectedError only at the HTTP boundary
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from newsletter.core.validate_subscription import Rejection


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    request_id: str | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class NewsletterError(Exception):
    """Base exception for all newsletter errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "field": self.context.field,
                "request_id": self.context.request_id,
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class SubscriptionRejectedError(NewsletterError):
    """Submission failed parsing or validation; nothing was written."""
    def __init__(self, rejection: Rejection, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = rejection.field
        super().__init__(
            rejection.message, rejection.reason.value, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.rejection = rejection


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreFaultError(NewsletterError):
    """The store could not complete the operation (connectivity, constraint, timeout)."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            "Failed to store subscription",
            "STORE_FAULT", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
