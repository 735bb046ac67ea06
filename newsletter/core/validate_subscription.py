"""Subscription Validation: parses and validates raw form fields into a NewSubscriber.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return a Rejection on violation, never raise
    - validate_subscription chains parse → name → email; first rejection wins
    - The email is kept exactly as submitted; only the name is trimmed

Design Decisions:
    - Returns NewSubscriber | Rejection; the shell decides how to render a Rejection
    - email-validator with check_deliverability=False and globally_deliverable=False:
      grammar only, no DNS lookups, a dot in the domain is not required
"""

from collections.abc import Mapping
from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email as _check_email_grammar

from newsletter.core.domain_types import (
    FORBIDDEN_NAME_CHARACTERS,
    MAX_NAME_LENGTH,
    RejectionReason,
    SubscriberEmail,
    SubscriberName,
)

REQUIRED_FIELDS = ("name", "email")


@dataclass(frozen=True)
class Rejection:
    """Typed reason a submission was refused."""
    reason: RejectionReason
    message: str
    field: str | None = None


@dataclass(frozen=True)
class SubscriptionForm:
    """Candidate submission; both keys present, values not yet validated."""
    name: str
    email: str


@dataclass(frozen=True)
class NewSubscriber:
    """Validated submission, ready to be persisted."""
    name: SubscriberName
    email: SubscriberEmail


def parse_subscription_form(fields: Mapping[str, str]) -> SubscriptionForm | Rejection:
    """Extract the two recognized fields. Unknown keys are ignored."""
    missing = [key for key in REQUIRED_FIELDS if key not in fields]
    if missing:
        return Rejection(
            RejectionReason.MALFORMED_INPUT,
            f"Missing required form field(s): {', '.join(missing)}",
            missing[0],
        )
    name, email = fields["name"], fields["email"]
    if not isinstance(name, str) or not isinstance(email, str):
        # multipart uploads decode to UploadFile, not text
        return Rejection(
            RejectionReason.MALFORMED_INPUT,
            "Form fields must be plain text",
        )
    return SubscriptionForm(name=name, email=email)


def validate_name(raw: str) -> SubscriberName | Rejection:
    """Trimmed name must be non-empty, bounded, and free of forbidden characters."""
    trimmed = raw.strip()
    if not trimmed:
        return Rejection(
            RejectionReason.INVALID_NAME, "Name cannot be empty", "name",
        )
    if len(trimmed) > MAX_NAME_LENGTH:
        return Rejection(
            RejectionReason.INVALID_NAME,
            f"Name cannot exceed {MAX_NAME_LENGTH} characters",
            "name",
        )
    if any(ch in FORBIDDEN_NAME_CHARACTERS for ch in trimmed):
        return Rejection(
            RejectionReason.INVALID_NAME,
            "Name contains forbidden characters",
            "name",
        )
    return SubscriberName(trimmed)


def validate_email(raw: str) -> SubscriberEmail | Rejection:
    """Email must have a local-part@domain shape; returned unchanged."""
    try:
        _check_email_grammar(
            raw, check_deliverability=False, globally_deliverable=False,
        )
    except EmailNotValidError:
        return Rejection(
            RejectionReason.INVALID_EMAIL, "Email address is not valid", "email",
        )
    return SubscriberEmail(raw)


def validate_subscription(form: SubscriptionForm) -> NewSubscriber | Rejection:
    """Validate name then email. Returns first rejection or the new subscriber."""
    name = validate_name(form.name)
    if isinstance(name, Rejection):
        return name
    email = validate_email(form.email)
    if isinstance(email, Rejection):
        return email
    return NewSubscriber(name=name, email=email)


def parse_and_validate(fields: Mapping[str, str]) -> NewSubscriber | Rejection:
    """Full pipeline from raw form fields. Returns first rejection or the new subscriber."""
    form = parse_subscription_form(fields)
    if isinstance(form, Rejection):
        return form
    return validate_subscription(form)
