"""Structural checks performed before any downstream call."""

from dataclasses import dataclass
from enum import Enum

MALFORMED_BODY = "Malformed request body"


class FailureReason(Enum):
    MISSING_FIELD = "MissingField"
    MISSING_HEADER = "MissingHeader"
    MALFORMED_BODY = "MalformedBody"


@dataclass(frozen=True)
class ValidationResult:
    reason: FailureReason | None = None

    @property
    def is_valid(self) -> bool:
        return self.reason is None


VALID = ValidationResult()


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_identity(request) -> ValidationResult:
    """Check an identity-creation request carries a usable ``user_id``.

    ``request`` is any object exposing ``user_id`` (usually the parsed
    request schema), or ``None`` when the caller sent no body at all.
    """
    if request is None or _is_blank(getattr(request, "user_id", None)):
        return ValidationResult(FailureReason.MISSING_FIELD)
    return VALID


def validate_caller_identity(token: str | None) -> ValidationResult:
    """Check the caller identity header is present and non-blank."""
    if _is_blank(token):
        return ValidationResult(FailureReason.MISSING_HEADER)
    return VALID
