"""Translate downstream outcomes into caller-facing responses.

Downstream status codes are never forwarded verbatim. The gateway's callers
sit behind a different trust boundary, so each declared status is re-labelled
for them using a fixed precedence table (first match wins):

1. Success with a payload       -> 200 for fetches, 201 for create/submit
2. Success without a payload    -> 404 (rating fetches only)
3. DeclaredError(409), identity -> 409 duplicate id
4. DeclaredError(400), identity -> 400 invalid id
5. DeclaredError(401), reviews  -> 401 unknown caller identity
6. any other DeclaredError      -> 500 "Failed to <verb>: <message>"
7. TransportFailure             -> 500 "Failed to <verb>: <description>"
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from shared.outcome import DeclaredError, DownstreamOutcome, Success, TransportFailure

USER_CREATED = "User created"
USER_ID_TAKEN = "This user ID is already taken. Please choose another."
INVALID_USER_ID = "Invalid userId. Please try a different value."
UNKNOWN_CALLER = "Your user ID does not exist. Please create a new user."


class EndpointKind(Enum):
    """Logical gateway operations, each with its own message vocabulary."""

    CREATE_USER = ("create user", 201, None)
    SUBMIT_REVIEW = ("add review", 201, None)
    PRODUCT_RATING = ("fetch product rating", 200, "product")
    COMPANY_RATING = ("fetch company rating", 200, "company")

    def __init__(self, verb: str, success_status: int, entity_kind: str | None) -> None:
        self.verb = verb
        self.success_status = success_status
        self.entity_kind = entity_kind

    @property
    def is_rating_fetch(self) -> bool:
        return self.entity_kind is not None


@dataclass(frozen=True)
class TranslatedResponse:
    status_code: int
    body: Any

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


def failure_message(kind: EndpointKind, detail: str) -> str:
    return f"Failed to {kind.verb}: {detail}"


def no_reviews_message(kind: EndpointKind, entity_id: str | None) -> str:
    return f"No reviews found for {kind.entity_kind}Id: {entity_id}"


def translate(
    outcome: DownstreamOutcome,
    kind: EndpointKind,
    entity_id: str | None = None,
) -> TranslatedResponse:
    """Map ``outcome`` to the status and body the caller sees.

    ``entity_id`` is only used to phrase the rating-fetch 404 message.
    """
    if isinstance(outcome, Success):
        if kind is EndpointKind.CREATE_USER:
            return TranslatedResponse(kind.success_status, USER_CREATED)
        if outcome.is_absent and kind.is_rating_fetch:
            return TranslatedResponse(404, no_reviews_message(kind, entity_id))
        return TranslatedResponse(kind.success_status, outcome.payload)

    if isinstance(outcome, DeclaredError):
        if kind is EndpointKind.CREATE_USER:
            if outcome.status_code == 409:
                return TranslatedResponse(409, USER_ID_TAKEN)
            if outcome.status_code == 400:
                return TranslatedResponse(400, INVALID_USER_ID)
        elif outcome.status_code == 401:
            return TranslatedResponse(401, UNKNOWN_CALLER)
        return TranslatedResponse(500, failure_message(kind, outcome.message))

    if isinstance(outcome, TransportFailure):
        return TranslatedResponse(500, failure_message(kind, outcome.description))

    raise TypeError(f"Unsupported downstream outcome: {outcome!r}")
