"""Common request lifecycle shared by every gateway endpoint.

Each endpoint moves through the same states:

    RECEIVED -> VALIDATED -> DOWNSTREAM_CALLED -> RESPONSE_READY

A validation failure jumps straight to RESPONSE_READY with a 400. Subclasses
supply the validation step, the downstream call and, optionally, a final
check on the translated response.
"""

from abc import ABC, abstractmethod
from enum import Enum

import structlog

from shared.outcome import DeclaredError, DownstreamOutcome, Success, TransportFailure
from shared.translation import EndpointKind, TranslatedResponse, translate
from shared.validation import ValidationResult

logger = structlog.get_logger(__name__)


class HandlerState(Enum):
    RECEIVED = "Received"
    VALIDATED = "Validated"
    DOWNSTREAM_CALLED = "DownstreamCalled"
    RESPONSE_READY = "ResponseReady"


class EndpointHandler(ABC):
    """Validate, dispatch to one downstream port, translate the outcome."""

    kind: EndpointKind
    validation_message: str

    def __init__(self) -> None:
        self.state = HandlerState.RECEIVED

    @abstractmethod
    def validate(self) -> ValidationResult:
        """Check the inbound request before anything leaves the gateway."""
        ...

    @abstractmethod
    def call_downstream(self) -> DownstreamOutcome:
        """Make exactly one call on the downstream port."""
        ...

    def entity_id(self) -> str | None:
        return None

    def rejection_message(self, result: ValidationResult) -> str:
        return self.validation_message

    def finalize(self, response: TranslatedResponse) -> TranslatedResponse:
        return response

    def handle(self) -> TranslatedResponse:
        result = self.validate()
        if not result.is_valid:
            logger.warning(
                "Request rejected before dispatch",
                endpoint=self.kind.name,
                reason=result.reason.value,
            )
            return self._ready(TranslatedResponse(400, self.rejection_message(result)))
        self.state = HandlerState.VALIDATED

        outcome = self._dispatch()
        self.state = HandlerState.DOWNSTREAM_CALLED
        self._log_outcome(outcome)

        response = translate(outcome, self.kind, self.entity_id())
        return self._ready(self.finalize(response))

    def _dispatch(self) -> DownstreamOutcome:
        try:
            return self.call_downstream()
        except Exception as exc:
            # Unclassified adapter errors count as transport faults.
            logger.exception("Downstream adapter raised", endpoint=self.kind.name)
            return TransportFailure(exc)

    def _ready(self, response: TranslatedResponse) -> TranslatedResponse:
        self.state = HandlerState.RESPONSE_READY
        return response

    def _log_outcome(self, outcome: DownstreamOutcome) -> None:
        if isinstance(outcome, Success):
            logger.info(
                "Downstream call succeeded",
                endpoint=self.kind.name,
                entity_id=self.entity_id(),
                absent=outcome.is_absent,
            )
        elif isinstance(outcome, DeclaredError):
            log = logger.warning if outcome.status_code < 500 else logger.error
            log(
                "Downstream declared an error",
                endpoint=self.kind.name,
                entity_id=self.entity_id(),
                status_code=outcome.status_code,
                message=outcome.message,
            )
        else:
            logger.error(
                "Downstream transport failure",
                endpoint=self.kind.name,
                entity_id=self.entity_id(),
                error=outcome.description,
            )
