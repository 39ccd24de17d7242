"""Review submission through the product/review service."""

import structlog
from pydantic import ValidationError

from reviews.model import ReviewSubmission
from reviews.product.port import ProductReviewService
from shared.handler import EndpointHandler
from shared.outcome import DownstreamOutcome, TransportFailure
from shared.translation import EndpointKind, TranslatedResponse, translate
from shared.validation import (
    MALFORMED_BODY,
    VALID,
    FailureReason,
    ValidationResult,
    validate_caller_identity,
)

logger = structlog.get_logger(__name__)

MISSING_CALLER_IDENTITY = "Please provide a userID in a header"
INVALID_RATING = "Invalid rating"
MISSING_ECHO = "Product service returned no review"


class SubmitReview(EndpointHandler):
    """Forward a review to the product service and check the echoed rating.

    ``review`` is either an already-parsed ``ReviewSubmission`` or the raw
    JSON payload. A raw payload is only parsed once the caller identity
    header has been accepted.
    """

    kind = EndpointKind.SUBMIT_REVIEW
    validation_message = MISSING_CALLER_IDENTITY

    def __init__(
        self,
        service: ProductReviewService,
        product_id: str,
        review: ReviewSubmission | bytes | str,
        caller_identity: str | None,
    ) -> None:
        super().__init__()
        self.service = service
        self.product_id = product_id
        self.review = review
        self.caller_identity = caller_identity

    def validate(self) -> ValidationResult:
        result = validate_caller_identity(self.caller_identity)
        if not result.is_valid:
            return result
        if isinstance(self.review, ReviewSubmission):
            return VALID

        try:
            self.review = ReviewSubmission.model_validate_json(self.review)
        except ValidationError as exc:
            logger.warning("Unparseable review payload", product_id=self.product_id, errors=exc.error_count())
            return ValidationResult(FailureReason.MALFORMED_BODY)
        return VALID

    def rejection_message(self, result: ValidationResult) -> str:
        if result.reason is FailureReason.MALFORMED_BODY:
            return MALFORMED_BODY
        return self.validation_message

    def entity_id(self) -> str | None:
        return self.product_id

    def call_downstream(self) -> DownstreamOutcome:
        return self.service.submit_review(self.product_id, self.review, self.caller_identity)

    def finalize(self, response: TranslatedResponse) -> TranslatedResponse:
        echoed = response.body
        if response.is_success and echoed is None:
            logger.error("Product service echoed no review", product_id=self.product_id)
            return translate(TransportFailure(MISSING_ECHO), self.kind)
        # Echoed ratings must stay within MIN_RATING..MAX_RATING.
        if response.is_success and isinstance(echoed, ReviewSubmission) and not echoed.has_valid_rating:
            logger.warning(
                "Echoed review has out-of-range rating",
                product_id=self.product_id,
                rating=echoed.rating,
            )
            return TranslatedResponse(400, INVALID_RATING)
        return response
