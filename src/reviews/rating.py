"""Average-rating lookups for products and companies."""

from reviews.company.port import CompanyRatingService
from reviews.product.port import ProductReviewService
from reviews.submission import MISSING_CALLER_IDENTITY
from shared.handler import EndpointHandler
from shared.outcome import DownstreamOutcome
from shared.translation import EndpointKind
from shared.validation import ValidationResult, validate_caller_identity


class _RatingLookup(EndpointHandler):
    validation_message = MISSING_CALLER_IDENTITY

    def __init__(self, service, entity_id: str, caller_identity: str | None) -> None:
        super().__init__()
        self.service = service
        self._entity_id = entity_id
        self.caller_identity = caller_identity

    def validate(self) -> ValidationResult:
        return validate_caller_identity(self.caller_identity)

    def entity_id(self) -> str | None:
        return self._entity_id


class GetProductRating(_RatingLookup):
    kind = EndpointKind.PRODUCT_RATING
    service: ProductReviewService

    def call_downstream(self) -> DownstreamOutcome:
        return self.service.get_product_rating(self._entity_id, self.caller_identity)


class GetCompanyRating(_RatingLookup):
    kind = EndpointKind.COMPANY_RATING
    service: CompanyRatingService

    def call_downstream(self) -> DownstreamOutcome:
        return self.service.get_company_rating(self._entity_id, self.caller_identity)
