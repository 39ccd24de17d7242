"""Configurable fake product/review service for development and testing.

Stores reviews in memory per product and averages their ratings on request.
Like the other fakes it can be forced into a declared status, made
unreachable, or restricted to a set of known caller identities (unknown
callers get a 401, as the real service answers).
"""

from statistics import fmean
from uuid import uuid4

from reviews.model import ReviewSubmission
from reviews.product.port import ProductReviewService
from shared.outcome import DeclaredError, DownstreamOutcome, Success, TransportFailure


class FakeProductReviewService(ProductReviewService):
    """In-memory product/review service."""

    def __init__(self) -> None:
        self.reviews: dict[str, list[ReviewSubmission]] = {}
        self.calls: list[dict] = []
        self.known_callers: set[str] | None = None
        self.forced_status: int | None = None
        self.forced_message: str = "Forced failure"
        self.unreachable: bool = False

    def configure(
        self,
        forced_status: int | None = None,
        message: str = "Forced failure",
        unreachable: bool = False,
        known_callers: set[str] | None = None,
    ) -> None:
        """Configure service behavior at runtime."""
        self.forced_status = forced_status
        self.forced_message = message
        self.unreachable = unreachable
        self.known_callers = known_callers

    def _refuse(self, caller_identity: str) -> DownstreamOutcome | None:
        if self.unreachable:
            return TransportFailure("Connection refused")
        if self.forced_status is not None:
            return DeclaredError(self.forced_status, self.forced_message)
        if self.known_callers is not None and caller_identity not in self.known_callers:
            return DeclaredError(401, "Unknown user")
        return None

    def submit_review(
        self,
        product_id: str,
        review: ReviewSubmission,
        caller_identity: str,
    ) -> DownstreamOutcome:
        self.calls.append(
            {
                "method": "submit_review",
                "product_id": product_id,
                "review": review,
                "caller_identity": caller_identity,
            }
        )
        refused = self._refuse(caller_identity)
        if refused is not None:
            return refused

        stored = review.model_copy(update={"id": review.id or f"rev-{uuid4().hex[:12]}"})
        self.reviews.setdefault(product_id, []).append(stored)
        return Success(stored)

    def get_product_rating(self, product_id: str, caller_identity: str) -> DownstreamOutcome:
        self.calls.append(
            {
                "method": "get_product_rating",
                "product_id": product_id,
                "caller_identity": caller_identity,
            }
        )
        refused = self._refuse(caller_identity)
        if refused is not None:
            return refused

        ratings = [r.rating for r in self.reviews.get(product_id, []) if r.rating is not None]
        return Success(fmean(ratings) if ratings else None)

    def reset(self) -> None:
        """Clear stored reviews, recorded calls and behavior overrides."""
        self.reviews.clear()
        self.calls.clear()
        self.configure()
