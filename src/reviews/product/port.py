"""Product/review service port (abstract interface)."""

from abc import ABC, abstractmethod

from reviews.model import ReviewSubmission
from shared.outcome import DownstreamOutcome


class ProductReviewService(ABC):
    """Abstract product/review service interface."""

    @abstractmethod
    def submit_review(
        self,
        product_id: str,
        review: ReviewSubmission,
        caller_identity: str,
    ) -> DownstreamOutcome:
        """Store a review for ``product_id`` on behalf of ``caller_identity``.

        Returns:
            ``Success`` whose payload is the stored ``ReviewSubmission`` as
            echoed by the service.
        """
        ...

    @abstractmethod
    def get_product_rating(self, product_id: str, caller_identity: str) -> DownstreamOutcome:
        """Fetch the average rating of ``product_id``.

        Returns:
            ``Success`` with a float, or ``Success(None)`` when the product
            has no reviews yet.
        """
        ...
