"""Company service port (abstract interface)."""

from abc import ABC, abstractmethod

from shared.outcome import DownstreamOutcome


class CompanyRatingService(ABC):
    """Abstract company service interface."""

    @abstractmethod
    def get_company_rating(self, company_id: str, caller_identity: str) -> DownstreamOutcome:
        """Fetch the average rating of ``company_id``.

        Returns:
            ``Success`` with a float, or ``Success(None)`` when the company
            has no reviews yet.
        """
        ...
