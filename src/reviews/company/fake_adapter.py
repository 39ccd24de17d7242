"""Configurable fake company service for development and testing."""

from reviews.company.port import CompanyRatingService
from shared.outcome import DeclaredError, DownstreamOutcome, Success, TransportFailure


class FakeCompanyRatingService(CompanyRatingService):
    """Company service answering from a preset table of averages."""

    def __init__(self) -> None:
        self.ratings: dict[str, float] = {}
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

    def set_rating(self, company_id: str, rating: float) -> None:
        self.ratings[company_id] = rating

    def get_company_rating(self, company_id: str, caller_identity: str) -> DownstreamOutcome:
        self.calls.append(
            {
                "method": "get_company_rating",
                "company_id": company_id,
                "caller_identity": caller_identity,
            }
        )
        if self.unreachable:
            return TransportFailure("Connection refused")
        if self.forced_status is not None:
            return DeclaredError(self.forced_status, self.forced_message)
        if self.known_callers is not None and caller_identity not in self.known_callers:
            return DeclaredError(401, "Unknown user")
        return Success(self.ratings.get(company_id))

    def reset(self) -> None:
        """Clear preset ratings, recorded calls and behavior overrides."""
        self.ratings.clear()
        self.calls.clear()
        self.configure()
