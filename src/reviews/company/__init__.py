"""Company service factory.

Provides get_company_service() / set_company_service() to swap
implementations:
- HttpCompanyRatingService for real deployments
- FakeCompanyRatingService for development and testing
"""

from reviews.company.fake_adapter import FakeCompanyRatingService
from reviews.company.http_adapter import HttpCompanyRatingService
from reviews.company.port import CompanyRatingService
from shared.config import get_settings

_current_service: CompanyRatingService | None = None


def get_company_service() -> CompanyRatingService:
    """Return the current company service, built from settings on first use."""
    global _current_service
    if _current_service is None:
        adapter = get_settings().downstream_adapter
        if adapter == "http":
            _current_service = HttpCompanyRatingService()
        elif adapter == "fake":
            _current_service = FakeCompanyRatingService()
        else:
            raise ValueError(f"Unknown downstream adapter: {adapter}")
    return _current_service


def set_company_service(service: CompanyRatingService) -> None:
    """Override the active company service (useful for tests)."""
    global _current_service
    _current_service = service


def reset_company_service() -> None:
    """Reset to the settings-driven default."""
    global _current_service
    _current_service = None
