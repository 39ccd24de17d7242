"""Product/review service factory.

Provides get_product_service() / set_product_service() to swap
implementations:
- HttpProductReviewService for real deployments
- FakeProductReviewService for development and testing
"""

from reviews.product.fake_adapter import FakeProductReviewService
from reviews.product.http_adapter import HttpProductReviewService
from reviews.product.port import ProductReviewService
from shared.config import get_settings

_current_service: ProductReviewService | None = None


def get_product_service() -> ProductReviewService:
    """Return the current product/review service, built from settings on first use."""
    global _current_service
    if _current_service is None:
        adapter = get_settings().downstream_adapter
        if adapter == "http":
            _current_service = HttpProductReviewService()
        elif adapter == "fake":
            _current_service = FakeProductReviewService()
        else:
            raise ValueError(f"Unknown downstream adapter: {adapter}")
    return _current_service


def set_product_service(service: ProductReviewService) -> None:
    """Override the active product/review service (useful for tests)."""
    global _current_service
    _current_service = service


def reset_product_service() -> None:
    """Reset to the settings-driven default."""
    global _current_service
    _current_service = None
