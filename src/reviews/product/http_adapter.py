"""HTTP adapter for the product/review service."""

from urllib.parse import quote

import httpx

from reviews.model import ReviewSubmission
from reviews.product.port import ProductReviewService
from shared.config import GatewaySettings, get_settings
from shared.http import build_client, classify, read_json, read_rating
from shared.outcome import DownstreamOutcome


def _read_review(response: httpx.Response) -> ReviewSubmission:
    body = read_json(response)
    if body is None:
        raise ValueError("expected the stored review, got an empty body")
    return ReviewSubmission.model_validate(body)


class HttpProductReviewService(ProductReviewService):
    """Talks to ``{product_service_url}/{productId}/...``."""

    def __init__(
        self,
        settings: GatewaySettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.identity_header = settings.caller_identity_header
        self.client = build_client(settings.product_service_url, settings, transport=transport)

    def submit_review(
        self,
        product_id: str,
        review: ReviewSubmission,
        caller_identity: str,
    ) -> DownstreamOutcome:
        return classify(
            lambda: self.client.post(
                f"/{quote(product_id, safe='')}/reviews",
                json=review.model_dump(mode="json", exclude_none=True),
                headers={self.identity_header: caller_identity},
            ),
            parse=_read_review,
        )

    def get_product_rating(self, product_id: str, caller_identity: str) -> DownstreamOutcome:
        return classify(
            lambda: self.client.get(
                f"/{quote(product_id, safe='')}/average-rating",
                headers={self.identity_header: caller_identity},
            ),
            parse=read_rating,
        )

    def close(self) -> None:
        self.client.close()
