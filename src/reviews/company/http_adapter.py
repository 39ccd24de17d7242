"""HTTP adapter for the company service."""

from urllib.parse import quote

import httpx

from reviews.company.port import CompanyRatingService
from shared.config import GatewaySettings, get_settings
from shared.http import build_client, classify, read_rating
from shared.outcome import DownstreamOutcome


class HttpCompanyRatingService(CompanyRatingService):
    """Talks to ``GET {company_service_url}/{companyId}/average-rating``."""

    def __init__(
        self,
        settings: GatewaySettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.identity_header = settings.caller_identity_header
        self.client = build_client(settings.company_service_url, settings, transport=transport)

    def get_company_rating(self, company_id: str, caller_identity: str) -> DownstreamOutcome:
        return classify(
            lambda: self.client.get(
                f"/{quote(company_id, safe='')}/average-rating",
                headers={self.identity_header: caller_identity},
            ),
            parse=read_rating,
        )

    def close(self) -> None:
        self.client.close()
