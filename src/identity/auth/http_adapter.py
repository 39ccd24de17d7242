"""HTTP adapter for the authentication service."""

import httpx

from identity.auth.port import IdentityService
from shared.config import GatewaySettings, get_settings
from shared.http import build_client, classify, read_nothing
from shared.outcome import DownstreamOutcome


class HttpIdentityService(IdentityService):
    """Talks to ``POST {auth_service_url}/users``."""

    def __init__(
        self,
        settings: GatewaySettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.client = build_client(settings.auth_service_url, settings, transport=transport)

    def create_user(self, user_id: str) -> DownstreamOutcome:
        return classify(
            lambda: self.client.post("/users", json={"userId": user_id}),
            parse=read_nothing,
        )

    def close(self) -> None:
        self.client.close()
