"""httpx plumbing shared by the HTTP adapters.

Adapters build their client here and reduce every exchange to a
``DownstreamOutcome`` with ``classify``; nothing in this module raises for a
downstream failure.
"""

from collections.abc import Callable
from typing import Any

import httpx
import structlog

from shared.config import GatewaySettings, get_settings
from shared.outcome import DeclaredError, DownstreamOutcome, Success, TransportFailure

logger = structlog.get_logger(__name__)


def build_client(
    base_url: str,
    settings: GatewaySettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an ``httpx.Client`` bound to one downstream service."""
    settings = settings or get_settings()
    return httpx.Client(
        base_url=base_url.rstrip("/"),
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers={"Accept": "application/json"},
        transport=transport,
    )


def read_json(response: httpx.Response) -> Any:
    """Decode a JSON body, treating an empty or 204 body as absent."""
    if response.status_code == 204 or not response.content.strip():
        return None
    return response.json()


def read_rating(response: httpx.Response) -> float | None:
    """Decode an average rating; a missing body means no reviews exist."""
    value = read_json(response)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a numeric rating, got {value!r}")
    return float(value)


def read_nothing(response: httpx.Response) -> None:  # noqa: ARG001
    return None


def declared_message(response: httpx.Response) -> str:
    text = response.text.strip()
    return text or response.reason_phrase or f"HTTP {response.status_code}"


def classify(
    send: Callable[[], httpx.Response],
    parse: Callable[[httpx.Response], Any] = read_json,
) -> DownstreamOutcome:
    """Perform ``send`` and fold the result into a ``DownstreamOutcome``.

    - 2xx: ``Success`` with ``parse(response)`` as payload
    - any other status: ``DeclaredError`` with the body text as message
    - transport errors or undecodable 2xx bodies: ``TransportFailure``
    """
    try:
        response = send()
    except httpx.HTTPError as exc:
        logger.debug("HTTP exchange failed", error=str(exc), error_type=type(exc).__name__)
        return TransportFailure(exc)

    if not response.is_success:
        return DeclaredError(response.status_code, declared_message(response))

    try:
        return Success(parse(response))
    except ValueError as exc:
        return TransportFailure(f"Unreadable response from {response.request.url}: {exc}")
