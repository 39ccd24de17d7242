"""Request dependencies shared by the gateway routes."""

from fastapi import Request

from shared.config import get_settings


def caller_identity(request: Request) -> str | None:
    """Caller identity read from the configured identity header, if sent."""
    return request.headers.get(get_settings().caller_identity_header)
