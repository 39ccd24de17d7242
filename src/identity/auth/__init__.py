"""Identity service factory.

Provides get_identity_service() / set_identity_service() to swap
implementations:
- HttpIdentityService for real deployments
- FakeIdentityService for development and testing
"""

from identity.auth.fake_adapter import FakeIdentityService
from identity.auth.http_adapter import HttpIdentityService
from identity.auth.port import IdentityService
from shared.config import get_settings

_current_service: IdentityService | None = None


def get_identity_service() -> IdentityService:
    """Return the current identity service, built from settings on first use."""
    global _current_service
    if _current_service is None:
        adapter = get_settings().downstream_adapter
        if adapter == "http":
            _current_service = HttpIdentityService()
        elif adapter == "fake":
            _current_service = FakeIdentityService()
        else:
            raise ValueError(f"Unknown downstream adapter: {adapter}")
    return _current_service


def set_identity_service(service: IdentityService) -> None:
    """Override the active identity service (useful for tests)."""
    global _current_service
    _current_service = service


def reset_identity_service() -> None:
    """Reset to the settings-driven default."""
    global _current_service
    _current_service = None
