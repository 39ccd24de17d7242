"""Authentication service port (abstract interface).

Defines the contract every identity adapter must implement. The gateway
only ever sees the normalized ``DownstreamOutcome``; turning a downstream
status or network error into that shape is the adapter's job.
"""

from abc import ABC, abstractmethod

from shared.outcome import DownstreamOutcome


class IdentityService(ABC):
    """Abstract authentication service interface."""

    @abstractmethod
    def create_user(self, user_id: str) -> DownstreamOutcome:
        """Register ``user_id`` with the authentication service.

        Returns:
            ``Success`` with no payload when the user was created,
            ``DeclaredError`` for 400 (invalid id) / 409 (duplicate id) and
            any other non-2xx status, ``TransportFailure`` otherwise.
        """
        ...
