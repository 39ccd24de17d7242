"""Configurable fake authentication service for development and testing.

Keeps registered ids in memory, answers 409 for duplicates and 400 for ids
containing whitespace, and can be forced to return a fixed declared status
or a transport failure.
"""

from identity.auth.port import IdentityService
from shared.outcome import DeclaredError, DownstreamOutcome, Success, TransportFailure


class FakeIdentityService(IdentityService):
    """In-memory identity service."""

    def __init__(self) -> None:
        self.users: set[str] = set()
        self.calls: list[dict] = []
        self.forced_status: int | None = None
        self.forced_message: str = "Forced failure"
        self.unreachable: bool = False

    def configure(
        self,
        forced_status: int | None = None,
        message: str = "Forced failure",
        unreachable: bool = False,
    ) -> None:
        """Configure service behavior at runtime."""
        self.forced_status = forced_status
        self.forced_message = message
        self.unreachable = unreachable

    def create_user(self, user_id: str) -> DownstreamOutcome:
        self.calls.append({"method": "create_user", "user_id": user_id})

        if self.unreachable:
            return TransportFailure("Connection refused")
        if self.forced_status is not None:
            return DeclaredError(self.forced_status, self.forced_message)
        if any(ch.isspace() for ch in user_id):
            return DeclaredError(400, "Invalid userId")
        if user_id in self.users:
            return DeclaredError(409, "User already exists")

        self.users.add(user_id)
        return Success()

    def reset(self) -> None:
        """Forget registered users and behavior overrides."""
        self.users.clear()
        self.calls.clear()
        self.configure()
