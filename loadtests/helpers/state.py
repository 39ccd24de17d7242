"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state. Registration stores the
user id so later review and rating calls can send it as ``X-User-Id``.
"""

from dataclasses import dataclass, field


@dataclass
class ReviewerState:
    """Tracks state for a single simulated reviewer."""

    user_id: str | None = None
    reviewed_products: list[str] = field(default_factory=list)
