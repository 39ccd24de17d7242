"""Downstream configuration API package."""

from shared.api.dependencies import caller_identity
from shared.api.routes import downstream_router

__all__ = ["caller_identity", "downstream_router"]
