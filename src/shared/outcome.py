"""Normalized result of a single downstream call.

Every port adapter reduces whatever its transport reports to exactly one of
three shapes. Handlers and the translator only ever branch on these.
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Success:
    """The downstream service accepted the call.

    ``payload`` is ``None`` when the service answered without a body
    (an average rating with no reviews behind it, or an empty creation reply).
    """

    payload: Any = None

    @property
    def is_absent(self) -> bool:
        return self.payload is None


@dataclass(frozen=True)
class DeclaredError:
    """The downstream service answered with an explicit non-2xx status."""

    status_code: int
    message: str = ""


@dataclass(frozen=True)
class TransportFailure:
    """The call never produced a classifiable answer."""

    cause: BaseException | str

    @property
    def description(self) -> str:
        if isinstance(self.cause, BaseException):
            return str(self.cause) or type(self.cause).__name__
        return self.cause


DownstreamOutcome = Union[Success, DeclaredError, TransportFailure]
