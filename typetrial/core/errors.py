"""Error types raised by the session and leaderboard services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..models import ScoreRecord


class TypeTrialError(Exception):
    """Base class for service errors."""

    message = "Request failed"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class SessionInvalid(TypeTrialError):
    """Unknown, expired, or already consumed session id."""

    message = "Session Invalid"


class SubmissionInvalid(TypeTrialError):
    """Malformed submission payload, rejected before any detection runs."""

    message = "Malformed submission"


class PersistenceFailure(TypeTrialError):
    """The leaderboard store could not be read or written."""

    message = "Leaderboard storage unavailable"

    def __init__(
        self, message: Optional[str] = None, record: Optional["ScoreRecord"] = None
    ) -> None:
        super().__init__(message)
        self.record = record


__all__ = [
    "PersistenceFailure",
    "SessionInvalid",
    "SubmissionInvalid",
    "TypeTrialError",
]
