"""Typing session lifecycle: issue, submit, detect, score, record."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core import PersistenceFailure
from ..models import SubmissionResult
from .anticheat import DEFAULT_THRESHOLDS, DetectorThresholds, evaluate_submission
from .leaderboard import LeaderboardStore
from .scoring import build_record
from .session_store import InMemorySessionStore

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 40
DEFAULT_PLAYER_NAME = "Anonymous"


def normalize_player_name(raw: Optional[str]) -> str:
    name = (raw or "").strip()[:MAX_NAME_LENGTH]
    return name or DEFAULT_PLAYER_NAME


class SessionService:
    """Issues sessions and turns submissions into authoritative results.

    Timing comes only from the session store's clock: the start time is
    recorded when the session is issued and compared against the same clock
    when the submission arrives.
    """

    def __init__(
        self,
        sessions: InMemorySessionStore,
        leaderboard: LeaderboardStore,
        thresholds: DetectorThresholds = DEFAULT_THRESHOLDS,
    ) -> None:
        self.sessions = sessions
        self.leaderboard = leaderboard
        self.thresholds = thresholds

    def start(self, target_text: Optional[str] = None) -> str:
        session = self.sessions.create(target_text or "")
        logger.debug("Issued session for a %d character passage", len(session.target_text))
        return session.id

    def submit(
        self,
        session_id: str,
        player_name: Optional[str],
        typed_text: str,
        keystroke_timestamps: Sequence[float],
    ) -> SubmissionResult:
        """Judge one submission; the named session is consumed whatever happens."""

        session = self.sessions.consume(session_id)
        elapsed = self.sessions.clock() - session.issued_at

        verdict = evaluate_submission(typed_text, keystroke_timestamps, elapsed, self.thresholds)
        if not verdict.is_clean:
            return SubmissionResult(success=False, is_cheating=True, reason=verdict.reason)

        record = build_record(
            normalize_player_name(player_name), session.target_text, typed_text, elapsed
        )
        try:
            self.leaderboard.append(record)
        except PersistenceFailure as exc:
            exc.record = record
            raise
        return SubmissionResult(success=True, is_cheating=False, record=record)


__all__ = ["DEFAULT_PLAYER_NAME", "MAX_NAME_LENGTH", "SessionService", "normalize_player_name"]
