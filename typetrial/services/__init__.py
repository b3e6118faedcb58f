"""Service layer helpers."""

from .anticheat import DetectorThresholds, evaluate_submission
from .leaderboard import JsonFileLeaderboardStore, LeaderboardStore, SqlLeaderboardStore
from .scoring import build_record, compute_metrics
from .session_store import InMemorySessionStore
from .sessions import SessionService

__all__ = [
    "DetectorThresholds",
    "InMemorySessionStore",
    "JsonFileLeaderboardStore",
    "LeaderboardStore",
    "SessionService",
    "SqlLeaderboardStore",
    "build_record",
    "compute_metrics",
    "evaluate_submission",
]
