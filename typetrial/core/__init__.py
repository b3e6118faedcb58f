"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    DATABASE_URL,
    DB_RESET,
    HOST,
    LEADERBOARD_BACKEND,
    LEADERBOARD_LIMIT,
    LEADERBOARD_PATH,
    LOG_LEVEL,
    MAX_CHARS_PER_SECOND,
    MAX_LEADERBOARD_LIMIT,
    MIN_KEYSTROKE_INTERVALS,
    MIN_KEYSTROKE_VARIANCE,
    PORT,
    SESSION_MAX_ACTIVE,
    SESSION_TTL_SECONDS,
)
from .database import make_engine
from .errors import PersistenceFailure, SessionInvalid, SubmissionInvalid, TypeTrialError
from .logging import configure_logging
from .time import Clock, format_record_date, monotonic, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "Clock",
    "DATABASE_URL",
    "DB_RESET",
    "HOST",
    "LEADERBOARD_BACKEND",
    "LEADERBOARD_LIMIT",
    "LEADERBOARD_PATH",
    "LOG_LEVEL",
    "MAX_CHARS_PER_SECOND",
    "MAX_LEADERBOARD_LIMIT",
    "MIN_KEYSTROKE_INTERVALS",
    "MIN_KEYSTROKE_VARIANCE",
    "PORT",
    "PersistenceFailure",
    "SESSION_MAX_ACTIVE",
    "SESSION_TTL_SECONDS",
    "SessionInvalid",
    "SubmissionInvalid",
    "TypeTrialError",
    "configure_logging",
    "format_record_date",
    "make_engine",
    "monotonic",
    "utcnow",
]
