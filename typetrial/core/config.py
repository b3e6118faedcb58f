"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(
    name: str, default: int, minimum: int | None = None, maximum: int | None = None
) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc
    if minimum is not None and value < minimum:
        raise RuntimeError(f"{name} must be at least {minimum}")
    if maximum is not None and value > maximum:
        raise RuntimeError(f"{name} must be at most {maximum}")
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Server ---------------------------------------------------------------------
HOST = os.getenv("HOST", "127.0.0.1")
PORT = _env_int("PORT", 3000, minimum=1, maximum=65535)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_split_csv(os.getenv("ALLOWED_CORS_ORIGINS")),
        *_local_dev_origins,
    ]
)


# Sessions -------------------------------------------------------------------
# 0 disables expiry.
SESSION_TTL_SECONDS = _env_float("SESSION_TTL_SECONDS", 3600.0)
SESSION_MAX_ACTIVE = _env_int("SESSION_MAX_ACTIVE", 10_000, minimum=1)


# Anti-cheat thresholds ------------------------------------------------------
MAX_CHARS_PER_SECOND = _env_float("MAX_CHARS_PER_SECOND", 18.0)
MIN_KEYSTROKE_VARIANCE = _env_float("MIN_KEYSTROKE_VARIANCE", 5.0)
MIN_KEYSTROKE_INTERVALS = _env_int("MIN_KEYSTROKE_INTERVALS", 5)


# Leaderboard persistence ----------------------------------------------------
LEADERBOARD_BACKEND = os.getenv("LEADERBOARD_BACKEND", "json").strip().lower()
# The public board never holds more than the top 50.
MAX_LEADERBOARD_LIMIT = 50
LEADERBOARD_LIMIT = _env_int(
    "LEADERBOARD_LIMIT", MAX_LEADERBOARD_LIMIT, minimum=1, maximum=MAX_LEADERBOARD_LIMIT
)
LEADERBOARD_PATH = Path(os.getenv("LEADERBOARD_PATH", "data/scores.json"))
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///data/typetrial.db")
DB_RESET = _env_bool("DB_RESET", False)


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DB_RESET",
    "HOST",
    "LEADERBOARD_BACKEND",
    "LEADERBOARD_LIMIT",
    "LEADERBOARD_PATH",
    "LOG_LEVEL",
    "MAX_LEADERBOARD_LIMIT",
    "MAX_CHARS_PER_SECOND",
    "MIN_KEYSTROKE_INTERVALS",
    "MIN_KEYSTROKE_VARIANCE",
    "PORT",
    "SESSION_MAX_ACTIVE",
    "SESSION_TTL_SECONDS",
]
