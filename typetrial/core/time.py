"""Clock helpers."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], float]

RECORD_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def monotonic() -> float:
    """Server clock used for session timing, in seconds."""
    return time.monotonic()


def format_record_date(moment: datetime | None = None) -> str:
    """Format a timestamp the way score records store it."""
    return (moment or utcnow()).strftime(RECORD_DATE_FORMAT)


__all__ = ["Clock", "RECORD_DATE_FORMAT", "format_record_date", "monotonic", "utcnow"]
