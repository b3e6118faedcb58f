"""Server-side scoring of typed text."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core import format_record_date
from ..models import ScoreRecord

CHARS_PER_WORD = 5
MIN_ELAPSED_SECONDS = 1.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves upward.

    Scores are never negative, so this matches rounding half away from zero.
    The built-in ``round`` rounds halves to even and is not used here.
    """

    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class ScoreMetrics:
    correct_chars: int
    accuracy: int
    wpm: int
    score: int


def count_correct_chars(target_text: str, typed_text: str) -> int:
    """Positional matches over the overlapping prefix of both strings."""

    return sum(1 for expected, actual in zip(target_text, typed_text) if expected == actual)


def compute_metrics(target_text: str, typed_text: str, elapsed_seconds: float) -> ScoreMetrics:
    """Compute speed, accuracy and score from corrected characters only."""

    correct = count_correct_chars(target_text, typed_text)
    accuracy = round_half_up(correct / len(typed_text) * 100) if typed_text else 0
    minutes = max(elapsed_seconds, MIN_ELAPSED_SECONDS) / 60
    wpm = round_half_up((correct / CHARS_PER_WORD) / minutes)
    score = round_half_up(wpm * (accuracy / 100) * 10)
    return ScoreMetrics(correct_chars=correct, accuracy=accuracy, wpm=wpm, score=score)


def build_record(
    name: str,
    target_text: str,
    typed_text: str,
    elapsed_seconds: float,
    now: Optional[datetime] = None,
) -> ScoreRecord:
    metrics = compute_metrics(target_text, typed_text, elapsed_seconds)
    return ScoreRecord(
        name=name,
        score=metrics.score,
        wpm=metrics.wpm,
        accuracy=metrics.accuracy,
        correct_chars=metrics.correct_chars,
        date=format_record_date(now),
    )


__all__ = [
    "CHARS_PER_WORD",
    "MIN_ELAPSED_SECONDS",
    "ScoreMetrics",
    "build_record",
    "compute_metrics",
    "count_correct_chars",
    "round_half_up",
]
