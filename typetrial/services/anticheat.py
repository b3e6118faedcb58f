"""Submission checks for scripted or automated typing."""

from __future__ import annotations

import logging
import statistics
from dataclasses import dataclass
from typing import List, Sequence

from ..core import MAX_CHARS_PER_SECOND, MIN_KEYSTROKE_INTERVALS, MIN_KEYSTROKE_VARIANCE
from ..models import Verdict

logger = logging.getLogger(__name__)

REASON_SPEED = "Speed implies automated script"
REASON_ROBOTIC = "Robotic typing pattern"


@dataclass(frozen=True)
class DetectorThresholds:
    """Limits a human submission must stay within."""

    max_chars_per_second: float = MAX_CHARS_PER_SECOND
    min_variance: float = MIN_KEYSTROKE_VARIANCE
    # Regularity is only judged with strictly more intervals than this.
    min_intervals: int = MIN_KEYSTROKE_INTERVALS


DEFAULT_THRESHOLDS = DetectorThresholds()


def chars_per_second(typed_text: str, elapsed_seconds: float) -> float:
    """Typed characters per second, with elapsed time floored at one second."""

    return len(typed_text) / max(elapsed_seconds, 1.0)


def keystroke_intervals(timestamps: Sequence[float]) -> List[float]:
    """Gaps between consecutive keystroke timestamps."""

    return [later - earlier for earlier, later in zip(timestamps, timestamps[1:])]


def check_throughput(
    typed_text: str, elapsed_seconds: float, thresholds: DetectorThresholds = DEFAULT_THRESHOLDS
) -> Verdict:
    cps = chars_per_second(typed_text, elapsed_seconds)
    if cps > thresholds.max_chars_per_second:
        logger.warning("Cheat blocked: speed too high (%.2f chars/sec)", cps)
        return Verdict.suspicious(REASON_SPEED)
    return Verdict.clean()


def check_rhythm(
    timestamps: Sequence[float], thresholds: DetectorThresholds = DEFAULT_THRESHOLDS
) -> Verdict:
    """Flag keystroke timing too regular to come from a person.

    Skipped (clean) when there are not enough intervals to judge.
    """

    intervals = keystroke_intervals(timestamps)
    if len(intervals) <= thresholds.min_intervals:
        return Verdict.clean()

    try:
        variance = statistics.pvariance(intervals)
    except OverflowError:
        # Spread too large for a float is as irregular as timing gets.
        return Verdict.clean()
    if variance < thresholds.min_variance:
        logger.warning("Cheat blocked: robotic typing (interval variance %.3f)", variance)
        return Verdict.suspicious(REASON_ROBOTIC)
    return Verdict.clean()


def evaluate_submission(
    typed_text: str,
    timestamps: Sequence[float],
    elapsed_seconds: float,
    thresholds: DetectorThresholds = DEFAULT_THRESHOLDS,
) -> Verdict:
    """Run every check in order and return the first suspicious verdict.

    Elapsed time must come from the server clock; a client-reported
    duration is never an input here.
    """

    verdict = check_throughput(typed_text, elapsed_seconds, thresholds)
    if not verdict.is_clean:
        return verdict
    return check_rhythm(timestamps, thresholds)


__all__ = [
    "DEFAULT_THRESHOLDS",
    "DetectorThresholds",
    "REASON_ROBOTIC",
    "REASON_SPEED",
    "check_rhythm",
    "check_throughput",
    "chars_per_second",
    "evaluate_submission",
    "keystroke_intervals",
]
