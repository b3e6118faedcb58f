"""Model exports."""

from .score import ScoreEntry, ScoreRecord
from .session import Session, SubmissionResult, Verdict

__all__ = [
    "ScoreEntry",
    "ScoreRecord",
    "Session",
    "SubmissionResult",
    "Verdict",
]
