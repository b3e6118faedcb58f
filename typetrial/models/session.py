"""In-memory session and verdict value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .score import ScoreRecord


@dataclass(frozen=True)
class Session:
    """Server-held binding of an issued id to its start time and passage."""

    id: str
    issued_at: float
    target_text: str


@dataclass(frozen=True)
class Verdict:
    """Cheat detector outcome. ``reason`` is set only when suspicious."""

    reason: Optional[str] = None

    @property
    def is_clean(self) -> bool:
        return self.reason is None

    @classmethod
    def clean(cls) -> "Verdict":
        return cls()

    @classmethod
    def suspicious(cls, reason: str) -> "Verdict":
        return cls(reason=reason)


@dataclass(frozen=True)
class SubmissionResult:
    success: bool
    is_cheating: bool
    reason: Optional[str] = None
    record: Optional[ScoreRecord] = None

    def to_dict(self) -> dict:
        if self.is_cheating:
            return {"success": False, "isCheating": True, "reason": self.reason}
        return {
            "success": self.success,
            "isCheating": False,
            "record": self.record.model_dump() if self.record else None,
        }


__all__ = ["Session", "SubmissionResult", "Verdict"]
