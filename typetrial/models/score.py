"""Score record models."""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field as ORMField, SQLModel


class ScoreRecord(SQLModel):
    """Authoritative result of one clean submission."""

    name: str
    score: int
    wpm: int
    accuracy: int
    correct_chars: int
    date: str


class ScoreEntry(SQLModel, table=True):
    """Leaderboard row persisted by the SQL backend."""

    __tablename__ = "score_entries"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str
    score: int = ORMField(index=True)
    wpm: int
    accuracy: int
    correct_chars: int
    date: str

    @classmethod
    def from_record(cls, record: ScoreRecord) -> "ScoreEntry":
        return cls(**record.model_dump())

    def to_record(self) -> ScoreRecord:
        return ScoreRecord(**self.model_dump(exclude={"id"}))


__all__ = ["ScoreEntry", "ScoreRecord"]
