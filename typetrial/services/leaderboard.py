"""Leaderboard persistence backends."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from ..core import LEADERBOARD_LIMIT, MAX_LEADERBOARD_LIMIT, PersistenceFailure
from ..models import ScoreEntry, ScoreRecord

logger = logging.getLogger(__name__)


class LeaderboardStore(ABC):
    """Ordered record store keeping only the top ``limit`` scores.

    After every append the stored records are sorted by score, highest
    first, ties in insertion order, and there are at most ``limit`` of them.
    """

    def __init__(self, limit: int = LEADERBOARD_LIMIT) -> None:
        if not 1 <= limit <= MAX_LEADERBOARD_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_LEADERBOARD_LIMIT}")
        self.limit = limit
        self._lock = threading.Lock()

    @abstractmethod
    def append(self, record: ScoreRecord) -> None:
        ...

    @abstractmethod
    def list(self) -> List[ScoreRecord]:
        ...


class JsonFileLeaderboardStore(LeaderboardStore):
    """Leaderboard kept as a human-readable JSON array on disk."""

    def __init__(self, path: Path | str, limit: int = LEADERBOARD_LIMIT) -> None:
        super().__init__(limit)
        self.path = Path(path)

    def _read(self) -> List[ScoreRecord]:
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(raw, list):
                raise ValueError("leaderboard file does not hold a JSON array")
            return [ScoreRecord.model_validate(item) for item in raw]
        except (OSError, ValueError, ValidationError) as exc:
            raise PersistenceFailure(f"Cannot read leaderboard at {self.path}: {exc}") from exc

    def _write(self, records: List[ScoreRecord]) -> None:
        payload = json.dumps([record.model_dump() for record in records], indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Readers only ever see the old file or the complete new one.
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise PersistenceFailure(f"Cannot write leaderboard at {self.path}: {exc}") from exc

    def append(self, record: ScoreRecord) -> None:
        with self._lock:
            records = self._read()
            records.append(record)
            records.sort(key=lambda item: item.score, reverse=True)
            self._write(records[: self.limit])
        logger.info("Recorded score %d for %s", record.score, record.name)

    def list(self) -> List[ScoreRecord]:
        with self._lock:
            return self._read()


class SqlLeaderboardStore(LeaderboardStore):
    """Leaderboard kept in a SQL table through SQLModel."""

    def __init__(self, engine, limit: int = LEADERBOARD_LIMIT) -> None:
        super().__init__(limit)
        self.engine = engine

    def _ranked(self):
        return select(ScoreEntry).order_by(col(ScoreEntry.score).desc(), col(ScoreEntry.id).asc())

    def append(self, record: ScoreRecord) -> None:
        with self._lock:
            try:
                with Session(self.engine) as session:
                    session.add(ScoreEntry.from_record(record))
                    session.flush()
                    for stale in session.exec(self._ranked().offset(self.limit)).all():
                        session.delete(stale)
                    session.commit()
            except SQLAlchemyError as exc:
                raise PersistenceFailure(f"Cannot write leaderboard: {exc}") from exc
        logger.info("Recorded score %d for %s", record.score, record.name)

    def list(self) -> List[ScoreRecord]:
        try:
            with Session(self.engine) as session:
                entries = session.exec(self._ranked().limit(self.limit)).all()
                return [entry.to_record() for entry in entries]
        except SQLAlchemyError as exc:
            raise PersistenceFailure(f"Cannot read leaderboard: {exc}") from exc


__all__ = ["JsonFileLeaderboardStore", "LeaderboardStore", "SqlLeaderboardStore"]
