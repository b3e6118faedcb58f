"""In-memory store of issued typing sessions."""

from __future__ import annotations

import logging
import secrets
import threading
from typing import Dict

from ..core import SESSION_MAX_ACTIVE, SESSION_TTL_SECONDS, Clock, SessionInvalid, monotonic
from ..models import Session

logger = logging.getLogger(__name__)


class InMemorySessionStore:
    """Thread-safe map of session id to :class:`Session`.

    Every session is handed out by :meth:`consume` at most once. Entries older
    than ``ttl_seconds`` are treated as gone, and once ``max_sessions`` are
    outstanding the oldest are evicted to make room. A ``ttl_seconds`` of 0
    keeps sessions until they are consumed or evicted.
    """

    def __init__(
        self,
        ttl_seconds: float = SESSION_TTL_SECONDS,
        max_sessions: int = SESSION_MAX_ACTIVE,
        clock: Clock = monotonic,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.ttl_seconds = ttl_seconds
        self.max_sessions = max_sessions
        self.clock = clock
        # Insertion order doubles as issue order for eviction.
        self._sessions: Dict[str, Session] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions

    def _expired(self, session: Session, now: float) -> bool:
        return self.ttl_seconds > 0 and now - session.issued_at > self.ttl_seconds

    def _purge_locked(self, now: float) -> int:
        stale = [sid for sid, session in self._sessions.items() if self._expired(session, now)]
        for sid in stale:
            del self._sessions[sid]
        return len(stale)

    def purge_expired(self) -> int:
        """Drop every expired session and return how many were removed."""

        with self._lock:
            return self._purge_locked(self.clock())

    def create(self, target_text: str) -> Session:
        now = self.clock()
        session_id = secrets.token_urlsafe(16)
        session = Session(id=session_id, issued_at=now, target_text=target_text)
        with self._lock:
            purged = self._purge_locked(now)
            if purged:
                logger.debug("Purged %d expired sessions", purged)
            while len(self._sessions) >= self.max_sessions:
                oldest = next(iter(self._sessions))
                del self._sessions[oldest]
                logger.info("Session capacity reached; evicted oldest session")
            self._sessions[session_id] = session
        return session

    def consume(self, session_id: str) -> Session:
        """Remove and return a live session, or raise :class:`SessionInvalid`."""

        with self._lock:
            session = self._sessions.pop(session_id, None) if session_id else None
        if session is None or self._expired(session, self.clock()):
            raise SessionInvalid()
        return session


__all__ = ["InMemorySessionStore"]
