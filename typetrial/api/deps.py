"""Request-scoped accessors for services held on the application."""

from __future__ import annotations

from fastapi import Request

from ..services import LeaderboardStore, SessionService


def get_session_service(request: Request) -> SessionService:
    return request.app.state.session_service


def get_leaderboard(request: Request) -> LeaderboardStore:
    return request.app.state.leaderboard


__all__ = ["get_leaderboard", "get_session_service"]
