"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from ...services import LeaderboardStore
from ..deps import get_leaderboard

router = APIRouter(prefix="/api", tags=["leaderboard"])


@router.get("/leaderboard")
def get_leaderboard_entries(
    store: LeaderboardStore = Depends(get_leaderboard),
) -> List[Dict[str, Any]]:
    """Top scores, highest first."""

    return [record.model_dump() for record in store.list()]


__all__ = ["router"]
