"""Typing session endpoints."""

from __future__ import annotations

import math
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from ...core import SubmissionInvalid
from ...services import SessionService
from ..deps import get_session_service

router = APIRouter(prefix="/api", tags=["sessions"])


# Millisecond epoch timestamps stay far below this; anything larger is garbage
# whose intervals could overflow the variance computation.
MAX_TIMESTAMP = 1e15


def _parse_keystrokes(raw: Any) -> List[float]:
    """Validate client keystroke timestamps.

    Timestamps must be finite numbers within ``MAX_TIMESTAMP`` and never go
    backwards; anything else is rejected before the session is consumed.
    """

    if raw is None:
        return []
    if not isinstance(raw, list):
        raise SubmissionInvalid("keystrokeData must be a list of timestamps")
    timestamps: List[float] = []
    for value in raw:
        # bool is an int subclass but never a timestamp
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise SubmissionInvalid("keystrokeData must contain only numeric timestamps")
        try:
            stamp = float(value)
        except OverflowError as exc:
            raise SubmissionInvalid("keystrokeData timestamps are out of range") from exc
        if not math.isfinite(stamp) or abs(stamp) > MAX_TIMESTAMP:
            raise SubmissionInvalid("keystrokeData timestamps are out of range")
        if timestamps and stamp < timestamps[-1]:
            raise SubmissionInvalid("keystrokeData timestamps must not decrease")
        timestamps.append(stamp)
    return timestamps


def _optional_str(body: Dict[str, Any], key: str) -> str | None:
    value = body.get(key)
    if value is not None and not isinstance(value, str):
        raise SubmissionInvalid(f"{key} must be a string")
    return value


@router.post("/start")
def start_session(
    body: Dict[str, Any], service: SessionService = Depends(get_session_service)
) -> Dict[str, str]:
    """Issue a session bound to the passage the player is about to type."""

    target_text = body.get("targetText")
    if target_text is not None and not isinstance(target_text, str):
        raise SubmissionInvalid("targetText must be a string")
    return {"sessionId": service.start(target_text)}


@router.post("/submit")
def submit_result(
    body: Dict[str, Any], service: SessionService = Depends(get_session_service)
) -> Dict[str, Any]:
    """Validate, check, and score a finished typing session."""

    session_id = _optional_str(body, "sessionId")
    player_name = _optional_str(body, "playerName")
    typed_text = _optional_str(body, "typedText")
    if typed_text is None:
        raise SubmissionInvalid("typedText is required")
    timestamps = _parse_keystrokes(body.get("keystrokeData"))

    result = service.submit(session_id or "", player_name, typed_text, timestamps)
    return result.to_dict()


__all__ = ["router"]
