"""HTTP surface: routers plus the JSON error bodies clients rely on."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core import PersistenceFailure, SessionInvalid, SubmissionInvalid
from .routers import ALL_ROUTERS

logger = logging.getLogger(__name__)


def _error(message: str, status_code: int, **extra) -> JSONResponse:
    return JSONResponse({"error": message, **extra}, status_code=status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Map service errors onto ``{"error": ...}`` responses."""

    @app.exception_handler(SessionInvalid)
    async def session_invalid(request: Request, exc: SessionInvalid) -> JSONResponse:
        return _error(exc.message, 400)

    @app.exception_handler(SubmissionInvalid)
    async def submission_invalid(request: Request, exc: SubmissionInvalid) -> JSONResponse:
        return _error(exc.message, 400)

    @app.exception_handler(RequestValidationError)
    async def request_invalid(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error("Request body must be a JSON object", 400)

    @app.exception_handler(PersistenceFailure)
    async def persistence_failure(request: Request, exc: PersistenceFailure) -> JSONResponse:
        logger.error("Leaderboard storage failed: %s", exc.message, exc_info=exc)
        if exc.record is None:
            return _error("Leaderboard unavailable", 500)
        # The score was computed; hand it back even though it was not saved.
        return _error("Failed to save score", 500, record=exc.record.model_dump())


def register_routes(app: FastAPI) -> None:
    """Attach the error handlers and every router to the given app."""

    register_error_handlers(app)
    for router in ALL_ROUTERS:
        app.include_router(router)


__all__ = ["register_error_handlers", "register_routes"]
