"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    DATABASE_URL,
    DB_RESET,
    HOST,
    LEADERBOARD_BACKEND,
    LEADERBOARD_LIMIT,
    LEADERBOARD_PATH,
    LOG_LEVEL,
    PORT,
    configure_logging,
    make_engine,
)
from .services import (
    DetectorThresholds,
    InMemorySessionStore,
    JsonFileLeaderboardStore,
    LeaderboardStore,
    SessionService,
    SqlLeaderboardStore,
)

logger = logging.getLogger(__name__)


def build_leaderboard_store(backend: str = LEADERBOARD_BACKEND) -> LeaderboardStore:
    """Construct the configured leaderboard backend."""

    if backend == "json":
        return JsonFileLeaderboardStore(LEADERBOARD_PATH, limit=LEADERBOARD_LIMIT)
    if backend == "sql":
        return SqlLeaderboardStore(make_engine(DATABASE_URL, reset=DB_RESET), limit=LEADERBOARD_LIMIT)
    raise RuntimeError(f"Unknown LEADERBOARD_BACKEND: {backend!r} (expected 'json' or 'sql')")


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = app.state.leaderboard
    logger.info("Leaderboard backend: %s", type(store).__name__)
    yield
    purged = app.state.session_service.sessions.purge_expired()
    if purged:
        logger.info("Discarded %d expired sessions on shutdown", purged)


def create_app(
    session_store: Optional[InMemorySessionStore] = None,
    leaderboard: Optional[LeaderboardStore] = None,
    thresholds: Optional[DetectorThresholds] = None,
) -> FastAPI:
    configure_logging(LOG_LEVEL)
    app = FastAPI(title="Typing Trial API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    leaderboard = leaderboard if leaderboard is not None else build_leaderboard_store()
    app.state.leaderboard = leaderboard
    app.state.session_service = SessionService(
        session_store if session_store is not None else InMemorySessionStore(),
        leaderboard,
        thresholds or DetectorThresholds(),
    )

    register_routes(app)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run("typetrial.app:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
