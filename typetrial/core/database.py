"""Database engine helpers for the SQL leaderboard backend."""

from __future__ import annotations

from pathlib import Path

from sqlmodel import SQLModel, create_engine


def make_engine(url: str, *, reset: bool = False):
    """Create an engine and make sure the tables exist."""

    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        _, _, db_path = url.partition("///")
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url, connect_args=connect_args)
    # Registers ScoreEntry with the metadata.
    from .. import models  # noqa: F401

    if reset:
        SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    return engine


__all__ = ["make_engine"]
