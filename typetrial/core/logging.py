"""Logging setup."""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Give the process a root handler and set the package log level.

    ``basicConfig`` leaves an existing root setup alone (an ASGI server's,
    say), so the package level is set separately to keep INFO records.
    """

    resolved = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=resolved, format=_FORMAT)
    logging.getLogger("typetrial").setLevel(resolved)


__all__ = ["configure_logging"]
