"""Central logging configuration utilities for source_rcon.

Logging stays on the standard library. The protocol core never touches the
root logger: it logs to whatever ``logging.Logger`` the caller injects and
falls back to a silent one. Only the CLI calls `configure_logging`.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

_LEVEL_MAP = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}

_NULL_LOGGER_NAME = "source_rcon.null"


def configure_logging(level: str | int | None = None, *, force: bool = False) -> None:
    """Configure root logger.

    Order of precedence for level:
    1. Explicit `level` argument if given
    2. Environment variable `RCON_LOG_LEVEL`
    3. Fallback to `INFO`
    """
    if level is None:
        level = os.environ.get("RCON_LOG_LEVEL", "INFO")

    if isinstance(level, str):
        level = _LEVEL_MAP.get(level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=force,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a project logger, configuring logging lazily on first access."""
    logger = logging.getLogger(name or "source_rcon")
    if not logging.getLogger().handlers:  # pragma: no cover - defensive
        configure_logging()
    return logger


def get_null_logger() -> logging.Logger:
    """Return the silent logger used when no logger is injected."""
    logger = logging.getLogger(_NULL_LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger


__all__ = ["configure_logging", "get_logger", "get_null_logger"]
