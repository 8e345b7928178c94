"""Logger configuration shared by the CLI and the HTTP server."""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def _write_stderr(message: str) -> None:
    # Looked up per message so a redirected stderr is honoured.
    sys.stderr.write(message)


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default handler with a single stderr sink."""
    logger.remove()
    logger.add(
        _write_stderr,
        level=level,
        format=LOG_FORMAT,
        backtrace=True,
        diagnose=False,
    )
