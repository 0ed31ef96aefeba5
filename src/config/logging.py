"""Logging configuration for the bot service."""

from __future__ import annotations

import logging
import os


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process.

    Logs are for internal diagnostics only. Analyzed strings are user content and are logged by
    length or hash prefix, never verbatim.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # aiogram logs every update at INFO; keep it only when debugging.
    if logging.getLevelName(log_level) != logging.DEBUG:
        logging.getLogger("aiogram.event").setLevel(logging.WARNING)
