"""Logging configuration for the command-line entry point."""

from __future__ import annotations

import logging
import os

# Helper modules log under `src.*`; decode fallbacks and failed validations are DEBUG records.
HELPERS_LOGGER = "src"


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process.

    Library modules only emit records; configuring handlers is left to the entry point. The helper
    loggers follow the requested level, while third-party loggers stay at WARNING so that
    `LOG_LEVEL=DEBUG` only surfaces the helpers' own diagnostics.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger(HELPERS_LOGGER).setLevel(log_level)
