"""Runtime logging helpers."""

import os
import sys
from typing import Optional

from loguru import logger

LOG_LEVEL_ENV = "MINISH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Send minish log records to stderr.

    The package is silent until this is called. Diagnostics meant for the
    user are written directly to the error stream, not logged, so the
    default level keeps interactive sessions free of log lines.

    Args:
        level: Log level name; falls back to $MINISH_LOG_LEVEL, then WARNING
    """
    level = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=LOG_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    logger.enable("minish")
