"""
Logging configuration for the heritage tracker.

The package logs through loguru but stays silent until `setup_logging` is
called: `heritage/__init__.py` disables the "heritage" logger namespace, and
setting up logging enables it again.
"""

import os
import sys
from pathlib import Path

from loguru import logger

from heritage.config import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(
    level: str | None = None,
    log_file: Path | None = None,
    rotation: str = "10 MB",
    retention: str = "1 week",
) -> None:
    """
    Configure logging for the heritage tracker.

    Replaces every existing sink with a stderr sink and, when a log file is
    given (or HERITAGE_LOG_FILE is set), a rotating gzip-compressed file sink.
    Enables the package's own log records.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR), defaults to settings.log_level
        log_file: File to log to, defaults to settings.log_file
        rotation: Log rotation setting (e.g., "10 MB", "1 day")
        retention: Log retention setting (e.g., "1 week", "10 files")
    """
    level = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file

    logger.remove()
    logger.enable("heritage")

    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file,
            level=level,
            format=FILE_FORMAT,
            rotation=rotation,
            retention=retention,
            compression="gz",
        )

    logger.debug(f"Logging configured: level={level}, file={log_file or '-'}")


# Only configure logging if not explicitly disabled
if os.environ.get("DISABLE_LOGGING") != "1":
    setup_logging()
