"""Logging for the tracker API and CLI.

Everything goes through loguru. Records emitted with the standard `logging`
module (uvicorn access and error logs, SQLAlchemy) are forwarded to the same
sinks so server output and tracker output share one format.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

from fitness_tracker.config.settings import settings

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> <level>{level: <7}</level> <cyan>{name}</cyan> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} {level: <7} {name}:{line} {message}"

# stdlib loggers routed into loguru
FORWARDED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine")


class _ForwardToLoguru(logging.Handler):
    """Re-emit stdlib log records through loguru, keeping the caller location."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _forward_stdlib_logging() -> None:
    handler = _ForwardToLoguru()
    logging.basicConfig(handlers=[handler], level=0, force=True)
    for name in FORWARDED_LOGGERS:
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = [handler]
        stdlib_logger.propagate = False
    # SQL echo only at DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def setup_logger(level: str | None = None, log_file: str | None = None) -> None:
    """Configure loguru sinks from settings.

    Args:
        level: Overrides `LOG_LEVEL` when given (the CLI passes DEBUG for --debug)
        log_file: Overrides `LOG_FILE` when given. With neither, only stderr is used
    """
    level = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file or None

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation="10 MB",
            retention="7 days",
            diagnose=False,
        )

    _forward_stdlib_logging()
    if level == "DEBUG":
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    logger.debug(f"Tracker logging at {level}, file={log_file or 'none'}")
