"""Logging configuration for Meshify.

The TUI owns stdout, so records go to Textual's devtools console and,
when configured, to a rotating log file.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from textual.logging import TextualHandler

from meshify.constants.values import APP_NAME

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 3

_HANDLER_MARKER = "_meshify_handler"


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    level: str | int = logging.INFO,
    log_file: str | Path | None = None,
) -> logging.Logger:
    """Configure the ``meshify`` logger hierarchy.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Level name (``"DEBUG"``) or number.
        log_file: Optional path of a rotating log file.

    Returns:
        The package logger.

    Raises:
        ValueError: ``level`` is not a known level name.
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(_resolve_level(level))
    logger.propagate = False

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [TextualHandler()]

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_path,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUP_COUNT,
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARKER, True)
        logger.addHandler(handler)

    logger.debug("Logging initialized (level=%s)", logging.getLevelName(logger.level))
    return logger
