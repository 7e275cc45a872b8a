"""Central logging setup for Taskboard.

Every module logs through `logging.getLogger(__name__)`, so everything lands
under the `taskboard` logger configured here: one rotating file plus an
optional console stream, sharing a single format.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from taskboard.config import LoggingConfig

ROOT_LOGGER = "taskboard"
LOG_DIR_ENV = "TASKBOARD_LOG_DIR"
LOG_LEVEL_ENV = "TASKBOARD_LOG_LEVEL"

DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "taskboard.log"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_BYTES = 5 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 3

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_dir: str | Path | None = None,
    level: str | None = None,
    console: bool = True,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> logging.Logger:
    """Configure the `taskboard` logger, replacing any earlier handlers.

    Args:
        log_dir: Directory for the log file. Falls back to $TASKBOARD_LOG_DIR,
            then ./logs. Created if missing.
        level: Level name. Falls back to $TASKBOARD_LOG_LEVEL, then INFO.
            Unknown names mean INFO.
        console: Also write to stderr.
        log_file: File name inside log_dir.
        max_bytes: Size at which the file rotates.
        backup_count: Rotated files to keep.

    Returns:
        The configured `taskboard` logger.
    """
    directory = Path(log_dir or os.environ.get(LOG_DIR_ENV, DEFAULT_LOG_DIR))
    directory.mkdir(parents=True, exist_ok=True)
    level_name = (level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(numeric_level)

    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            directory / log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging to %s at %s", directory / log_file, level_name)
    return logger


def setup_logging_from_config(
    config: LoggingConfig,
    level: str | None = None,
    console: bool | None = None,
) -> logging.Logger:
    """Apply the `logging` section of taskboard.yaml.

    Args:
        config: Parsed logging section.
        level: Overrides the configured level (e.g. from --verbose).
        console: Overrides the configured console switch.
    """
    return setup_logging(
        log_dir=config.dir,
        level=level or config.level,
        console=config.console if console is None else console,
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a component, placed under the `taskboard` hierarchy."""
    prefix = f"{ROOT_LOGGER}."
    return logging.getLogger(name if name.startswith(prefix) else prefix + name)


def truncate_output(output: str, max_length: int = 5000) -> str:
    """Shorten a raw payload before quoting it in a log line."""
    if len(output) <= max_length:
        return output
    dropped = len(output) - max_length
    return f"{output[:max_length]}\n... [truncated, {dropped} more chars]"
