"""
Logger utility for runline.

Console output goes to stderr (warnings and errors only). When a log
directory is configured (argument, or RUNLINE_LOG_DIR), rotating files
are written there too:
- runline.log: Main log with 5MB rotation, keeps 3 backups
- runline.errors.log: Errors only, 2MB rotation, keeps 2 backups
- runline.json: Structured JSON, 5MB rotation, keeps 2 backups
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_DIR_VAR = "RUNLINE_LOG_DIR"


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def _get_log_dir(log_dir: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """Resolve and create the log directory, if one is configured."""
    location = log_dir or os.environ.get(LOG_DIR_VAR)
    if not location:
        return None
    path = Path(location)
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_logger(
    name: str = "runline",
    level: Optional[int] = None,
    log_dir: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Get or create a logger with console and rotating file handlers.

    Handlers are attached once per logger name; later calls only adjust
    the level.

    Args:
        name: Logger name
        level: Optional logging level (defaults to DEBUG)
        log_dir: Optional directory for file logs (defaults to $RUNLINE_LOG_DIR)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        text_formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        # Console handler (stderr) - minimal output
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(text_formatter)
        logger.addHandler(console_handler)

        try:
            directory = _get_log_dir(log_dir)
        except OSError:
            directory = None  # File logging unavailable, console only

        if directory is not None:
            main_handler = RotatingFileHandler(
                directory / "runline.log",
                maxBytes=5 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
            main_handler.setLevel(logging.DEBUG)
            main_handler.setFormatter(text_formatter)
            logger.addHandler(main_handler)

            error_handler = RotatingFileHandler(
                directory / "runline.errors.log",
                maxBytes=2 * 1024 * 1024,
                backupCount=2,
                encoding="utf-8",
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(text_formatter)
            logger.addHandler(error_handler)

            json_handler = RotatingFileHandler(
                directory / "runline.json",
                maxBytes=5 * 1024 * 1024,
                backupCount=2,
                encoding="utf-8",
            )
            json_handler.setLevel(logging.INFO)
            json_handler.setFormatter(JsonFormatter())
            logger.addHandler(json_handler)

    if level is not None:
        logger.setLevel(level)
    elif not logger.level:
        logger.setLevel(logging.DEBUG)

    return logger
