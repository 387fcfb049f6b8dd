"""Logging configuration: readable console output plus optional JSON log file."""

import json
import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path

from bizdash.config import Settings

ROOT_LOGGER = "bizdash"


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    # Standard LogRecord attributes that should not be treated as extra fields
    _STANDARD_ATTRS = {
        "name", "msg", "args", "created", "filename", "funcName", "levelname",
        "levelno", "lineno", "module", "msecs", "message", "pathname", "process",
        "processName", "relativeCreated", "thread", "threadName", "exc_info",
        "exc_text", "stack_info", "taskName", "asctime",
    }

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "thread": record.threadName,
        }

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        # Fields passed via logger.info(..., extra={...})
        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self._STANDARD_ATTRS
        }
        if extra_fields:
            log_data["extra"] = extra_fields

        return json.dumps(log_data, default=str)


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure the bizdash logger hierarchy.

    Safe to call more than once; earlier handlers are replaced.

    Args:
        settings: Application settings (log_level, log_file)

    Returns:
        The configured root bizdash logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(console_handler)

    if settings.log_file:
        log_path = Path(settings.log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    logger.debug(
        "Logging initialized",
        extra={"log_file": settings.log_file, "user_id": settings.user_id},
    )
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the bizdash hierarchy.

    Args:
        name: Module name, with or without the leading ``bizdash.``
    """
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
