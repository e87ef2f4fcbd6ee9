# expense_tracker/utilities/config_logging.py
from __future__ import annotations

import logging.config
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .config_tracker import DEFAULT_LOG_DIR, LOG_DIR_ENV, LOG_FILE_NAME


def build_logging_config(log_dir: Path | str = DEFAULT_LOG_DIR) -> Dict[str, Any]:
    """Return a dictConfig mapping that logs to the console and to ``log_dir``."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
            "verbose": {
                "format": "%(asctime)s %(levelname)s %(name)s "
                "[%(process)d:%(threadName)s] %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "INFO",
                "formatter": "simple",
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "DEBUG",
                "formatter": "verbose",
                "filename": str(Path(log_dir) / LOG_FILE_NAME),
                "maxBytes": 5_000_000,
                "backupCount": 5,
                "encoding": "utf-8",
            },
        },
        "loggers": {
            # root logger
            "": {
                "level": "DEBUG",
                "handlers": ["console", "file"],
            },
        },
    }


LOGGING = build_logging_config()


def configure_logging(log_dir: Optional[Path | str] = None) -> Path:
    """
    Apply the logging configuration and return the directory the log file lives in.

    The directory is taken from ``log_dir``, then the ``EXPENSE_TRACKER_LOG_DIR``
    environment variable, then ``./logs``. It is created if missing, since the
    rotating file handler will not create it.
    """
    target = Path(log_dir or os.environ.get(LOG_DIR_ENV) or DEFAULT_LOG_DIR)
    target.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(target))
    return target
