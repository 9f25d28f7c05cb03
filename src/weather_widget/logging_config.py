"""Centralized logging configuration."""

import logging
import logging.config
from typing import Any, Dict, Optional

from weather_widget.config import DEBUG

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Server and HTTP client loggers routed through the console handler
# without propagating to the root logger
SERVICE_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "fastapi",
)


def build_logging_config(level: str) -> Dict[str, Any]:
    """Build the dictConfig schema for the service.

    Args:
        level: Level name applied to the root and service loggers

    Returns:
        Configuration dictionary for logging.config.dictConfig
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT, "datefmt": LOG_DATE_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
            },
        },
        "root": {"handlers": ["console"], "level": level},
        "loggers": {
            name: {"handlers": ["console"], "level": level, "propagate": False}
            for name in SERVICE_LOGGERS
        },
    }


def configure_logging(level: Optional[int] = None) -> None:
    """Apply one log format to the application and its server loggers.

    Args:
        level: Log level; DEBUG when the DEBUG setting is on, INFO otherwise
    """
    if level is None:
        level = logging.DEBUG if DEBUG else logging.INFO
    logging.config.dictConfig(build_logging_config(logging.getLevelName(level)))
