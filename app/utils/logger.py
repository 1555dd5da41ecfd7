"""
Logging utilities for the user gateway

Configures stdlib logging and structlog once per process.
"""

import logging
import logging.config
from typing import Any, Dict

import structlog


def _logging_config(log_level: str) -> Dict[str, Any]:
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'plain': {
                'format': '%(message)s'
            }
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'level': log_level,
                'formatter': 'plain',
                'stream': 'ext://sys.stdout'
            }
        },
        'root': {
            'level': log_level,
            'handlers': ['console']
        },
        'loggers': {
            'uvicorn.access': {
                'level': 'WARNING'
            }
        }
    }


def configure_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """
    Setup logging configuration

    Args:
        log_level: Root log level name
        log_format: 'json' for machine-readable lines, 'console' for local development
    """
    log_level = log_level.upper()
    logging.config.dictConfig(_logging_config(log_level))

    if log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
