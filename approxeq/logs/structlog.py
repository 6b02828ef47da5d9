from __future__ import annotations

import logging.config
import os
from typing import Any

import structlog
from beartype import beartype

FALLBACK_LEVEL: str = "INFO"


class ModuleFilter(logging.Filter):
    """Apply a minimum level per logger-name prefix; "*" matches any logger."""

    def __init__(self, modules_to_log: dict[str, str]) -> None:
        super().__init__()
        self.modules_to_log: dict[str, str] = modules_to_log

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.modules_to_log:
            return True

        for module, level in self.modules_to_log.items():
            if module == "*" or record.name.startswith(module):
                min_log_level = logging.getLevelName(level)
                if not isinstance(min_log_level, int):
                    min_log_level = logging.getLevelName(FALLBACK_LEVEL)
                return record.levelno >= min_log_level

        return False


timestamper = structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S")

# Records from plain stdlib loggers get the same level, `extra=` fields and timestamp
foreign_pre_chain = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.ExtraAdder(),
    timestamper,
]


def _formatter(colors: bool) -> dict[str, Any]:
    return {
        "()": structlog.stdlib.ProcessorFormatter,
        "processors": [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=colors),
        ],
        "foreign_pre_chain": foreign_pre_chain,
    }


def _handlers(service_name: str, log_level: str, log_dir: str | None) -> dict[str, dict[str, Any]]:
    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "level": log_level,
            "class": "logging.StreamHandler",
            "formatter": "colored",
            "filters": ["module_filter"],
        },
    }
    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        handlers["file"] = {
            "level": log_level,
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": os.path.join(log_dir, f"{service_name}.log"),
            "when": "midnight",
            "backupCount": 30,
            "formatter": "plain",
            "filters": ["module_filter"],
        }
    return handlers


@beartype
def configure(
    service_name: str = "approxeq",
    log_level: str = "DEBUG",
    log_dir: str | None = None,
) -> None:
    """
    Install structlog-based logging for an application using approxeq.

    The library itself never calls this; it only logs through ``logger``.
    Calling it replaces the root logger's handlers for the whole process.

    Args:
        service_name: Logger-name prefix held to ``log_level``; other loggers
            are held to INFO. Also names the log file.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_dir: When given, also write ``<service_name>.log`` there, rotated at midnight.
    """
    log_level = log_level.upper()
    handlers = _handlers(service_name, log_level, log_dir)
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "module_filter": {
                    "()": ModuleFilter,
                    "modules_to_log": {service_name: log_level, "*": FALLBACK_LEVEL},
                },
            },
            "formatters": {
                "plain": _formatter(colors=False),
                "colored": _formatter(colors=True),
            },
            "handlers": handlers,
            "root": {"handlers": list(handlers), "level": log_level},
        }
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            timestamper,
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            ),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.get_logger().debug("Logger initialized", service=service_name, log_dir=log_dir)


# Shared logger; callers bind their own context onto it at call time
logger: structlog.stdlib.BoundLogger = structlog.get_logger()
