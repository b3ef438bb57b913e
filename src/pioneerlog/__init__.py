from __future__ import annotations

"""
pioneerlog: named loggers with level gating and pluggable handlers.

Typical start-up:

    from pioneerlog import ConsoleHandler, RotatingFileHandler, get_logger, setup

    setup({
        "handlers": {
            "console": ConsoleHandler("DEBUG", use_colors=True),
            "file": RotatingFileHandler("INFO", filename="app.log",
                                        max_bytes=10 * 1024, max_backup_count=3),
        },
        "loggers": {"default": {"level": "INFO", "handlers": ["console", "file"]}},
    })
    get_logger("default").info("ready")

The free functions debug/info/warn/error/critical log through the "default"
logger of the process-wide manager.
"""

from typing import Any, Optional

from pioneerlog.config import (
    DEFAULT_LOGGER_NAME,
    LoggerConfig,
    ManagerConfig,
    build_config_from_dict,
    build_handler,
    load_config_file,
)
from pioneerlog.core import Logger, LoggerManager, get_default_manager, set_default_manager
from pioneerlog.core.manager import ConfigLike
from pioneerlog.domain import (
    BackupCollision,
    ConfigurationError,
    DeferredMessage,
    InvalidConfiguration,
    LiteralMessage,
    LogRecord,
    MissingHandler,
    PioneerLogError,
    Severity,
    UnknownLevelName,
    UnknownLevelRank,
    lazy,
    name_of,
    rank_of,
    resolve_level,
)
from pioneerlog.handlers import BaseHandler, ConsoleHandler, OpenMode, RotatingFileHandler

__version__ = "0.1.0"


# -----------------------------------------------------------------------------
# FACADE
# -----------------------------------------------------------------------------

def get_logger(name: str, manager: Optional[LoggerManager] = None) -> Logger:
    """
    Get or create a named logger.

    Args:
        name: Logger identifier.
        manager: Registry to use; defaults to the process-wide manager.

    Returns:
        Logger: The registered logger.
    """
    return (manager or get_default_manager()).get_logger(name)


def setup(config: ConfigLike, manager: Optional[LoggerManager] = None) -> LoggerManager:
    """
    Apply a declarative configuration.

    Args:
        config: ManagerConfig or mapping with "handlers" and "loggers".
        manager: Registry to configure; defaults to the process-wide manager.

    Returns:
        LoggerManager: The configured manager.
    """
    target = manager or get_default_manager()
    target.configure(config)
    return target


def debug(msg: Any, *args: Any) -> Any:
    return get_logger(DEFAULT_LOGGER_NAME).debug(msg, *args)


def info(msg: Any, *args: Any) -> Any:
    return get_logger(DEFAULT_LOGGER_NAME).info(msg, *args)


def warn(msg: Any, *args: Any) -> Any:
    return get_logger(DEFAULT_LOGGER_NAME).warn(msg, *args)


warning = warn


def error(msg: Any, *args: Any) -> Any:
    return get_logger(DEFAULT_LOGGER_NAME).error(msg, *args)


def critical(msg: Any, *args: Any) -> Any:
    return get_logger(DEFAULT_LOGGER_NAME).critical(msg, *args)


__all__ = [
    "__version__",
    "Severity",
    "rank_of",
    "name_of",
    "resolve_level",
    "LogRecord",
    "LiteralMessage",
    "DeferredMessage",
    "lazy",
    "BaseHandler",
    "ConsoleHandler",
    "RotatingFileHandler",
    "OpenMode",
    "Logger",
    "LoggerManager",
    "get_default_manager",
    "set_default_manager",
    "LoggerConfig",
    "ManagerConfig",
    "build_handler",
    "build_config_from_dict",
    "load_config_file",
    "get_logger",
    "setup",
    "debug",
    "info",
    "warn",
    "warning",
    "error",
    "critical",
    "PioneerLogError",
    "UnknownLevelName",
    "UnknownLevelRank",
    "InvalidConfiguration",
    "BackupCollision",
    "MissingHandler",
    "ConfigurationError",
]
