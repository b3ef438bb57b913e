from __future__ import annotations

"""
Declarative Logging Configuration.

Defines the configuration models consumed by LoggerManager.configure() and
tolerant builders that turn plain dictionaries or JSON files into them.
Handlers may be given as ready instances or as specs:

    {
        "handlers": {
            "console": {"type": "console", "level": "DEBUG", "use_colors": true},
            "file": {"type": "rotating_file", "level": "INFO",
                     "filename": "app.log", "max_bytes": 10240,
                     "max_backup_count": 3, "mode": "a"}
        },
        "loggers": {
            "default": {"level": "INFO", "handlers": ["console", "file"]}
        }
    }
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple, Union

from pioneerlog.domain.errors import ConfigurationError
from pioneerlog.domain.levels import Severity, resolve_level
from pioneerlog.handlers.base import BaseHandler
from pioneerlog.handlers.console import ConsoleHandler
from pioneerlog.handlers.rotating_file import RotatingFileHandler

logger = logging.getLogger(__name__)

DEFAULT_LOGGER_NAME = "default"

# Keyword options accepted per handler type
_HANDLER_OPTIONS: Dict[str, Tuple[str, ...]] = {
    "console": ("use_colors",),
    "rotating_file": ("filename", "max_bytes", "max_backup_count", "mode", "encoding"),
}


# =============================================================================
# Configuration models
# =============================================================================

@dataclass(frozen=True)
class LoggerConfig:
    """
    Declarative settings for one logger.

    Attributes:
        level: Threshold name or rank.
        handlers: Ordered handler names, resolved against the manager.
    """
    level: Union[str, int] = "NOTSET"
    handlers: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "handlers", tuple(self.handlers))


@dataclass(frozen=True)
class ManagerConfig:
    """
    Complete configuration applied by LoggerManager.configure().

    Attributes:
        handlers: Handler instances keyed by the name loggers refer to.
        loggers: Logger settings keyed by logger name.
    """
    handlers: Dict[str, BaseHandler] = field(default_factory=dict)
    loggers: Dict[str, LoggerConfig] = field(default_factory=dict)


# =============================================================================
# Builders
# =============================================================================

def build_handler(spec: Mapping[str, Any]) -> BaseHandler:
    """
    Instantiate a handler from a declarative spec.

    Args:
        spec: Mapping with a "type" of "console" or "rotating_file", an
            optional "level", and the type's keyword options.

    Returns:
        BaseHandler: The constructed handler. File handlers open their file.

    Raises:
        ConfigurationError: On unknown types or unsupported options.
    """
    if not isinstance(spec, Mapping):
        raise ConfigurationError(f"Handler spec must be a mapping, got {type(spec).__name__}")

    kind = str(spec.get("type", "")).strip().lower().replace("-", "_")
    if kind not in _HANDLER_OPTIONS:
        raise ConfigurationError(f"Unknown handler type: {spec.get('type')!r}")

    options = {k: v for k, v in spec.items() if k not in ("type", "level")}
    unknown = sorted(set(options) - set(_HANDLER_OPTIONS[kind]))
    if unknown:
        raise ConfigurationError(f"Unsupported options for {kind} handler: {', '.join(unknown)}")

    level = spec.get("level", Severity.NOTSET)
    if kind == "console":
        return ConsoleHandler(level, **options)
    return RotatingFileHandler(level, **options)


def _build_logger_config(name: str, raw: Any) -> LoggerConfig:
    if isinstance(raw, LoggerConfig):
        return raw
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"Logger {name!r} settings must be a mapping")

    handlers = raw.get("handlers") or ()
    if isinstance(handlers, str):
        raise ConfigurationError(f"Logger {name!r} handlers must be a list of names")

    level = raw.get("level", "NOTSET")
    # Fail early on bad levels rather than during configure()
    resolve_level(level)
    return LoggerConfig(level=level, handlers=tuple(str(h) for h in handlers))


def build_config_from_dict(d: Union[ManagerConfig, Mapping[str, Any]]) -> ManagerConfig:
    """
    Build a ManagerConfig from a dict (e.g. a parsed JSON document).

    Accepted keys:
      - handlers: name -> handler instance or handler spec
      - loggers: name -> {"level": ..., "handlers": [...]} or LoggerConfig

    Args:
        d: Raw configuration, or an existing ManagerConfig (returned as is).

    Returns:
        ManagerConfig: Normalized configuration.
    """
    if isinstance(d, ManagerConfig):
        return d
    if not isinstance(d, Mapping):
        raise ConfigurationError(f"Configuration must be a mapping, got {type(d).__name__}")

    raw_handlers = d.get("handlers") or {}
    raw_loggers = d.get("loggers") or {}
    if not isinstance(raw_handlers, Mapping) or not isinstance(raw_loggers, Mapping):
        raise ConfigurationError('"handlers" and "loggers" must be mappings')

    # Validate loggers first so a bad logger entry never leaves files opened
    loggers = {str(name): _build_logger_config(str(name), raw) for name, raw in raw_loggers.items()}

    handlers: Dict[str, BaseHandler] = {}
    built = []
    try:
        for name, raw in raw_handlers.items():
            if isinstance(raw, BaseHandler):
                handlers[str(name)] = raw
            else:
                handlers[str(name)] = build_handler(raw)
                built.append(handlers[str(name)])
    except Exception:
        # Release files opened by earlier specs before propagating
        for handler in built:
            handler.destroy()
        raise

    return ManagerConfig(handlers=handlers, loggers=loggers)


def load_config_file(path: Union[str, "os.PathLike[str]"]) -> ManagerConfig:
    """
    Read a JSON configuration document and build it.

    Args:
        path: Location of the JSON file.

    Returns:
        ManagerConfig: Normalized configuration.

    Raises:
        ConfigurationError: If the document is not valid JSON.
        OSError: If the file cannot be read.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid logging configuration file {os.fspath(path)}: {e}") from e

    logger.debug(f"Loaded logging configuration from {os.fspath(path)}")
    return build_config_from_dict(data)
