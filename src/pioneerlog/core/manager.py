from __future__ import annotations

"""
Logger and Handler Registry.

A LoggerManager maps logger names to Logger instances and handler names to
handler instances, and wires them together from declarative configuration.

Process-wide state is explicit: get_default_manager() is the single place
where the shared manager is created, and every facade function accepts an
alternative manager for isolated use (tests, embedded components).
"""

import atexit
import logging
import threading
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from pioneerlog.config import ManagerConfig, build_config_from_dict
from pioneerlog.core.logger import Logger
from pioneerlog.domain.errors import MissingHandler, PioneerLogError
from pioneerlog.domain.levels import Severity, resolve_level
from pioneerlog.handlers.base import BaseHandler

logger = logging.getLogger(__name__)

ConfigLike = Union[ManagerConfig, Mapping[str, Any]]


class LoggerManager:
    """
    Registry owning the handler lifetimes and the named loggers.
    """

    def __init__(self) -> None:
        self._loggers: Dict[str, Logger] = {}
        self._handlers: Dict[str, BaseHandler] = {}

    # -------------------------------------------------------------------------
    # LOGGERS
    # -------------------------------------------------------------------------

    def get_logger(self, name: str) -> Logger:
        """
        Return the logger registered under `name`, creating it if absent.

        New loggers start at NOTSET with no handlers.

        Args:
            name: Logger identifier.

        Returns:
            Logger: The registered instance.
        """
        existing = self._loggers.get(name)
        if existing is not None:
            return existing
        created = Logger(name, Severity.NOTSET, [])
        self._loggers[name] = created
        return created

    @property
    def loggers(self) -> Dict[str, Logger]:
        return dict(self._loggers)

    # -------------------------------------------------------------------------
    # HANDLERS
    # -------------------------------------------------------------------------

    def add_handler(self, name: str, handler: BaseHandler) -> None:
        self._handlers[name] = handler

    def get_handler(self, name: str) -> Optional[BaseHandler]:
        return self._handlers.get(name)

    @property
    def handlers(self) -> Dict[str, BaseHandler]:
        return dict(self._handlers)

    # -------------------------------------------------------------------------
    # CONFIGURATION
    # -------------------------------------------------------------------------

    def configure(self, config: ConfigLike) -> None:
        """
        Register handlers and (re)configure loggers.

        Every logger level and handler reference is checked before anything
        is registered, so a failing call leaves the manager untouched.
        Existing loggers are updated in place; references already held by
        callers observe the new level and handlers.

        Args:
            config: ManagerConfig or a mapping of the same shape.

        Raises:
            MissingHandler: If a logger names a handler that is neither in
                `config.handlers` nor already registered.
            UnknownLevelName, UnknownLevelRank: If a logger level is invalid.
        """
        cfg = build_config_from_dict(config)

        plan: Dict[str, Tuple[Severity, List[BaseHandler]]] = {}
        try:
            for logger_name, logger_cfg in cfg.loggers.items():
                plan[logger_name] = (
                    resolve_level(logger_cfg.level),
                    [
                        self._resolve_handler(handler_name, logger_name, cfg.handlers)
                        for handler_name in logger_cfg.handlers
                    ],
                )
        except PioneerLogError:
            # Handlers built from specs in this call are not reachable by anyone else
            for handler in _built_from_specs(config, cfg):
                handler.destroy()
            raise

        for handler_name, handler in cfg.handlers.items():
            self.add_handler(handler_name, handler)

        for logger_name, (level, handlers) in plan.items():
            self._apply_logger_config(logger_name, level, handlers)

        logger.debug(
            f"Configured {len(cfg.loggers)} logger(s) and {len(cfg.handlers)} handler(s)"
        )

    def _resolve_handler(
            self,
            handler_name: str,
            logger_name: str,
            pending: Mapping[str, BaseHandler],
    ) -> BaseHandler:
        handler = pending.get(handler_name) or self._handlers.get(handler_name)
        if handler is None:
            raise MissingHandler(handler_name, logger_name)
        return handler

    def _apply_logger_config(self, name: str, level: Severity, handlers: List[BaseHandler]) -> None:
        existing = self._loggers.get(name)
        if existing is None:
            self._loggers[name] = Logger(name, level, handlers)
            return
        existing.level = level
        existing.set_handlers(handlers)

    # -------------------------------------------------------------------------
    # SHUTDOWN
    # -------------------------------------------------------------------------

    def shutdown(self) -> None:
        """Destroy every registered handler. Safe to call repeatedly."""
        for handler in list(self._handlers.values()):
            handler.destroy()


def _built_from_specs(raw: ConfigLike, cfg: ManagerConfig) -> List[BaseHandler]:
    if isinstance(raw, ManagerConfig):
        return []
    given = raw.get("handlers") or {}
    return [h for name, h in cfg.handlers.items() if not isinstance(given.get(name), BaseHandler)]


# =============================================================================
# Default manager
# =============================================================================

_default_manager: Optional[LoggerManager] = None
_default_lock = threading.Lock()


def get_default_manager() -> LoggerManager:
    """
    Return the process-wide manager, creating it on first use.

    This is the only place the shared manager is constructed. Its handlers
    are destroyed at interpreter exit.
    """
    global _default_manager
    with _default_lock:
        if _default_manager is None:
            _default_manager = LoggerManager()
            atexit.register(_default_manager.shutdown)
        return _default_manager


def set_default_manager(manager: Optional[LoggerManager]) -> Optional[LoggerManager]:
    """
    Replace the process-wide manager.

    Args:
        manager: New manager, or None to have the next access create one.
            The previous manager no longer shuts down at interpreter exit.

    Returns:
        Optional[LoggerManager]: The previously installed manager.
    """
    global _default_manager
    with _default_lock:
        previous, _default_manager = _default_manager, manager
        if previous is not None:
            atexit.unregister(previous.shutdown)
        if manager is not None:
            atexit.register(manager.shutdown)
        return previous
