from __future__ import annotations

"""
Named Logger.

A Logger gates calls by its own threshold, renders the message once, and
fans the resulting record out to its handlers in attachment order. Each
level method returns the caller's message so it can be used inline:

    value = logger.info(compute())
"""

from typing import Any, Iterable, List, Optional, Tuple

from pioneerlog.domain.levels import LevelLike, Severity, resolve_level
from pioneerlog.domain.messages import DeferredMessage, as_message, render_value
from pioneerlog.domain.record import LogRecord
from pioneerlog.handlers.base import BaseHandler


class Logger:
    """
    Severity-gated dispatcher over a shared list of handlers.

    Handlers are referenced, not owned: their lifetime belongs to the
    manager that registered them.
    """

    def __init__(
            self,
            name: str,
            level: LevelLike = Severity.NOTSET,
            handlers: Optional[Iterable[BaseHandler]] = None,
    ) -> None:
        self.name = name
        self._level = resolve_level(level)
        self._handlers: List[BaseHandler] = list(handlers or [])

    # -------------------------------------------------------------------------
    # CONFIGURATION
    # -------------------------------------------------------------------------

    @property
    def level(self) -> Severity:
        return self._level

    @level.setter
    def level(self, value: LevelLike) -> None:
        self._level = resolve_level(value)

    @property
    def level_name(self) -> str:
        return self._level.name

    def set_level(self, value: LevelLike) -> None:
        """
        Change the threshold.

        Args:
            value: Level name (any case) or canonical numeric rank.
        """
        self.level = value

    @property
    def handlers(self) -> Tuple[BaseHandler, ...]:
        return tuple(self._handlers)

    def add_handler(self, handler: BaseHandler) -> None:
        self._handlers.append(handler)

    def remove_handler(self, handler: BaseHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def set_handlers(self, handlers: Iterable[BaseHandler]) -> None:
        self._handlers = list(handlers)

    def is_enabled_for(self, level: LevelLike) -> bool:
        return resolve_level(level) >= self._level

    # -------------------------------------------------------------------------
    # LOGGING
    # -------------------------------------------------------------------------

    def log(self, level: LevelLike, msg: Any, *args: Any) -> Any:
        """
        Log a message at an arbitrary level.

        A callable message is treated as a deferred producer: it is invoked
        only when the level passes the threshold.

        Args:
            level: Severity of the call.
            msg: Message value or zero-argument producer.
            *args: Extra values carried on the record unchanged.

        Returns:
            Any: The message as given when filtered out; otherwise the
            literal value or the producer's result.
        """
        severity = resolve_level(level)
        if self._level > severity:
            return msg

        message = as_message(msg)
        value = message.resolve()

        record = LogRecord(
            msg=render_value(value),
            level=severity,
            logger_name=self.name,
            args=args,
        )
        for handler in self._handlers:
            handler.handle(record)

        return value if isinstance(message, DeferredMessage) else msg

    def debug(self, msg: Any, *args: Any) -> Any:
        return self.log(Severity.DEBUG, msg, *args)

    def info(self, msg: Any, *args: Any) -> Any:
        return self.log(Severity.INFO, msg, *args)

    def warn(self, msg: Any, *args: Any) -> Any:
        return self.log(Severity.WARN, msg, *args)

    warning = warn

    def error(self, msg: Any, *args: Any) -> Any:
        return self.log(Severity.ERROR, msg, *args)

    def critical(self, msg: Any, *args: Any) -> Any:
        return self.log(Severity.CRITICAL, msg, *args)

    def __repr__(self) -> str:
        return f"<Logger {self.name!r} level={self.level_name} handlers={len(self._handlers)}>"
