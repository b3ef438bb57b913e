from __future__ import annotations

"""
Unit tests for the LoggerManager registry.

Verifies:
1. Idempotent logger creation with NOTSET defaults.
2. Declarative configuration from mappings and dataclasses.
3. MissingHandler detection without partial registration.
4. In-place reconfiguration and shutdown.
"""

import pytest

from pioneerlog.config import LoggerConfig, ManagerConfig
from pioneerlog.core.manager import LoggerManager, get_default_manager, set_default_manager
from pioneerlog.domain.errors import MissingHandler, UnknownLevelName
from pioneerlog.domain.levels import Severity
from pioneerlog.handlers.rotating_file import RotatingFileHandler


def test_get_logger_is_idempotent(manager: LoggerManager) -> None:
    first = manager.get_logger("app")
    second = manager.get_logger("app")

    assert first is second
    assert first.level is Severity.NOTSET
    assert first.handlers == ()


def test_handler_registry(manager: LoggerManager, recording_handler) -> None:
    manager.add_handler("mem", recording_handler)
    assert manager.get_handler("mem") is recording_handler
    assert manager.get_handler("absent") is None


def test_configure_from_mapping(manager: LoggerManager, handler_factory) -> None:
    console, file_ = handler_factory(), handler_factory()

    manager.configure({
        "handlers": {"console": console, "file": file_},
        "loggers": {"default": {"level": "INFO", "handlers": ["console", "file"]}},
    })

    logger = manager.get_logger("default")
    assert logger.level is Severity.INFO
    assert logger.handlers == (console, file_)
    assert manager.get_handler("file") is file_


def test_configure_from_dataclasses(manager: LoggerManager, handler_factory) -> None:
    handler = handler_factory()
    manager.configure(ManagerConfig(
        handlers={"mem": handler},
        loggers={"svc": LoggerConfig(level="debug", handlers=["mem"])},
    ))

    assert manager.get_logger("svc").handlers == (handler,)


def test_configure_resolves_previously_registered_handlers(manager: LoggerManager, handler_factory) -> None:
    earlier = handler_factory()
    manager.configure({"handlers": {"early": earlier}, "loggers": {}})

    manager.configure({"handlers": {}, "loggers": {"late": {"level": "WARN", "handlers": ["early"]}}})

    assert manager.get_logger("late").handlers == (earlier,)


def test_missing_handler_raises_and_changes_nothing(manager: LoggerManager, handler_factory) -> None:
    new_handler = handler_factory()

    with pytest.raises(MissingHandler) as excinfo:
        manager.configure({
            "handlers": {"ok": new_handler},
            "loggers": {"svc": {"level": "INFO", "handlers": ["ok", "ghost"]}},
        })

    assert excinfo.value.handler_name == "ghost"
    assert excinfo.value.logger_name == "svc"
    assert manager.get_handler("ok") is None
    assert "svc" not in manager.loggers


def test_missing_handler_closes_files_built_from_specs(manager: LoggerManager, log_path) -> None:
    with pytest.raises(MissingHandler):
        manager.configure({
            "handlers": {
                "file": {"type": "rotating_file", "filename": str(log_path),
                         "max_bytes": 100, "max_backup_count": 1},
            },
            "loggers": {"svc": {"handlers": ["file", "ghost"]}},
        })

    # Exclusive re-creation proves nothing kept the file open
    log_path.unlink()
    reopened = RotatingFileHandler(filename=log_path, max_bytes=10, max_backup_count=1, mode="x")
    reopened.destroy()


def test_reconfigure_updates_existing_logger_in_place(manager: LoggerManager, handler_factory) -> None:
    first, second = handler_factory(), handler_factory()
    manager.configure({"handlers": {"a": first}, "loggers": {"svc": {"level": "DEBUG", "handlers": ["a"]}}})
    held = manager.get_logger("svc")

    manager.configure({"handlers": {"b": second}, "loggers": {"svc": {"level": "ERROR", "handlers": ["b"]}}})

    assert manager.get_logger("svc") is held
    assert held.level is Severity.ERROR
    assert held.handlers == (second,)


def test_configure_rejects_bad_level_before_registering(manager: LoggerManager, handler_factory) -> None:
    with pytest.raises(UnknownLevelName):
        manager.configure({
            "handlers": {"mem": handler_factory()},
            "loggers": {"svc": {"level": "LOUDEST", "handlers": ["mem"]}},
        })
    assert manager.get_handler("mem") is None


def test_configure_rejects_bad_level_in_manager_config(manager: LoggerManager, handler_factory) -> None:
    handler = handler_factory()

    with pytest.raises(UnknownLevelName):
        manager.configure(ManagerConfig(
            handlers={"mem": handler},
            loggers={
                "ok": LoggerConfig(level="INFO", handlers=["mem"]),
                "bad": LoggerConfig(level="LOUDEST", handlers=["mem"]),
            },
        ))

    assert manager.get_handler("mem") is None
    assert manager.loggers == {}
    assert handler.destroy_calls == 0


def test_shutdown_destroys_every_handler(handler_factory) -> None:
    mgr = LoggerManager()
    a, b = handler_factory(), handler_factory()
    mgr.configure({"handlers": {"a": a, "b": b}, "loggers": {}})

    mgr.shutdown()
    mgr.shutdown()

    assert a.destroy_calls == 2
    assert b.destroy_calls == 2


def test_default_manager_is_created_once_and_replaceable() -> None:
    replacement = LoggerManager()
    previous = set_default_manager(replacement)
    try:
        assert get_default_manager() is replacement
        assert get_default_manager() is get_default_manager()
    finally:
        set_default_manager(previous)


def test_replaced_default_manager_drops_exit_hook(monkeypatch) -> None:
    registered = []
    unregistered = []
    monkeypatch.setattr("atexit.register", registered.append)
    monkeypatch.setattr("atexit.unregister", unregistered.append)

    first, second = LoggerManager(), LoggerManager()
    previous = set_default_manager(first)
    try:
        set_default_manager(second)

        assert registered == [first.shutdown, second.shutdown]
        assert first.shutdown in unregistered
    finally:
        set_default_manager(previous)
