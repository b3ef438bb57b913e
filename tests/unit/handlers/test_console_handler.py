from __future__ import annotations

"""
Unit tests for the Console Handler.

Verifies:
1. Lines reach standard output (or an injected stream).
2. Level-dependent ANSI coloring wraps the whole formatted line.
3. Colors can be disabled.
"""

import io

import pytest

from pioneerlog.domain.levels import Severity
from pioneerlog.handlers.console import LEVEL_COLORS, RESET, ConsoleHandler, apply_colors


@pytest.mark.parametrize(
    "level, color",
    [
        (Severity.DEBUG, "\033[34m"),
        (Severity.INFO, "\033[32m"),
        (Severity.WARN, "\033[33m"),
        (Severity.ERROR, "\033[31m"),
        (Severity.CRITICAL, "\033[1m\033[31m"),
    ],
)
def test_apply_colors_by_level(level: Severity, color: str) -> None:
    assert LEVEL_COLORS[level] == color
    assert apply_colors("line", level) == f"{color}line{RESET}"


def test_notset_is_not_colored() -> None:
    assert apply_colors("line", Severity.NOTSET) == "line"


def test_emit_writes_to_stdout(capsys, record_factory) -> None:
    handler = ConsoleHandler("DEBUG", use_colors=False, formatter=lambda r: r.msg)

    handler.handle(record_factory("to stdout", Severity.INFO))

    captured = capsys.readouterr()
    assert captured.out == "to stdout\n"
    assert captured.err == ""


def test_colors_wrap_formatted_line(capsys, record_factory) -> None:
    handler = ConsoleHandler("DEBUG", formatter=lambda r: f"[{r.level_name}] {r.msg}")

    handler.handle(record_factory("bad", Severity.ERROR))

    assert capsys.readouterr().out == f"\033[31m[ERROR] bad{RESET}\n"


def test_colors_enabled_by_default() -> None:
    assert ConsoleHandler().use_colors is True


def test_injected_stream_and_threshold(record_factory) -> None:
    stream = io.StringIO()
    handler = ConsoleHandler("WARN", use_colors=False, formatter=lambda r: r.msg, stream=stream)

    handler.handle(record_factory("skip", Severity.INFO))
    handler.handle(record_factory("keep", Severity.WARN))

    assert stream.getvalue() == "keep\n"


def test_destroy_is_idempotent() -> None:
    handler = ConsoleHandler()
    handler.destroy()
    handler.destroy()
