from __future__ import annotations

"""
Log Message Variants and Display Rendering.

A message reaches a logger either as a literal value or as a zero-argument
producer whose evaluation is deferred until the level gate has passed.
as_message() performs the one-time classification at the API boundary and
render_value() turns the resolved value into the display string stored on
the record. The rendering is a best-effort debugging form, not a
serialization format.
"""

import dataclasses
import numbers
import traceback
from dataclasses import dataclass
from typing import Any, Callable, Collection, Mapping, Optional, Set, Union


# -----------------------------------------------------------------------------
# MESSAGE VARIANTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LiteralMessage:
    """
    A message value supplied directly by the caller.

    Attributes:
        value: Any loggable value.
    """
    value: Any

    def resolve(self) -> Any:
        return self.value


@dataclass(frozen=True)
class DeferredMessage:
    """
    A message produced on demand.

    Attributes:
        producer: Zero-argument callable invoked at most once per log call,
            and only when the call passes the logger's threshold.
    """
    producer: Callable[[], Any]

    def resolve(self) -> Any:
        return self.producer()


Message = Union[LiteralMessage, DeferredMessage]


def lazy(producer: Callable[[], Any]) -> DeferredMessage:
    """Wrap a producer explicitly as a deferred message."""
    return DeferredMessage(producer)


def as_message(msg: Any) -> Message:
    """
    Classify a raw logging argument into a message variant.

    Callables other than classes become deferred producers; every other
    value is literal. Already-wrapped variants pass through.

    Args:
        msg: First argument given to a logging call.

    Returns:
        Message: The matching variant.
    """
    if isinstance(msg, (LiteralMessage, DeferredMessage)):
        return msg
    if callable(msg) and not isinstance(msg, type):
        return DeferredMessage(msg)
    return LiteralMessage(msg)


# -----------------------------------------------------------------------------
# DISPLAY RENDERING
# -----------------------------------------------------------------------------

def render_value(data: Any, is_property: bool = False) -> str:
    """
    Convert a resolved message into its display string.

    Args:
        data: Value to render.
        is_property: True when rendering a value nested inside a structure,
            in which case strings are double quoted.

    Returns:
        str: Human-readable rendering.
    """
    return _render(data, is_property, None)


def _render(data: Any, is_property: bool, seen: Optional[Set[int]]) -> str:
    if isinstance(data, str):
        return f'"{data}"' if is_property else data

    if data is None or isinstance(data, (bool, numbers.Number)):
        return str(data)

    if isinstance(data, BaseException):
        lines = traceback.format_exception(type(data), data, data.__traceback__)
        return "".join(lines).rstrip("\n")

    seen = set() if seen is None else seen
    if id(data) in seen:
        return '"[Circular]"'

    if isinstance(data, Mapping):
        return _render_mapping(data, seen)

    if isinstance(data, (list, tuple, set, frozenset)):
        return _render_sequence(data, seen)

    if dataclasses.is_dataclass(data):
        fields = {f.name: getattr(data, f.name) for f in dataclasses.fields(data)}
        return _render_mapping(fields, seen, owner=data)

    attrs = getattr(data, "__dict__", None)
    if isinstance(attrs, dict) and not callable(data):
        return _render_mapping(attrs, seen, owner=data)

    return str(data)


def _render_mapping(data: Mapping[Any, Any], seen: Set[int], owner: Any = None) -> str:
    marker = id(owner if owner is not None else data)
    seen.add(marker)
    try:
        body = ",".join(f'"{key}":{_render(value, True, seen)}' for key, value in data.items())
    finally:
        seen.discard(marker)
    return "{" + body + "}"


def _render_sequence(data: Collection[Any], seen: Set[int]) -> str:
    seen.add(id(data))
    try:
        body = ",".join(_render(item, True, seen) for item in data)
    finally:
        seen.discard(id(data))
    return "[" + body + "]"
