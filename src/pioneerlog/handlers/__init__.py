from __future__ import annotations

from .base import BaseHandler, Formatter, default_formatter
from .console import ConsoleHandler, apply_colors
from .rotating_file import OpenMode, RotatingFileHandler

__all__ = [
    "BaseHandler",
    "Formatter",
    "default_formatter",
    "ConsoleHandler",
    "apply_colors",
    "RotatingFileHandler",
    "OpenMode",
]
