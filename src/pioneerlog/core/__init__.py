from __future__ import annotations

from .logger import Logger
from .manager import LoggerManager, get_default_manager, set_default_manager

__all__ = [
    "Logger",
    "LoggerManager",
    "get_default_manager",
    "set_default_manager",
]
