from __future__ import annotations

"""
Console Handler.

Writes formatted lines to standard output, optionally wrapped in an ANSI
color chosen by severity.
"""

import sys
from typing import Dict, Optional, TextIO

from pioneerlog.domain.levels import LevelLike, Severity
from pioneerlog.handlers.base import BaseHandler, Formatter

# -----------------------------------------------------------------------------
# ANSI PALETTE
# -----------------------------------------------------------------------------

RESET = "\033[0m"

LEVEL_COLORS: Dict[Severity, str] = {
    Severity.DEBUG: "\033[34m",
    Severity.INFO: "\033[32m",
    Severity.WARN: "\033[33m",
    Severity.ERROR: "\033[31m",
    Severity.CRITICAL: "\033[1m\033[31m",
}


def apply_colors(message: str, level: Severity) -> str:
    """
    Wrap a whole line in the color assigned to its level.

    Args:
        message: Formatted line.
        level: Severity that selects the color.

    Returns:
        str: Colored line, or the line unchanged for NOTSET.
    """
    color = LEVEL_COLORS.get(level)
    if not color:
        return message
    return f"{color}{message}{RESET}"


class ConsoleHandler(BaseHandler):
    """
    Handler bound to the process's standard output.

    Attributes:
        use_colors: Whether lines are wrapped in ANSI colors.
    """

    def __init__(
            self,
            level: LevelLike = Severity.NOTSET,
            *,
            use_colors: bool = True,
            formatter: Optional[Formatter] = None,
            stream: Optional[TextIO] = None,
    ) -> None:
        super().__init__(level, formatter)
        self.use_colors = use_colors
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved per call so redirected stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, message: str, level: Severity) -> None:
        if self.use_colors:
            message = apply_colors(message, level)
        stream = self.stream
        stream.write(message + "\n")
        stream.flush()
