from __future__ import annotations

"""
Logging Domain Exceptions.

Every failure raised by the logging subsystem derives from PioneerLogError.
Each concrete error also inherits the closest built-in category so callers
can catch either the library-specific type or the generic one.
"""

from typing import Any


class PioneerLogError(Exception):
    """Base class for all logging subsystem errors."""


# -----------------------------------------------------------------------------
# SEVERITY ERRORS
# -----------------------------------------------------------------------------

class UnknownLevelName(PioneerLogError, ValueError):
    """
    Raised when a severity name does not match any canonical level.

    Attributes:
        name: The rejected level name.
    """

    def __init__(self, name: Any) -> None:
        self.name = name
        super().__init__(f"Cannot get log level: no level named {name!r}")


class UnknownLevelRank(PioneerLogError, ValueError):
    """
    Raised when a numeric rank is not one of the canonical severity values.

    Attributes:
        rank: The rejected numeric rank.
    """

    def __init__(self, rank: Any) -> None:
        self.rank = rank
        super().__init__(f"Cannot get log level: no name for level: {rank!r}")


# -----------------------------------------------------------------------------
# HANDLER AND CONFIGURATION ERRORS
# -----------------------------------------------------------------------------

class InvalidConfiguration(PioneerLogError, ValueError):
    """
    Raised when a handler receives out-of-range construction parameters.

    Attributes:
        option: Name of the offending option.
        value: The value that was received.
    """

    def __init__(self, option: str, value: Any) -> None:
        self.option = option
        self.value = value
        super().__init__(f'"{option}" must be >= 1: received {value!r}')


class BackupCollision(PioneerLogError, FileExistsError):
    """
    Raised in exclusive-create mode when a backup file is already on disk.

    Attributes:
        backup_path: Path of the first pre-existing backup found.
    """

    def __init__(self, backup_path: str) -> None:
        self.backup_path = backup_path
        super().__init__(f"Backup log file {backup_path} already exists")


class MissingHandler(PioneerLogError, LookupError):
    """
    Raised when a logger configuration references an unregistered handler.

    Attributes:
        handler_name: The unresolved handler reference.
        logger_name: The logger whose configuration holds the reference.
    """

    def __init__(self, handler_name: str, logger_name: str) -> None:
        self.handler_name = handler_name
        self.logger_name = logger_name
        super().__init__(f'Handler "{handler_name}" not found for logger "{logger_name}"')


class ConfigurationError(PioneerLogError, ValueError):
    """Raised when a declarative configuration has an invalid shape."""
