from __future__ import annotations

"""
Size-Based Rotating File Handler.

Appends formatted lines to a primary file and, when the next write would
push the file past max_bytes, shifts the primary into a numbered backup
chain before continuing in a fresh file.

On-disk layout for path "app.log" and max_backup_count=3:
    app.log     current file
    app.log.1   most recent backup
    app.log.3   oldest backup; anything older is discarded on rotation

The byte counter is recovered from the filesystem once, at setup, and
maintained in memory from then on.
"""

import atexit
import logging
import os
from enum import Enum
from typing import BinaryIO, Optional, Union

from pioneerlog.domain.errors import BackupCollision, ConfigurationError, InvalidConfiguration
from pioneerlog.domain.levels import LevelLike, Severity
from pioneerlog.handlers.base import BaseHandler, Formatter

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class OpenMode(str, Enum):
    """
    How the primary file is opened at setup.
    """
    APPEND = "a"
    TRUNCATE = "w"
    EXCLUSIVE = "x"

    @classmethod
    def parse(cls, value: Union["OpenMode", str]) -> "OpenMode":
        """
        Accept either the short form ("a", "w", "x") or the member name.

        Args:
            value: Mode given by the caller.

        Returns:
            OpenMode: Matching member.
        """
        if isinstance(value, OpenMode):
            return value
        text = str(value).strip()
        try:
            return cls(text.lower())
        except ValueError:
            pass
        try:
            return cls[text.upper()]
        except KeyError:
            raise ConfigurationError(f"Unknown log file mode: {value!r}") from None


# Binary, unbuffered: each write reaches the OS before emit() returns
_OPEN_FLAGS = {
    OpenMode.APPEND: "ab",
    OpenMode.TRUNCATE: "wb",
    OpenMode.EXCLUSIVE: "xb",
}


class RotatingFileHandler(BaseHandler):
    """
    File sink with size-triggered rotation and bounded backup retention.

    Attributes:
        filename: Path of the primary log file.
        mode: Open mode applied at setup.
        max_bytes: Upper bound on the primary file size.
        max_backup_count: Number of numbered backups kept.
        encoding: Text encoding of written lines.
    """

    def __init__(
            self,
            level: LevelLike = Severity.NOTSET,
            *,
            filename: PathLike,
            max_bytes: int,
            max_backup_count: int,
            mode: Union[OpenMode, str] = OpenMode.APPEND,
            formatter: Optional[Formatter] = None,
            encoding: str = "utf-8",
    ) -> None:
        super().__init__(level, formatter)
        self.filename = os.fspath(filename)
        self.mode = OpenMode.parse(mode)
        self.max_bytes = max_bytes
        self.max_backup_count = max_backup_count
        self.encoding = encoding

        self._file: Optional[BinaryIO] = None
        self._current_size = 0

        self.setup()
        atexit.register(self.destroy)

    # -------------------------------------------------------------------------
    # SETUP
    # -------------------------------------------------------------------------

    def setup(self) -> None:
        """
        Validate limits, open the primary file and initialize the counter.

        Raises:
            InvalidConfiguration: If a limit is below 1. Nothing is opened.
            BackupCollision: In exclusive mode, if a backup already exists.
                The freshly opened handle is closed before raising.
            OSError: Platform failures while opening or purging. A handle
                opened before the failure is closed before raising.
        """
        if not _is_positive_int(self.max_bytes):
            raise InvalidConfiguration("max_bytes", self.max_bytes)
        if not _is_positive_int(self.max_backup_count):
            raise InvalidConfiguration("max_backup_count", self.max_backup_count)

        self._file = open(self.filename, _OPEN_FLAGS[self.mode], buffering=0)
        logger.debug(f"Opened log file {self.filename} (mode={self.mode.value})")

        try:
            if self.mode is OpenMode.TRUNCATE:
                self._current_size = 0
                self._purge_backups()
            elif self.mode is OpenMode.EXCLUSIVE:
                self._current_size = 0
                existing = self._first_existing_backup()
                if existing is not None:
                    logger.warning(f"Refusing exclusive log file {self.filename}: {existing} exists")
                    raise BackupCollision(existing)
            else:
                self._current_size = os.fstat(self._file.fileno()).st_size
        except BaseException:
            self._file.close()
            raise

    def backup_path(self, index: int) -> str:
        """Path of backup slot `index` (1 is the most recent)."""
        return f"{self.filename}.{index}"

    def _first_existing_backup(self) -> Optional[str]:
        for i in range(1, self.max_backup_count + 1):
            backup = self.backup_path(i)
            if os.path.exists(backup):
                return backup
        return None

    def _purge_backups(self) -> None:
        for i in range(1, self.max_backup_count + 1):
            backup = self.backup_path(i)
            if os.path.exists(backup):
                os.remove(backup)
                logger.debug(f"Removed stale backup {backup}")

    # -------------------------------------------------------------------------
    # WRITE PATH
    # -------------------------------------------------------------------------

    @property
    def current_size(self) -> int:
        """Bytes written to the open primary file."""
        return self._current_size

    def emit(self, message: str, level: Severity) -> None:
        data = (message + "\n").encode(self.encoding)
        if self._current_size + len(data) > self.max_bytes:
            self.rotate()
            self._current_size = 0
        self._file.write(data)
        self._current_size += len(data)

    def rotate(self) -> None:
        """
        Shift the primary file into the backup chain and reopen it empty.

        Slots are moved from the highest index down so that no backup is
        overwritten before it has itself been moved. The previous content of
        the oldest slot is replaced by the rename into it.
        """
        if self._file is not None:
            self._file.close()

        for i in range(self.max_backup_count - 1, -1, -1):
            source = self.filename if i == 0 else self.backup_path(i)
            if os.path.exists(source):
                os.replace(source, self.backup_path(i + 1))

        self._file = open(self.filename, "wb", buffering=0)
        logger.debug(f"Rotated log file {self.filename} (backups={self.max_backup_count})")

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._file is None or self._file.closed

    def destroy(self) -> None:
        super().destroy()
        atexit.unregister(self.destroy)
        if self._file is not None and not self._file.closed:
            self._file.close()

    def __repr__(self) -> str:
        return (
            f"<RotatingFileHandler {self.filename!r} level={self.level_name} "
            f"max_bytes={self.max_bytes} backups={self.max_backup_count}>"
        )


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1
