"""Shared data types for hostfs."""

from __future__ import annotations

import os
import stat as stat_module
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Union

__all__ = ["EntryType", "FileInfo", "PathLike", "WalkAction", "WalkEntry"]

PathLike = Union[str, os.PathLike]


class EntryType(str, Enum):
    """Kind of filesystem entry."""

    FILE = "file"
    DIR = "dir"
    SYMLINK = "symlink"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> EntryType:
        """Classify an ``st_mode`` value."""
        if stat_module.S_ISLNK(mode):
            return cls.SYMLINK
        if stat_module.S_ISDIR(mode):
            return cls.DIR
        if stat_module.S_ISREG(mode):
            return cls.FILE
        return cls.OTHER


class WalkAction(str, Enum):
    """Instruction returned by a walk visitor."""

    CONTINUE = "continue"
    SKIP = "skip"
    ABORT = "abort"


@dataclass(frozen=True)
class FileInfo:
    """Metadata of a filesystem entry.

    Attributes:
        name: Final path component.
        path: Path as given to the inspection call.
        size: Size in bytes.
        mode: Permission bits (no file type bits).
        mod_time: Last modification time, UTC.
        entry_type: Kind of entry.
    """

    name: str
    path: str
    size: int
    mode: int
    mod_time: datetime
    entry_type: EntryType

    @classmethod
    def from_stat(cls, path: str, st: os.stat_result) -> FileInfo:
        """Build metadata from a stat result."""
        return cls(
            name=os.path.basename(os.path.normpath(path)),
            path=path,
            size=st.st_size,
            mode=stat_module.S_IMODE(st.st_mode),
            mod_time=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
            entry_type=EntryType.from_mode(st.st_mode),
        )

    @property
    def is_dir(self) -> bool:
        return self.entry_type is EntryType.DIR

    @property
    def is_file(self) -> bool:
        return self.entry_type is EntryType.FILE

    @property
    def is_symlink(self) -> bool:
        return self.entry_type is EntryType.SYMLINK


@dataclass(frozen=True)
class WalkEntry:
    """Entry handed to a walk visitor."""

    name: str
    path: str
    entry_type: EntryType

    def is_dir(self) -> bool:
        return self.entry_type is EntryType.DIR
