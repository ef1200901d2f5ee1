"""Directory and file creation."""

from __future__ import annotations

import logging
import os
import secrets
import tempfile
from typing import BinaryIO

from hostfs.capabilities import O_BINARY
from hostfs.config import DEFAULT_DIR_MODE, DEFAULT_FILE_MODE, DEFAULT_TEMP_ATTEMPTS
from hostfs.errors import (
    InvalidArgumentError,
    IOFailureError,
    NotADirectoryFsError,
    WrongTypeError,
    from_os_error,
    translate_errors,
)
from hostfs.inspection import exists, is_dir, is_file
from hostfs.types import PathLike

__all__ = [
    "create",
    "create_temp",
    "ensure_dir",
    "ensure_dir_default",
    "ensure_file",
    "ensure_file_default",
    "mkdir",
    "mkdir_all",
    "mkdir_all_default",
    "mkdir_default",
    "open_file",
    "open_file_flags",
]

logger = logging.getLogger(__name__)


def mkdir(path: PathLike, mode: int) -> None:
    """Create a single directory.

    Args:
        path: Directory to create.
        mode: Permission bits (subject to umask).

    Raises:
        AlreadyExistsError: If the path already exists.
        NotFoundError: If the parent directory is missing.
    """
    with translate_errors("mkdir", path):
        os.mkdir(path, mode)
    logger.debug("Created directory %s (mode %o)", path, mode)


def mkdir_default(path: PathLike) -> None:
    """Create a single directory with the default directory mode."""
    mkdir(path, DEFAULT_DIR_MODE)


def mkdir_all(path: PathLike, mode: int) -> None:
    """Create a directory and every missing parent.

    Every directory created, intermediate ones included, gets ``mode``.
    Succeeds without changes if the directory already exists.

    Args:
        path: Directory to create.
        mode: Permission bits (subject to umask).

    Raises:
        NotADirectoryFsError: If the path or an existing parent is not a directory.
    """
    target = os.fspath(path)
    if is_dir(target):
        return

    with translate_errors("mkdir_all", target):
        missing: list[str] = []
        current = os.path.abspath(target)
        while not os.path.lexists(current):
            missing.append(current)
            parent = os.path.dirname(current)
            if parent == current:
                break
            current = parent

        if not os.path.isdir(current):
            raise NotADirectoryFsError("mkdir_all", current, "not a directory")

        for directory in reversed(missing):
            try:
                os.mkdir(directory, mode)
            except FileExistsError:
                # Created concurrently
                if not os.path.isdir(directory):
                    raise NotADirectoryFsError("mkdir_all", directory, "not a directory") from None
    logger.debug("Created directory tree %s (mode %o)", target, mode)


def mkdir_all_default(path: PathLike) -> None:
    """Create a directory tree with the default directory mode."""
    mkdir_all(path, DEFAULT_DIR_MODE)


def ensure_dir(path: PathLike, mode: int) -> None:
    """Make sure a directory exists, creating it and its parents if needed.

    Args:
        path: Directory path.
        mode: Permission bits for directories that get created.

    Raises:
        WrongTypeError: If the path exists but is not a directory.
    """
    if is_dir(path):
        return
    if exists(path):
        raise WrongTypeError("ensure_dir", path, "exists and is not a directory")
    mkdir_all(path, mode)


def ensure_dir_default(path: PathLike) -> None:
    """Make sure a directory exists, using the default directory mode."""
    ensure_dir(path, DEFAULT_DIR_MODE)


def ensure_file(path: PathLike, mode: int, parent_mode: int = DEFAULT_DIR_MODE) -> None:
    """Make sure a regular file exists, creating an empty one if needed.

    Missing parent directories are created with ``parent_mode``.
    An existing file is left untouched.

    Args:
        path: File path.
        mode: Permission bits for the file if it gets created.
        parent_mode: Permission bits for created parent directories.

    Raises:
        WrongTypeError: If the path exists but is not a regular file.
    """
    if is_file(path):
        return
    if exists(path):
        raise WrongTypeError("ensure_file", path, "exists and is not a regular file")

    parent = os.path.dirname(os.fspath(path))
    if parent:
        mkdir_all(parent, parent_mode)

    with translate_errors("ensure_file", path):
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | O_BINARY, mode)
        os.close(fd)
    logger.debug("Created file %s (mode %o)", path, mode)


def ensure_file_default(path: PathLike) -> None:
    """Make sure a regular file exists, using the default file mode."""
    ensure_file(path, DEFAULT_FILE_MODE)


def create(path: PathLike) -> BinaryIO:
    """Create or truncate a file and open it for reading and writing.

    The caller owns the returned handle and must close it.

    Raises:
        WrongTypeError: If the path is a directory.
        NotFoundError: If the parent directory is missing.
    """
    with translate_errors("create", path):
        return open(path, "w+b")


def open_file(path: PathLike) -> BinaryIO:
    """Open an existing file read-only. The caller must close the handle."""
    with translate_errors("open", path):
        return open(path, "rb")


def _handle_mode(flags: int) -> str:
    """Pick the file object mode matching the access bits of ``flags``."""
    access = flags & (os.O_WRONLY | os.O_RDWR)
    append = bool(flags & os.O_APPEND)
    if access == os.O_RDWR:
        return "a+b" if append else "r+b"
    if access == os.O_WRONLY:
        return "ab" if append else "wb"
    return "rb"


def open_file_flags(path: PathLike, flags: int, mode: int = DEFAULT_FILE_MODE) -> BinaryIO:
    """Open a file with explicit ``os.O_*`` flags.

    Args:
        path: File path.
        flags: Combination of ``os.O_*`` constants.
        mode: Permission bits if the file gets created.

    Returns:
        Binary file object wrapping the descriptor. The caller must close it.
    """
    with translate_errors("open_file", path):
        fd = os.open(path, flags | O_BINARY, mode)
        try:
            return os.fdopen(fd, _handle_mode(flags))
        except BaseException:
            os.close(fd)
            raise


def _split_pattern(pattern: str) -> tuple[str, str]:
    star = pattern.rfind("*")
    if star == -1:
        return pattern, ""
    return pattern[:star], pattern[star + 1 :]


def create_temp(
    dir: PathLike = "",
    pattern: str = "",
    attempts: int = DEFAULT_TEMP_ATTEMPTS,
) -> tuple[BinaryIO, str]:
    """Create a new uniquely named file and open it for reading and writing.

    The random part of the name replaces the last ``*`` in ``pattern``, or is
    appended when there is none. The file is created with mode 0o600.

    Args:
        dir: Directory for the file. Empty means the system temp directory.
        pattern: Name pattern without path separators.
        attempts: How many names to try before giving up.

    Returns:
        Tuple of (open handle, absolute file name). The caller must close
        the handle.

    Raises:
        InvalidArgumentError: If the pattern contains a path separator.
        IOFailureError: If no unique name was found within ``attempts``.
    """
    directory = os.fspath(dir) or tempfile.gettempdir()
    if os.sep in pattern or (os.altsep and os.altsep in pattern):
        raise InvalidArgumentError("create_temp", pattern, "pattern contains path separator")

    prefix, suffix = _split_pattern(pattern)
    flags = os.O_RDWR | os.O_CREAT | os.O_EXCL | O_BINARY
    for _ in range(attempts):
        name = os.path.join(directory, f"{prefix}{secrets.randbits(32)}{suffix}")
        try:
            fd = os.open(name, flags, 0o600)
        except FileExistsError:
            continue
        except OSError as e:
            raise from_os_error("create_temp", name, e) from e
        logger.debug("Created temp file %s", name)
        return os.fdopen(fd, "w+b"), os.path.abspath(name)

    raise IOFailureError(
        "create_temp",
        os.path.join(directory, pattern),
        f"no unique name after {attempts} attempts",
    )
