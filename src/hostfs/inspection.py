"""Existence checks and metadata inspection."""

from __future__ import annotations

import os
from collections.abc import Callable

from hostfs.errors import translate_errors
from hostfs.types import FileInfo, PathLike

__all__ = ["exists", "is_dir", "is_file", "is_symlink", "lstat", "stat"]


def _check(predicate: Callable[[str], bool], path: PathLike) -> bool:
    """Answer a yes/no question about a path.

    A lookup that fails for any reason (missing path, permission denied,
    malformed path) answers False rather than raising.
    """
    try:
        return predicate(os.fspath(path))
    except (OSError, ValueError, TypeError):
        return False


def exists(path: PathLike) -> bool:
    """Check if an entry exists. Dangling symlinks count as existing."""
    return _check(os.path.lexists, path)


def is_file(path: PathLike) -> bool:
    """Check if a path is a regular file, following symlinks."""
    return _check(os.path.isfile, path)


def is_dir(path: PathLike) -> bool:
    """Check if a path is a directory, following symlinks."""
    return _check(os.path.isdir, path)


def is_symlink(path: PathLike) -> bool:
    """Check if a path is a symbolic link."""
    return _check(os.path.islink, path)


def stat(path: PathLike) -> FileInfo:
    """Get metadata of a path, following symlinks.

    Args:
        path: Path to inspect.

    Returns:
        FileInfo of the resolved entry.

    Raises:
        NotFoundError: If the path does not exist.
        AccessDeniedError: If lookup is not permitted.
    """
    with translate_errors("stat", path):
        return FileInfo.from_stat(os.fspath(path), os.stat(path))


def lstat(path: PathLike) -> FileInfo:
    """Get metadata of a path without following a final symlink.

    Args:
        path: Path to inspect.

    Returns:
        FileInfo describing the entry itself.

    Raises:
        NotFoundError: If the path does not exist.
        AccessDeniedError: If lookup is not permitted.
    """
    with translate_errors("lstat", path):
        return FileInfo.from_stat(os.fspath(path), os.lstat(path))
