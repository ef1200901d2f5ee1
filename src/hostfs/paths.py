"""Working directory and path resolution."""

from __future__ import annotations

import os

from hostfs.errors import translate_errors
from hostfs.types import PathLike

__all__ = ["cwd", "resolve"]


def cwd() -> str:
    """Return the current working directory.

    Raises:
        NotFoundError: If the working directory was removed.
    """
    with translate_errors("cwd", "."):
        return os.getcwd()


def resolve(path: PathLike, base: PathLike = "") -> str:
    """Turn a path into an absolute, normalized one.

    Relative paths are resolved against ``base``, or against the working
    directory when ``base`` is empty. A relative ``base`` is itself taken
    relative to the working directory. The path does not have to exist and
    symlinks are left alone.

    Example:
        >>> resolve("b/../c", "/a")
        '/a/c'
    """
    target = os.fspath(path)
    if os.path.isabs(target):
        return os.path.normpath(target)

    anchor = os.fspath(base)
    if not anchor:
        anchor = cwd()
    elif not os.path.isabs(anchor):
        anchor = os.path.join(cwd(), anchor)
    return os.path.normpath(os.path.join(anchor, target))
