"""Links, renames and removal."""

from __future__ import annotations

import errno
import logging
import os
import shutil
import stat as stat_module

from hostfs.capabilities import host_capabilities
from hostfs.errors import (
    AlreadyExistsError,
    NotEmptyError,
    NotFoundError,
    UnsupportedError,
    translate_errors,
)
from hostfs.inspection import exists
from hostfs.types import PathLike

__all__ = ["link", "read_link", "remove", "remove_all", "rename", "symlink"]

logger = logging.getLogger(__name__)


def link(old_path: PathLike, new_path: PathLike) -> None:
    """Create a hard link ``new_path`` pointing to ``old_path``.

    Raises:
        AlreadyExistsError: If ``new_path`` is taken.
        UnsupportedError: If the host has no hard links.
    """
    if not host_capabilities().hard_link:
        raise UnsupportedError("link", new_path, "hard links are not supported on this host")
    with translate_errors("link", new_path):
        os.link(old_path, new_path)
    logger.debug("Linked %s to %s", new_path, old_path)


def symlink(target: PathLike, link_path: PathLike) -> None:
    """Create a symbolic link at ``link_path`` pointing to ``target``.

    The target does not have to exist.

    Raises:
        AlreadyExistsError: If ``link_path`` is taken.
        UnsupportedError: If the host has no symbolic links.
    """
    if not host_capabilities().symlink:
        raise UnsupportedError("symlink", link_path, "symlinks are not supported on this host")

    # Windows needs to know whether the link points at a directory
    anchor = os.path.dirname(os.fspath(link_path))
    target_is_dir = os.path.isdir(os.path.join(anchor, os.fspath(target)))
    with translate_errors("symlink", link_path):
        os.symlink(target, link_path, target_is_directory=target_is_dir)
    logger.debug("Symlinked %s to %s", link_path, target)


def read_link(path: PathLike) -> str:
    """Return the target of a symbolic link."""
    with translate_errors("read_link", path):
        return os.fspath(os.readlink(path))


def rename(old_path: PathLike, new_path: PathLike, overwrite: bool = True) -> None:
    """Move an entry to a new path.

    An existing destination is replaced atomically on every host when
    ``overwrite`` is True. With ``overwrite`` False the destination is checked
    first; that check and the move are not atomic together.

    Raises:
        NotFoundError: If ``old_path`` does not exist.
        AlreadyExistsError: If ``new_path`` exists and ``overwrite`` is False.
    """
    if not overwrite and exists(new_path):
        raise AlreadyExistsError("rename", new_path, "destination exists")
    with translate_errors("rename", old_path):
        os.replace(old_path, new_path)
    logger.debug("Renamed %s to %s", old_path, new_path)


def remove(path: PathLike) -> None:
    """Remove a single file, symlink or empty directory.

    Raises:
        NotFoundError: If the path does not exist.
        NotEmptyError: If the path is a directory with entries.
    """
    with translate_errors("remove", path):
        if not stat_module.S_ISDIR(os.lstat(path).st_mode):
            os.remove(path)
        else:
            try:
                os.rmdir(path)
            except OSError as e:
                # Some hosts report a non-empty directory as EEXIST
                if e.errno == errno.EEXIST:
                    raise NotEmptyError("remove", path, "directory not empty") from e
                raise
    logger.debug("Removed %s", path)


def remove_all(path: PathLike) -> None:
    """Remove a path and everything below it.

    Missing paths are not an error. A symlink is removed without touching
    what it points to.
    """
    target = os.fspath(path)
    try:
        with translate_errors("remove_all", target):
            if stat_module.S_ISDIR(os.lstat(target).st_mode):
                shutil.rmtree(target)
            else:
                os.remove(target)
    except NotFoundError:
        return
    logger.debug("Removed tree %s", target)
