"""File and directory tree copies.

Copies stream content and carry over permission bits only. They are not
atomic: a failure part way leaves the destination partially written.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat as stat_module

from hostfs.capabilities import O_BINARY
from hostfs.creation import mkdir_all
from hostfs.errors import (
    AlreadyExistsError,
    InvalidArgumentError,
    WrongTypeError,
    translate_errors,
)
from hostfs.inspection import exists, is_dir, is_symlink, stat
from hostfs.links import symlink
from hostfs.types import PathLike

__all__ = ["copy", "copy_dir", "copy_file"]

logger = logging.getLogger(__name__)


def copy(src: PathLike, dst: PathLike, overwrite: bool = False) -> None:
    """Copy a file or a directory tree, depending on what ``src`` is.

    Args:
        src: Source path. Symlinks are followed.
        dst: Destination path.
        overwrite: Replace files that already exist at the destination.
    """
    if stat(src).is_dir:
        copy_dir(src, dst, overwrite)
    else:
        copy_file(src, dst, overwrite)


def copy_file(src: PathLike, dst: PathLike, overwrite: bool = False) -> None:
    """Copy a file's content and permission bits.

    Args:
        src: Source file.
        dst: Destination file.
        overwrite: Replace ``dst`` if it exists.

    Raises:
        NotFoundError: If ``src`` does not exist.
        AlreadyExistsError: If ``dst`` exists and ``overwrite`` is False.
        WrongTypeError: If ``src`` or an existing ``dst`` is a directory.
        InvalidArgumentError: If ``src`` and ``dst`` are the same file.
    """
    with translate_errors("copy_file", src):
        src_stat = os.stat(src)
    if stat_module.S_ISDIR(src_stat.st_mode):
        raise WrongTypeError("copy_file", src, "source is a directory")

    if exists(dst):
        if not overwrite:
            raise AlreadyExistsError("copy_file", dst, "destination exists")
        if is_dir(dst):
            raise WrongTypeError("copy_file", dst, "destination is a directory")
        # A dangling link is written through, like a missing file
        with translate_errors("copy_file", dst):
            if os.path.exists(dst) and os.path.samefile(src, dst):
                raise InvalidArgumentError(
                    "copy_file", dst, "source and destination are the same file"
                )

    mode = stat_module.S_IMODE(src_stat.st_mode)
    with translate_errors("copy_file", src):
        reader = open(src, "rb")
    with reader, translate_errors("copy_file", dst):
        fd = os.open(dst, os.O_WRONLY | os.O_CREAT | os.O_TRUNC | O_BINARY, mode)
        with os.fdopen(fd, "wb") as writer:
            shutil.copyfileobj(reader, writer)
        os.chmod(dst, mode)
    logger.debug("Copied %s to %s", src, dst)


def _make_dir(path: str, mode: int) -> bool:
    """Create a destination directory the owner can write into.

    Returns:
        True if the directory was created, False if it already existed.
    """
    if is_dir(path):
        return False
    if exists(path):
        raise WrongTypeError("copy_dir", path, "destination is not a directory")
    mkdir_all(path, mode | stat_module.S_IRWXU)
    return True


def _copy_link(src: str, dst: str, overwrite: bool) -> None:
    with translate_errors("copy_dir", src):
        target = os.readlink(src)

    if exists(dst):
        if not overwrite:
            raise AlreadyExistsError("copy_dir", dst, "destination exists")
        if is_dir(dst) and not is_symlink(dst):
            raise WrongTypeError("copy_dir", dst, "destination is a directory")
        with translate_errors("copy_dir", dst):
            os.remove(dst)
    symlink(target, dst)


def _is_within(path: str, root: str) -> bool:
    return path == root or path.startswith(root.rstrip(os.sep) + os.sep)


def copy_dir(src: PathLike, dst: PathLike, overwrite: bool = False) -> None:
    """Mirror a directory tree.

    Directories get the mode of their source once their content is in
    place, regular files are copied with ``copy_file`` and symlinks are recreated with the same target.
    Other entry types (sockets, devices, fifos) are skipped. The first error
    stops the copy.

    Args:
        src: Source directory.
        dst: Destination directory, created if missing.
        overwrite: Replace files and links that already exist at the destination.

    Raises:
        WrongTypeError: If ``src`` is not a directory.
        InvalidArgumentError: If ``dst`` is inside ``src``.
        AlreadyExistsError: If a destination file exists and ``overwrite`` is False.
    """
    src_root = os.fspath(src)
    dst_root = os.fspath(dst)

    info = stat(src_root)
    if not info.is_dir:
        raise WrongTypeError("copy_dir", src_root, "source is not a directory")
    if _is_within(os.path.realpath(dst_root), os.path.realpath(src_root)):
        raise InvalidArgumentError("copy_dir", dst_root, "destination is inside source")

    created: list[tuple[str, int]] = []
    if _make_dir(dst_root, info.mode):
        created.append((dst_root, info.mode))
    pending = [(src_root, dst_root)]
    while pending:
        src_dir, dst_dir = pending.pop()
        with translate_errors("copy_dir", src_dir):
            with os.scandir(src_dir) as it:
                entries = list(it)

        for entry in entries:
            target = os.path.join(dst_dir, entry.name)
            with translate_errors("copy_dir", entry.path):
                is_link = entry.is_symlink()
                is_subdir = not is_link and entry.is_dir(follow_symlinks=False)
                is_regular = not is_link and entry.is_file(follow_symlinks=False)
                entry_mode = stat_module.S_IMODE(entry.stat(follow_symlinks=False).st_mode)

            if is_link:
                _copy_link(entry.path, target, overwrite)
            elif is_subdir:
                if _make_dir(target, entry_mode):
                    created.append((target, entry_mode))
                pending.append((entry.path, target))
            elif is_regular:
                copy_file(entry.path, target, overwrite)
            else:
                logger.debug("Skipping special file %s", entry.path)

    # Children were created after their parents, so this goes deepest first
    for directory, mode in reversed(created):
        with translate_errors("copy_dir", directory):
            os.chmod(directory, mode)
    logger.debug("Copied tree %s to %s", src_root, dst_root)
