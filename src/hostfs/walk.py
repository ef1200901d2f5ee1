"""Depth-first directory traversal with a visitor callback."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Optional

from hostfs.errors import FsError, translate_errors
from hostfs.inspection import lstat
from hostfs.types import EntryType, PathLike, WalkAction, WalkEntry

__all__ = ["Visitor", "walk_dir"]

Visitor = Callable[[str, Optional[WalkEntry], Optional[FsError]], Optional[WalkAction]]


def _entry_type(entry: os.DirEntry[str]) -> EntryType:
    if entry.is_symlink():
        return EntryType.SYMLINK
    if entry.is_dir(follow_symlinks=False):
        return EntryType.DIR
    if entry.is_file(follow_symlinks=False):
        return EntryType.FILE
    return EntryType.OTHER


def _list_dir(path: str) -> list[WalkEntry]:
    with translate_errors("walk_dir", path):
        with os.scandir(path) as it:
            return [WalkEntry(entry.name, entry.path, _entry_type(entry)) for entry in it]


def walk_dir(root: PathLike, visitor: Visitor) -> bool:
    """Visit every entry below ``root``, ``root`` included, depth first.

    The visitor is called as ``visitor(path, entry, error)`` and returns a
    WalkAction, or None to continue. ``WalkAction.SKIP`` on a directory
    prunes its subtree and is ignored on other entries. ``WalkAction.ABORT``
    ends the walk.

    When ``root`` cannot be inspected the visitor is called once with
    ``entry=None``. When a directory cannot be listed the visitor is called
    a second time for that directory with the error. Symlinks are reported
    but never followed, and siblings come in host listing order.

    Args:
        root: Directory to walk.
        visitor: Callback invoked once per entry.

    Returns:
        False if the visitor aborted the walk, True otherwise.
    """
    root_path = os.fspath(root)
    try:
        info = lstat(root_path)
    except FsError as e:
        return visitor(root_path, None, e) is not WalkAction.ABORT

    pending = [WalkEntry(info.name, root_path, info.entry_type)]
    while pending:
        entry = pending.pop()
        action = visitor(entry.path, entry, None)
        if action is WalkAction.ABORT:
            return False
        if action is WalkAction.SKIP or not entry.is_dir():
            continue

        try:
            children = _list_dir(entry.path)
        except FsError as e:
            if visitor(entry.path, entry, e) is WalkAction.ABORT:
                return False
            continue
        # Reversed so the first listed child is visited first
        pending.extend(reversed(children))
    return True
