"""Permission and ownership changes."""

from __future__ import annotations

import logging
import os

from hostfs.capabilities import host_capabilities
from hostfs.errors import UnsupportedError, translate_errors
from hostfs.types import PathLike

__all__ = ["chmod", "chown"]

logger = logging.getLogger(__name__)


def chmod(path: PathLike, mode: int) -> None:
    """Set the permission bits of a path, following symlinks.

    On hosts without POSIX permissions only the write bit has an effect.
    """
    with translate_errors("chmod", path):
        os.chmod(path, mode)
    logger.debug("Changed mode of %s to %o", path, mode)


def chown(path: PathLike, uid: int, gid: int) -> None:
    """Change the owner and group of a path, following symlinks.

    Args:
        path: Path to change.
        uid: New owner id, or -1 to keep it.
        gid: New group id, or -1 to keep it.

    Raises:
        UnsupportedError: If the host has no uid/gid ownership model.
        AccessDeniedError: If the caller may not change ownership.
    """
    if not host_capabilities().chown:
        raise UnsupportedError("chown", path, "ownership changes are not supported on this host")
    with translate_errors("chown", path):
        os.chown(path, uid, gid)
    logger.debug("Changed owner of %s to %d:%d", path, uid, gid)
