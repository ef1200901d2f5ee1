"""Host capability detection.

Operations that some hosts lack (ownership changes, symbolic and hard
links) check a capability first and raise ``UnsupportedError`` instead of
failing with a host-specific error.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from functools import lru_cache

__all__ = ["O_BINARY", "HostCapabilities", "host_capabilities"]


@dataclass(frozen=True)
class HostCapabilities:
    """Filesystem features offered by the running host."""

    chown: bool
    symlink: bool
    hard_link: bool
    permission_bits: bool


@lru_cache(maxsize=1)
def host_capabilities() -> HostCapabilities:
    """Detect capabilities of the running host once per process."""
    is_windows = sys.platform == "win32"
    return HostCapabilities(
        chown=hasattr(os, "chown") and not is_windows,
        symlink=hasattr(os, "symlink"),
        hard_link=hasattr(os, "link"),
        permission_bits=not is_windows,
    )


# Windows needs O_BINARY to avoid newline translation on raw descriptors
O_BINARY = getattr(os, "O_BINARY", 0)
