"""Application context for dependency injection.

This module separates object creation from object use, so CLI commands can
be tested with a mock filesystem instead of touching the real one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from hostfs.config import DEFAULTS, FsDefaults, load_defaults
from hostfs.console import Output
from hostfs.protocols import FileSystem

# Default config location
CONFIG_PATH = Path.home() / ".hostfs.yaml"


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from hostfs.filesystem import HostFileSystem

    return HostFileSystem()


@dataclass
class AppContext:
    """Container for CLI dependencies.

    The filesystem is typed with the FileSystem protocol so test doubles can
    be injected without inheritance.
    """

    filesystem: FileSystem = field(default_factory=_default_filesystem)
    output: Output = field(default_factory=Output)
    defaults: FsDefaults = DEFAULTS


def create_context(config_path: Path | None = None) -> AppContext:
    """Factory for CLI dependencies.

    Args:
        config_path: YAML file with defaults. Uses ~/.hostfs.yaml if omitted.

    Returns:
        Configured AppContext.

    Raises:
        ValueError: If the config file is invalid.
    """
    from hostfs.filesystem import HostFileSystem

    defaults = load_defaults(config_path or CONFIG_PATH)
    return AppContext(
        filesystem=HostFileSystem(defaults),
        output=Output(),
        defaults=defaults,
    )
