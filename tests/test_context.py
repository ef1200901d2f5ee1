"""Tests for context module."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from hostfs.config import DEFAULTS
from hostfs.console import Output
from hostfs.context import AppContext, create_context
from hostfs.filesystem import HostFileSystem


class TestAppContext:
    """Tests for AppContext dataclass."""

    def test_create_with_all_dependencies(self) -> None:
        """Test creating context with explicit dependencies."""
        filesystem = MagicMock()
        output = MagicMock()

        ctx = AppContext(filesystem=filesystem, output=output)

        assert ctx.filesystem is filesystem
        assert ctx.output is output
        assert ctx.defaults is DEFAULTS

    def test_default_dependencies(self) -> None:
        """Test context creates real dependencies if not provided."""
        ctx = AppContext()

        assert isinstance(ctx.filesystem, HostFileSystem)
        assert isinstance(ctx.output, Output)


class TestCreateContext:
    """Tests for create_context factory function."""

    def test_missing_config(self, tmp_path: Path) -> None:
        """Test a missing config file gives built-in defaults."""
        ctx = create_context(tmp_path / "missing.yaml")

        assert ctx.defaults is DEFAULTS
        assert isinstance(ctx.filesystem, HostFileSystem)

    def test_config_applied(self, tmp_path: Path) -> None:
        """Test defaults from the config reach the filesystem."""
        config = tmp_path / "hostfs.yaml"
        config.write_text('dirMode: "0700"\nfileMode: "0600"\n')

        ctx = create_context(config)

        assert ctx.defaults.dir_mode == 0o700
        assert isinstance(ctx.filesystem, HostFileSystem)
        assert ctx.filesystem.defaults.file_mode == 0o600

    def test_invalid_config(self, tmp_path: Path) -> None:
        """Test an invalid config raises ValueError."""
        config = tmp_path / "hostfs.yaml"
        config.write_text("- not\n- a mapping\n")

        with pytest.raises(ValueError, match="must be a mapping"):
            create_context(config)
