"""Shared test fixtures."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def umask_022() -> Iterator[None]:
    """Pin the umask so created modes are predictable."""
    old = os.umask(0o022)
    try:
        yield
    finally:
        os.umask(old)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Create a file containing "test data"."""
    path = tmp_path / "testfile"
    path.write_bytes(b"test data")
    return path


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree.

    Layout::

        src/
            top.txt        "top"
            sub/
                mid.txt    "mid"
                deep/
                    low.txt "low"
    """
    root = tmp_path / "src"
    (root / "sub" / "deep").mkdir(parents=True)
    (root / "top.txt").write_text("top")
    (root / "sub" / "mid.txt").write_text("mid")
    (root / "sub" / "deep" / "low.txt").write_text("low")
    return root


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.read_text_file.return_value = ""
    fs.read_file_lines.return_value = []
    return fs


@pytest.fixture
def mock_output() -> MagicMock:
    """Create a mock Output that records printed messages."""
    return MagicMock()


@pytest.fixture
def mock_context(mock_filesystem: MagicMock, mock_output: MagicMock) -> object:
    """Create an AppContext wired with mocks."""
    from hostfs.context import AppContext

    return AppContext(filesystem=mock_filesystem, output=mock_output)
