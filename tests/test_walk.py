"""Tests for directory traversal."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from hostfs.errors import AccessDeniedError, FsError, NotFoundError
from hostfs.types import EntryType, WalkAction, WalkEntry
from hostfs.walk import walk_dir

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")


class Recorder:
    """Visitor that records calls and answers with preset actions."""

    def __init__(self, actions: dict[str, WalkAction] | None = None) -> None:
        self.actions = actions or {}
        self.calls: list[tuple[str, WalkEntry | None, FsError | None]] = []

    def __call__(
        self, path: str, entry: WalkEntry | None, error: FsError | None
    ) -> WalkAction | None:
        self.calls.append((path, entry, error))
        if entry is None:
            return None
        return self.actions.get(entry.name)

    @property
    def paths(self) -> list[str]:
        return [path for path, _, error in self.calls if error is None]


class TestWalkDir:
    """Tests for walk_dir."""

    def test_visits_everything(self, sample_tree: Path) -> None:
        """Test every entry, the root included, is visited once."""
        visitor = Recorder()

        completed = walk_dir(sample_tree, visitor)

        assert completed is True
        expected = {
            str(sample_tree),
            str(sample_tree / "top.txt"),
            str(sample_tree / "sub"),
            str(sample_tree / "sub" / "mid.txt"),
            str(sample_tree / "sub" / "deep"),
            str(sample_tree / "sub" / "deep" / "low.txt"),
        }
        assert set(visitor.paths) == expected
        assert len(visitor.paths) == len(expected)

    def test_root_first(self, sample_tree: Path) -> None:
        """Test the root is reported first with its type."""
        visitor = Recorder()

        walk_dir(sample_tree, visitor)

        path, entry, error = visitor.calls[0]
        assert path == str(sample_tree)
        assert entry is not None and entry.entry_type is EntryType.DIR
        assert error is None

    def test_pre_order(self, sample_tree: Path) -> None:
        """Test a directory comes before its content and subtrees stay together."""
        visitor = Recorder()

        walk_dir(sample_tree, visitor)

        order = visitor.paths
        sub = order.index(str(sample_tree / "sub"))
        deep = order.index(str(sample_tree / "sub" / "deep"))
        low = order.index(str(sample_tree / "sub" / "deep" / "low.txt"))
        mid = order.index(str(sample_tree / "sub" / "mid.txt"))
        top = order.index(str(sample_tree / "top.txt"))
        assert sub < deep < low
        assert sub < mid
        # The sub subtree is not interleaved with its sibling
        assert top < sub or top > max(deep, low, mid)

    def test_file_root(self, sample_file: Path) -> None:
        """Test a file root is visited alone."""
        visitor = Recorder()

        assert walk_dir(sample_file, visitor) is True
        assert visitor.paths == [str(sample_file)]

    def test_skip_prunes_directory(self, sample_tree: Path) -> None:
        """Test SKIP on a directory leaves out its subtree."""
        visitor = Recorder({"sub": WalkAction.SKIP})

        completed = walk_dir(sample_tree, visitor)

        assert completed is True
        assert str(sample_tree / "sub") in visitor.paths
        assert str(sample_tree / "sub" / "mid.txt") not in visitor.paths
        assert str(sample_tree / "top.txt") in visitor.paths

    def test_skip_on_file_ignored(self, sample_tree: Path) -> None:
        """Test SKIP on a file does not stop its siblings."""
        visitor = Recorder({"top.txt": WalkAction.SKIP})

        walk_dir(sample_tree, visitor)

        assert str(sample_tree / "sub" / "deep" / "low.txt") in visitor.paths

    def test_abort(self, sample_tree: Path) -> None:
        """Test ABORT stops immediately and returns False."""
        visitor = Recorder({"sub": WalkAction.ABORT})

        completed = walk_dir(sample_tree, visitor)

        assert completed is False
        assert visitor.paths[-1] == str(sample_tree / "sub")
        assert str(sample_tree / "sub" / "mid.txt") not in visitor.paths

    def test_missing_root(self, tmp_path: Path) -> None:
        """Test a missing root is reported once with no entry."""
        visitor = Recorder()
        root = tmp_path / "missing"

        completed = walk_dir(root, visitor)

        assert completed is True
        assert len(visitor.calls) == 1
        path, entry, error = visitor.calls[0]
        assert path == str(root)
        assert entry is None
        assert isinstance(error, NotFoundError)

    def test_missing_root_abort(self, tmp_path: Path) -> None:
        """Test aborting on the root error returns False."""
        completed = walk_dir(tmp_path / "missing", lambda path, entry, error: WalkAction.ABORT)

        assert completed is False

    def test_symlink_not_followed(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test a link to a directory is reported but not entered."""
        other = tmp_path / "other"
        other.mkdir()
        (other / "hidden.txt").write_text("x")
        (sample_tree / "link").symlink_to(other)
        visitor = Recorder()

        walk_dir(sample_tree, visitor)

        entries = {path: entry for path, entry, _ in visitor.calls}
        link_entry = entries[str(sample_tree / "link")]
        assert link_entry is not None
        assert link_entry.entry_type is EntryType.SYMLINK
        assert not link_entry.is_dir()
        assert str(sample_tree / "link" / "hidden.txt") not in visitor.paths

    def test_empty_directory(self, tmp_path: Path) -> None:
        """Test an empty directory yields only the root."""
        root = tmp_path / "empty"
        root.mkdir()
        visitor = Recorder()

        walk_dir(root, visitor)

        assert visitor.paths == [str(root)]

    @posix_only
    @pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores modes")
    def test_unreadable_directory(self, sample_tree: Path) -> None:
        """Test a directory that cannot be listed is reported a second time."""
        locked = sample_tree / "sub"
        os.chmod(locked, 0o000)
        visitor = Recorder()
        try:
            completed = walk_dir(sample_tree, visitor)
        finally:
            os.chmod(locked, 0o755)

        assert completed is True
        locked_calls = [call for call in visitor.calls if call[0] == str(locked)]
        assert len(locked_calls) == 2
        assert locked_calls[0][2] is None
        assert isinstance(locked_calls[1][2], AccessDeniedError)
        assert str(sample_tree / "top.txt") in visitor.paths
