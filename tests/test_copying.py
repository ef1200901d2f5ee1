"""Tests for file and directory copies."""

from __future__ import annotations

import os
import stat as stat_module
import sys
from pathlib import Path

import pytest

from hostfs.copying import copy, copy_dir, copy_file
from hostfs.errors import (
    AlreadyExistsError,
    ErrorKind,
    InvalidArgumentError,
    NotFoundError,
    WrongTypeError,
)
from hostfs.inspection import exists
from hostfs.read import read_text_file

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")


class TestCopyFile:
    """Tests for copy_file."""

    def test_copy_new(self, tmp_path: Path) -> None:
        """Test copying to a new destination."""
        src = tmp_path / "f"
        src.write_text("x")
        dst = tmp_path / "f_copy"

        copy_file(src, dst, overwrite=True)

        assert exists(dst) is True
        assert read_text_file(dst) == "x"

    def test_refuses_existing_without_overwrite(self, tmp_path: Path) -> None:
        """Test an existing destination is left unchanged."""
        src = tmp_path / "src.txt"
        src.write_text("new")
        dst = tmp_path / "dst.txt"
        dst.write_text("old")

        with pytest.raises(AlreadyExistsError) as exc_info:
            copy_file(src, dst, overwrite=False)

        assert exc_info.value.kind is ErrorKind.ALREADY_EXISTS
        assert dst.read_text() == "old"

    def test_overwrite_replaces(self, tmp_path: Path) -> None:
        """Test overwrite replaces content, including longer old content."""
        src = tmp_path / "src.txt"
        src.write_text("new")
        dst = tmp_path / "dst.txt"
        dst.write_text("much older content")

        copy_file(src, dst, overwrite=True)

        assert dst.read_text() == "new"

    @posix_only
    def test_preserves_mode(self, tmp_path: Path) -> None:
        """Test the source permission bits are applied to the copy."""
        src = tmp_path / "script.sh"
        src.write_text("#!/bin/sh\n")
        os.chmod(src, 0o750)
        dst = tmp_path / "copy.sh"
        dst.write_text("")
        os.chmod(dst, 0o600)

        copy_file(src, dst, overwrite=True)

        assert stat_module.S_IMODE(os.stat(dst).st_mode) == 0o750

    def test_binary_content(self, tmp_path: Path) -> None:
        """Test arbitrary bytes are copied exactly."""
        data = bytes(range(256)) * 100
        src = tmp_path / "blob"
        src.write_bytes(data)

        copy_file(src, tmp_path / "blob2")

        assert (tmp_path / "blob2").read_bytes() == data

    def test_missing_source(self, tmp_path: Path) -> None:
        """Test a missing source raises NotFoundError."""
        with pytest.raises(NotFoundError):
            copy_file(tmp_path / "missing", tmp_path / "dst")

    def test_source_is_directory(self, tmp_path: Path) -> None:
        """Test a directory source raises WrongTypeError."""
        with pytest.raises(WrongTypeError):
            copy_file(tmp_path, tmp_path / "dst")

    def test_destination_is_directory(self, sample_file: Path, tmp_path: Path) -> None:
        """Test a directory destination raises WrongTypeError."""
        target = tmp_path / "dir"
        target.mkdir()

        with pytest.raises(WrongTypeError):
            copy_file(sample_file, target, overwrite=True)

    def test_dangling_symlink_destination(self, tmp_path: Path) -> None:
        """Test a dangling link at the destination is written through."""
        src = tmp_path / "src.txt"
        src.write_text("x")
        dst = tmp_path / "link"
        dst.symlink_to(tmp_path / "nowhere")

        copy_file(src, dst, overwrite=True)

        assert dst.read_text() == "x"
        assert (tmp_path / "nowhere").read_text() == "x"

    def test_same_file(self, sample_file: Path) -> None:
        """Test copying a file onto itself is refused and keeps content."""
        with pytest.raises(InvalidArgumentError):
            copy_file(sample_file, sample_file, overwrite=True)

        assert sample_file.read_bytes() == b"test data"


class TestCopyDir:
    """Tests for copy_dir."""

    def test_mirrors_tree(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test every file and directory is copied."""
        dst = tmp_path / "dst"

        copy_dir(sample_tree, dst, overwrite=True)

        assert (dst / "top.txt").read_text() == "top"
        assert (dst / "sub" / "mid.txt").read_text() == "mid"
        assert (dst / "sub" / "deep" / "low.txt").read_text() == "low"

    def test_into_existing_dir(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test copying into an existing directory keeps unrelated files."""
        dst = tmp_path / "dst"
        dst.mkdir()
        (dst / "other.txt").write_text("other")

        copy_dir(sample_tree, dst)

        assert (dst / "other.txt").read_text() == "other"
        assert (dst / "top.txt").read_text() == "top"

    def test_refuses_existing_file(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test an existing file stops the copy without overwrite."""
        dst = tmp_path / "dst"
        dst.mkdir()
        (dst / "top.txt").write_text("keep")

        with pytest.raises(AlreadyExistsError):
            copy_dir(sample_tree, dst, overwrite=False)

        assert (dst / "top.txt").read_text() == "keep"

    def test_overwrite_existing_file(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test overwrite replaces existing files."""
        dst = tmp_path / "dst"
        dst.mkdir()
        (dst / "top.txt").write_text("stale")

        copy_dir(sample_tree, dst, overwrite=True)

        assert (dst / "top.txt").read_text() == "top"

    def test_recreates_symlinks(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test symlinks are copied as links with the same target."""
        (sample_tree / "link").symlink_to("top.txt")
        (sample_tree / "dangling").symlink_to("nowhere")
        dst = tmp_path / "dst"

        copy_dir(sample_tree, dst)

        assert (dst / "link").is_symlink()
        assert os.readlink(dst / "link") == "top.txt"
        assert (dst / "link").read_text() == "top"
        assert (dst / "dangling").is_symlink()
        assert os.readlink(dst / "dangling") == "nowhere"

    def test_symlink_overwrite(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test an existing link at the destination is replaced with overwrite."""
        (sample_tree / "link").symlink_to("top.txt")
        dst = tmp_path / "dst"
        dst.mkdir()
        (dst / "link").symlink_to("elsewhere")

        copy_dir(sample_tree, dst, overwrite=True)

        assert os.readlink(dst / "link") == "top.txt"

    def test_symlink_exists_without_overwrite(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test an existing link at the destination is kept without overwrite."""
        (sample_tree / "link").symlink_to("top.txt")
        dst = tmp_path / "dst"
        dst.mkdir()
        (dst / "link").symlink_to("elsewhere")

        with pytest.raises(AlreadyExistsError):
            copy_dir(sample_tree, dst, overwrite=False)

        assert os.readlink(dst / "link") == "elsewhere"

    def test_dangling_symlink_in_tree(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test a dangling link in a file slot does not stop an overwriting copy."""
        dst = tmp_path / "dst"
        dst.mkdir()
        (dst / "top.txt").symlink_to(tmp_path / "nowhere")

        copy_dir(sample_tree, dst, overwrite=True)

        assert (dst / "top.txt").read_text() == "top"
        assert (dst / "sub" / "deep" / "low.txt").read_text() == "low"

    @posix_only
    def test_directory_modes_mirrored(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test created directories end up with their source modes."""
        os.chmod(sample_tree / "sub", 0o750)
        os.chmod(sample_tree / "sub" / "deep", 0o710)
        dst = tmp_path / "dst"

        copy_dir(sample_tree, dst)

        assert stat_module.S_IMODE(os.stat(dst / "sub").st_mode) == 0o750
        assert stat_module.S_IMODE(os.stat(dst / "sub" / "deep").st_mode) == 0o710
        assert (dst / "sub" / "deep" / "low.txt").read_text() == "low"

    @posix_only
    @pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores modes")
    def test_read_only_source(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test read-only source directories are copied with their content."""
        dst = tmp_path / "dst"
        read_only = [sample_tree / "sub", sample_tree]
        for directory in read_only:
            os.chmod(directory, 0o555)
        try:
            copy_dir(sample_tree, dst)

            assert (dst / "top.txt").read_text() == "top"
            assert (dst / "sub" / "mid.txt").read_text() == "mid"
            assert (dst / "sub" / "deep" / "low.txt").read_text() == "low"
            assert stat_module.S_IMODE(os.stat(dst).st_mode) == 0o555
            assert stat_module.S_IMODE(os.stat(dst / "sub").st_mode) == 0o555
        finally:
            for directory in (*read_only, dst / "sub", dst):
                if directory.exists():
                    os.chmod(directory, 0o755)

    def test_source_not_directory(self, sample_file: Path, tmp_path: Path) -> None:
        """Test a file source raises WrongTypeError."""
        with pytest.raises(WrongTypeError):
            copy_dir(sample_file, tmp_path / "dst")

    def test_destination_is_file(self, sample_tree: Path, sample_file: Path) -> None:
        """Test a file at the destination raises WrongTypeError."""
        with pytest.raises(WrongTypeError):
            copy_dir(sample_tree, sample_file)

    def test_destination_inside_source(self, sample_tree: Path) -> None:
        """Test copying a tree into itself is refused."""
        with pytest.raises(InvalidArgumentError):
            copy_dir(sample_tree, sample_tree / "sub" / "copy")

        assert not (sample_tree / "sub" / "copy").exists()

    def test_sibling_with_common_prefix(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test a sibling whose name starts with the source name is allowed."""
        dst = tmp_path / "src-copy"

        copy_dir(sample_tree, dst)

        assert (dst / "top.txt").read_text() == "top"

    def test_empty_directory(self, tmp_path: Path) -> None:
        """Test an empty source yields an empty destination."""
        src = tmp_path / "empty"
        src.mkdir()

        copy_dir(src, tmp_path / "empty_copy")

        assert list((tmp_path / "empty_copy").iterdir()) == []


class TestCopy:
    """Tests for the copy dispatcher."""

    def test_file(self, sample_file: Path, tmp_path: Path) -> None:
        """Test a file source is copied as a file."""
        copy(sample_file, tmp_path / "testfile_copy", True)

        assert (tmp_path / "testfile_copy").read_bytes() == b"test data"

    def test_directory(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test a directory source is copied as a tree."""
        copy(sample_tree, tmp_path / "testdir_copy", True)

        assert (tmp_path / "testdir_copy" / "sub" / "mid.txt").read_text() == "mid"

    def test_missing(self, tmp_path: Path) -> None:
        """Test a missing source raises NotFoundError."""
        with pytest.raises(NotFoundError):
            copy(tmp_path / "missing", tmp_path / "dst")
