"""Host filesystem bound to a set of defaults.

The module level functions always use the built-in defaults.
``HostFileSystem`` wraps the same functions but takes its default modes,
line separator and encoding from an ``FsDefaults`` instance, so callers
can inject a differently configured filesystem or a test double.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import BinaryIO

from hostfs import copying as copy_ops
from hostfs import creation as create_ops
from hostfs import inspection, links, metadata, paths, read, walk, write
from hostfs.config import DEFAULTS, FsDefaults
from hostfs.types import FileInfo, PathLike


class HostFileSystem:
    """Production filesystem implementation.

    Satisfies the FileSystem protocol structurally.
    """

    def __init__(self, defaults: FsDefaults | None = None) -> None:
        """Initialize the filesystem.

        Args:
            defaults: Defaults for modes, separator and encoding.
                Built-in defaults when omitted.
        """
        self.defaults = defaults or DEFAULTS

    @classmethod
    def create_default(cls) -> HostFileSystem:
        """Create a filesystem using the built-in defaults."""
        return cls()

    def _file_mode(self, mode: int | None) -> int:
        return self.defaults.file_mode if mode is None else mode

    # Existence & inspection

    def exists(self, path: PathLike) -> bool:
        return inspection.exists(path)

    def is_file(self, path: PathLike) -> bool:
        return inspection.is_file(path)

    def is_dir(self, path: PathLike) -> bool:
        return inspection.is_dir(path)

    def is_symlink(self, path: PathLike) -> bool:
        return inspection.is_symlink(path)

    def stat(self, path: PathLike) -> FileInfo:
        return inspection.stat(path)

    def lstat(self, path: PathLike) -> FileInfo:
        return inspection.lstat(path)

    # Creation

    def mkdir(self, path: PathLike, mode: int) -> None:
        create_ops.mkdir(path, mode)

    def mkdir_default(self, path: PathLike) -> None:
        create_ops.mkdir(path, self.defaults.dir_mode)

    def mkdir_all(self, path: PathLike, mode: int) -> None:
        create_ops.mkdir_all(path, mode)

    def mkdir_all_default(self, path: PathLike) -> None:
        create_ops.mkdir_all(path, self.defaults.dir_mode)

    def ensure_dir(self, path: PathLike, mode: int) -> None:
        create_ops.ensure_dir(path, mode)

    def ensure_dir_default(self, path: PathLike) -> None:
        create_ops.ensure_dir(path, self.defaults.dir_mode)

    def ensure_file(self, path: PathLike, mode: int) -> None:
        create_ops.ensure_file(path, mode, self.defaults.dir_mode)

    def ensure_file_default(self, path: PathLike) -> None:
        create_ops.ensure_file(path, self.defaults.file_mode, self.defaults.dir_mode)

    def create(self, path: PathLike) -> BinaryIO:
        return create_ops.create(path)

    def create_temp(self, dir: PathLike = "", pattern: str = "") -> tuple[BinaryIO, str]:
        return create_ops.create_temp(dir, pattern, attempts=self.defaults.temp_attempts)

    def open_file(self, path: PathLike) -> BinaryIO:
        return create_ops.open_file(path)

    def open_file_flags(self, path: PathLike, flags: int, mode: int | None = None) -> BinaryIO:
        return create_ops.open_file_flags(path, flags, self._file_mode(mode))

    # Copy

    def copy(self, src: PathLike, dst: PathLike, overwrite: bool = False) -> None:
        copy_ops.copy(src, dst, overwrite)

    def copy_file(self, src: PathLike, dst: PathLike, overwrite: bool = False) -> None:
        copy_ops.copy_file(src, dst, overwrite)

    def copy_dir(self, src: PathLike, dst: PathLike, overwrite: bool = False) -> None:
        copy_ops.copy_dir(src, dst, overwrite)

    # Read & write

    def read_file(self, path: PathLike) -> bytes:
        return read.read_file(path)

    def read_text_file(self, path: PathLike) -> str:
        return read.read_text_file(path, self.defaults.encoding)

    def read_file_lines(self, path: PathLike) -> list[str]:
        return read.read_file_lines(path, self.defaults.encoding)

    def write_file(self, path: PathLike, data: bytes, mode: int | None = None) -> None:
        write.write_file(path, data, self._file_mode(mode))

    def write_text_file(self, path: PathLike, text: str, mode: int | None = None) -> None:
        write.write_text_file(path, text, self._file_mode(mode), self.defaults.encoding)

    def write_file_lines(
        self, path: PathLike, lines: Iterable[str], mode: int | None = None
    ) -> None:
        self.write_file_lines_sep(path, lines, self.defaults.line_separator, mode)

    def write_file_lines_sep(
        self, path: PathLike, lines: Iterable[str], sep: str, mode: int | None = None
    ) -> None:
        write.write_file_lines_sep(
            path, lines, sep, self._file_mode(mode), self.defaults.encoding
        )

    # Links, rename, remove

    def link(self, old_path: PathLike, new_path: PathLike) -> None:
        links.link(old_path, new_path)

    def symlink(self, target: PathLike, link_path: PathLike) -> None:
        links.symlink(target, link_path)

    def read_link(self, path: PathLike) -> str:
        return links.read_link(path)

    def rename(self, old_path: PathLike, new_path: PathLike, overwrite: bool = True) -> None:
        links.rename(old_path, new_path, overwrite)

    def remove(self, path: PathLike) -> None:
        links.remove(path)

    def remove_all(self, path: PathLike) -> None:
        links.remove_all(path)

    # Metadata, traversal, paths

    def chmod(self, path: PathLike, mode: int) -> None:
        metadata.chmod(path, mode)

    def chown(self, path: PathLike, uid: int, gid: int) -> None:
        metadata.chown(path, uid, gid)

    def walk_dir(self, root: PathLike, visitor: walk.Visitor) -> bool:
        return walk.walk_dir(root, visitor)

    def cwd(self) -> str:
        return paths.cwd()

    def resolve(self, path: PathLike, base: PathLike = "") -> str:
        return paths.resolve(path, base)
