"""Protocol definition for the filesystem facade.

Code that takes a ``FileSystem`` instead of calling the module functions
directly can be handed a test double or a ``HostFileSystem`` configured with
different defaults. Implementations satisfy the protocol structurally.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import BinaryIO, Protocol, runtime_checkable

from hostfs.types import FileInfo, PathLike
from hostfs.walk import Visitor


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Fallible methods raise ``FsError`` subclasses. Existence checks never
    raise.
    """

    def exists(self, path: PathLike) -> bool:
        """Check if an entry exists.

        Args:
            path: Path to check.

        Returns:
            True if something exists at the path, False otherwise.
        """
        ...

    def is_file(self, path: PathLike) -> bool: ...

    def is_dir(self, path: PathLike) -> bool: ...

    def is_symlink(self, path: PathLike) -> bool: ...

    def stat(self, path: PathLike) -> FileInfo:
        """Get metadata of a path, following symlinks.

        Args:
            path: Path to inspect.

        Returns:
            FileInfo of the resolved entry.

        Raises:
            NotFoundError: If the path does not exist.
        """
        ...

    def lstat(self, path: PathLike) -> FileInfo: ...

    def mkdir(self, path: PathLike, mode: int) -> None: ...

    def mkdir_default(self, path: PathLike) -> None: ...

    def mkdir_all(self, path: PathLike, mode: int) -> None:
        """Create a directory and all missing parents.

        Args:
            path: Directory to create.
            mode: Permission bits for created directories.

        Raises:
            NotADirectoryFsError: If an existing segment is not a directory.
        """
        ...

    def mkdir_all_default(self, path: PathLike) -> None: ...

    def ensure_dir(self, path: PathLike, mode: int) -> None: ...

    def ensure_dir_default(self, path: PathLike) -> None: ...

    def ensure_file(self, path: PathLike, mode: int) -> None: ...

    def ensure_file_default(self, path: PathLike) -> None: ...

    def create(self, path: PathLike) -> BinaryIO: ...

    def create_temp(self, dir: PathLike = "", pattern: str = "") -> tuple[BinaryIO, str]:
        """Create a uniquely named file.

        Args:
            dir: Directory for the file, system temp directory if empty.
            pattern: Name pattern; the last ``*`` is replaced by random digits.

        Returns:
            Tuple of (open handle, absolute name).
        """
        ...

    def open_file(self, path: PathLike) -> BinaryIO: ...

    def open_file_flags(self, path: PathLike, flags: int, mode: int | None = None) -> BinaryIO: ...

    def copy(self, src: PathLike, dst: PathLike, overwrite: bool = False) -> None: ...

    def copy_file(self, src: PathLike, dst: PathLike, overwrite: bool = False) -> None:
        """Copy a file's content and permission bits.

        Args:
            src: Source file.
            dst: Destination file.
            overwrite: Replace an existing destination.

        Raises:
            AlreadyExistsError: If ``dst`` exists and ``overwrite`` is False.
        """
        ...

    def copy_dir(self, src: PathLike, dst: PathLike, overwrite: bool = False) -> None: ...

    def read_file(self, path: PathLike) -> bytes: ...

    def read_text_file(self, path: PathLike) -> str: ...

    def read_file_lines(self, path: PathLike) -> list[str]: ...

    def write_file(self, path: PathLike, data: bytes, mode: int | None = None) -> None: ...

    def write_text_file(self, path: PathLike, text: str, mode: int | None = None) -> None: ...

    def write_file_lines(
        self, path: PathLike, lines: Iterable[str], mode: int | None = None
    ) -> None: ...

    def write_file_lines_sep(
        self, path: PathLike, lines: Iterable[str], sep: str, mode: int | None = None
    ) -> None: ...

    def link(self, old_path: PathLike, new_path: PathLike) -> None: ...

    def symlink(self, target: PathLike, link_path: PathLike) -> None: ...

    def read_link(self, path: PathLike) -> str: ...

    def rename(self, old_path: PathLike, new_path: PathLike, overwrite: bool = True) -> None: ...

    def remove(self, path: PathLike) -> None: ...

    def remove_all(self, path: PathLike) -> None:
        """Remove a path recursively. Missing paths are not an error.

        Args:
            path: Path to remove.
        """
        ...

    def chmod(self, path: PathLike, mode: int) -> None: ...

    def chown(self, path: PathLike, uid: int, gid: int) -> None: ...

    def walk_dir(self, root: PathLike, visitor: Visitor) -> bool:
        """Visit every entry below ``root`` depth first.

        Args:
            root: Directory to walk.
            visitor: Called as ``visitor(path, entry, error)``.

        Returns:
            False if the visitor aborted, True otherwise.
        """
        ...

    def cwd(self) -> str: ...

    def resolve(self, path: PathLike, base: PathLike = "") -> str: ...
