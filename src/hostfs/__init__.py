"""Everyday filesystem operations with sane defaults."""

__version__ = "0.1.0"

from hostfs.config import (
    DEFAULT_DIR_MODE,
    DEFAULT_ENCODING,
    DEFAULT_FILE_MODE,
    DEFAULT_LINE_SEPARATOR,
    DEFAULTS,
    FsDefaults,
    load_defaults,
)
from hostfs.copying import copy, copy_dir, copy_file
from hostfs.creation import (
    create,
    create_temp,
    ensure_dir,
    ensure_dir_default,
    ensure_file,
    ensure_file_default,
    mkdir,
    mkdir_all,
    mkdir_all_default,
    mkdir_default,
    open_file,
    open_file_flags,
)
from hostfs.errors import (
    AccessDeniedError,
    AlreadyExistsError,
    ErrorKind,
    FsError,
    InvalidArgumentError,
    IOFailureError,
    NotADirectoryFsError,
    NotEmptyError,
    NotFoundError,
    UnsupportedError,
    WrongTypeError,
)
from hostfs.filesystem import HostFileSystem
from hostfs.inspection import exists, is_dir, is_file, is_symlink, lstat, stat
from hostfs.links import link, read_link, remove, remove_all, rename, symlink
from hostfs.metadata import chmod, chown
from hostfs.paths import cwd, resolve
from hostfs.protocols import FileSystem
from hostfs.read import read_file, read_file_lines, read_text_file
from hostfs.types import EntryType, FileInfo, WalkAction, WalkEntry
from hostfs.walk import Visitor, walk_dir
from hostfs.write import write_file, write_file_lines, write_file_lines_sep, write_text_file

__all__ = [
    "__version__",
    # defaults
    "DEFAULT_DIR_MODE",
    "DEFAULT_ENCODING",
    "DEFAULT_FILE_MODE",
    "DEFAULT_LINE_SEPARATOR",
    "DEFAULTS",
    "FsDefaults",
    "load_defaults",
    # types
    "EntryType",
    "FileInfo",
    "FileSystem",
    "HostFileSystem",
    "Visitor",
    "WalkAction",
    "WalkEntry",
    # errors
    "AccessDeniedError",
    "AlreadyExistsError",
    "ErrorKind",
    "FsError",
    "IOFailureError",
    "InvalidArgumentError",
    "NotADirectoryFsError",
    "NotEmptyError",
    "NotFoundError",
    "UnsupportedError",
    "WrongTypeError",
    # inspection
    "exists",
    "is_dir",
    "is_file",
    "is_symlink",
    "lstat",
    "stat",
    # creation
    "create",
    "create_temp",
    "ensure_dir",
    "ensure_dir_default",
    "ensure_file",
    "ensure_file_default",
    "mkdir",
    "mkdir_all",
    "mkdir_all_default",
    "mkdir_default",
    "open_file",
    "open_file_flags",
    # copy
    "copy",
    "copy_dir",
    "copy_file",
    # read & write
    "read_file",
    "read_file_lines",
    "read_text_file",
    "write_file",
    "write_file_lines",
    "write_file_lines_sep",
    "write_text_file",
    # links
    "link",
    "read_link",
    "remove",
    "remove_all",
    "rename",
    "symlink",
    # metadata & traversal
    "chmod",
    "chown",
    "walk_dir",
    # paths
    "cwd",
    "resolve",
]
