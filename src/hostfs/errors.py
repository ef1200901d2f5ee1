"""Structured errors for filesystem operations.

Every fallible operation raises an ``FsError`` subclass carrying the error
kind, the operation name and the path it failed on. The underlying
``OSError`` is chained as ``__cause__``.
"""

from __future__ import annotations

import errno
import os
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

__all__ = [
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
    "from_os_error",
    "translate_errors",
]


class ErrorKind(str, Enum):
    """Cause of a failed filesystem operation."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    NOT_A_DIRECTORY = "not_a_directory"
    WRONG_TYPE = "wrong_type"
    NOT_EMPTY = "not_empty"
    ACCESS_DENIED = "access_denied"
    UNSUPPORTED = "unsupported"
    IO_FAILURE = "io_failure"
    INVALID_ARGUMENT = "invalid_argument"


class FsError(Exception):
    """Error raised by a filesystem operation.

    Attributes:
        kind: Cause of the failure.
        op: Name of the failing operation.
        path: Path the operation failed on.
        reason: Human readable cause, usually the OS strerror.
    """

    kind: ErrorKind = ErrorKind.IO_FAILURE

    def __init__(self, op: str, path: str | os.PathLike[str], reason: str) -> None:
        self.op = op
        self.path = os.fspath(path)
        self.reason = reason
        super().__init__(f"{op} {self.path}: {reason}")


class NotFoundError(FsError):
    """Path does not exist."""

    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(FsError):
    """Path is already taken."""

    kind = ErrorKind.ALREADY_EXISTS


class NotADirectoryFsError(FsError):
    """A path segment that must be a directory is not one."""

    kind = ErrorKind.NOT_A_DIRECTORY


class WrongTypeError(FsError):
    """Path exists but as the wrong entry type."""

    kind = ErrorKind.WRONG_TYPE


class NotEmptyError(FsError):
    """Directory is not empty."""

    kind = ErrorKind.NOT_EMPTY


class AccessDeniedError(FsError):
    """Permission denied by the host."""

    kind = ErrorKind.ACCESS_DENIED


class UnsupportedError(FsError):
    """Host lacks the requested feature."""

    kind = ErrorKind.UNSUPPORTED


class IOFailureError(FsError):
    """Any other I/O fault."""

    kind = ErrorKind.IO_FAILURE


class InvalidArgumentError(FsError):
    """Caller supplied an unusable argument."""

    kind = ErrorKind.INVALID_ARGUMENT


_ERRNO_KINDS: dict[int, type[FsError]] = {
    errno.ENOENT: NotFoundError,
    errno.EEXIST: AlreadyExistsError,
    errno.ENOTDIR: NotADirectoryFsError,
    errno.ENOTEMPTY: NotEmptyError,
    errno.EISDIR: WrongTypeError,
    errno.EACCES: AccessDeniedError,
    errno.EPERM: AccessDeniedError,
    errno.ENOSYS: UnsupportedError,
    errno.EINVAL: InvalidArgumentError,
}
for _name in ("ENOTSUP", "EOPNOTSUPP"):
    if hasattr(errno, _name):
        _ERRNO_KINDS[getattr(errno, _name)] = UnsupportedError


def from_os_error(op: str, path: str | os.PathLike[str], exc: OSError) -> FsError:
    """Build the FsError matching an OSError's errno.

    Args:
        op: Name of the failing operation.
        path: Path the operation failed on.
        exc: Error raised by the host call.

    Returns:
        FsError subclass instance for the errno, IOFailureError when unknown.
    """
    cls = _ERRNO_KINDS.get(exc.errno or 0, IOFailureError)
    return cls(op, path, exc.strerror or str(exc))


@contextmanager
def translate_errors(op: str, path: str | os.PathLike[str]) -> Iterator[None]:
    """Re-raise host errors inside the block as FsError.

    Args:
        op: Name of the operation, used in the message.
        path: Path to report.

    Raises:
        FsError: Translated from OSError, NotImplementedError or ValueError.
    """
    try:
        yield
    except FsError:
        raise
    except OSError as e:
        raise from_os_error(op, path, e) from e
    except NotImplementedError as e:
        raise UnsupportedError(op, path, str(e) or "not supported on this host") from e
    except ValueError as e:
        raise InvalidArgumentError(op, path, str(e)) from e
