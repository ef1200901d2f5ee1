"""Whole-file writes.

All writers create the file if needed and truncate existing content. The
permission mode only applies when the file is created.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from hostfs.capabilities import O_BINARY
from hostfs.config import DEFAULT_ENCODING, DEFAULT_FILE_MODE, DEFAULT_LINE_SEPARATOR
from hostfs.errors import InvalidArgumentError, translate_errors
from hostfs.types import PathLike

__all__ = ["write_file", "write_file_lines", "write_file_lines_sep", "write_text_file"]

logger = logging.getLogger(__name__)


def _write(op: str, path: PathLike, data: bytes, mode: int) -> None:
    with translate_errors(op, path):
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC | O_BINARY, mode)
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
    logger.debug("Wrote %d bytes to %s", len(data), path)


def write_file(path: PathLike, data: bytes, mode: int = DEFAULT_FILE_MODE) -> None:
    """Write bytes to a file, replacing its content.

    Args:
        path: File path.
        data: Content to write.
        mode: Permission bits if the file gets created.

    Raises:
        NotFoundError: If the parent directory is missing.
        WrongTypeError: If the path is a directory.
    """
    _write("write_file", path, bytes(data), mode)


def write_text_file(
    path: PathLike,
    text: str,
    mode: int = DEFAULT_FILE_MODE,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    """Write text to a file, replacing its content. No newline translation."""
    _write("write_text_file", path, text.encode(encoding), mode)


def write_file_lines_sep(
    path: PathLike,
    lines: Iterable[str],
    sep: str,
    mode: int = DEFAULT_FILE_MODE,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    """Write lines to a file, terminating each one with ``sep``.

    An empty sequence produces an empty file.

    Args:
        path: File path.
        lines: Lines without terminators.
        sep: Line terminator.
        mode: Permission bits if the file gets created.
        encoding: Text encoding.

    Raises:
        InvalidArgumentError: If ``sep`` is empty.
    """
    if not sep:
        raise InvalidArgumentError("write_file_lines", path, "separator cannot be empty")
    text = "".join(f"{line}{sep}" for line in lines)
    _write("write_file_lines", path, text.encode(encoding), mode)


def write_file_lines(
    path: PathLike,
    lines: Iterable[str],
    mode: int = DEFAULT_FILE_MODE,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    """Write lines to a file using the host line separator."""
    write_file_lines_sep(path, lines, DEFAULT_LINE_SEPARATOR, mode, encoding)
