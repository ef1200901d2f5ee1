"""Whole-file reads."""

from __future__ import annotations

from hostfs.config import DEFAULT_ENCODING
from hostfs.errors import IOFailureError, translate_errors
from hostfs.types import PathLike

__all__ = ["read_file", "read_file_lines", "read_text_file"]


def read_file(path: PathLike) -> bytes:
    """Read the entire content of a file.

    Raises:
        NotFoundError: If the file does not exist.
        WrongTypeError: If the path is a directory.
    """
    with translate_errors("read_file", path):
        with open(path, "rb") as handle:
            return handle.read()


def read_text_file(path: PathLike, encoding: str = DEFAULT_ENCODING) -> str:
    """Read the entire content of a file as text.

    Line terminators are returned exactly as stored.

    Raises:
        IOFailureError: If the content is not valid in ``encoding``.
    """
    data = read_file(path)
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise IOFailureError("read_text_file", path, f"cannot decode as {encoding}") from e


def read_file_lines(path: PathLike, encoding: str = DEFAULT_ENCODING) -> list[str]:
    """Read a text file as a list of lines without their terminators.

    Both ``\\n`` and ``\\r\\n`` terminate a line. A final terminator does not
    produce a trailing empty line, and an empty file yields an empty list.

    Example:
        "a\\nb\\n" -> ["a", "b"]
    """
    text = read_text_file(path, encoding)
    if not text:
        return []

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
