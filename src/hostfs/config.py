"""Default values for filesystem operations."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_DIR_MODE = 0o755
DEFAULT_FILE_MODE = 0o644
DEFAULT_LINE_SEPARATOR = os.linesep
DEFAULT_ENCODING = "utf-8"
DEFAULT_TEMP_ATTEMPTS = 10000

# Permission bits plus setuid, setgid and sticky
MAX_MODE = 0o7777


class FsDefaults(BaseModel):
    """Defaults applied by the ``*_default`` operations."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    dir_mode: int = Field(default=DEFAULT_DIR_MODE, alias="dirMode")
    file_mode: int = Field(default=DEFAULT_FILE_MODE, alias="fileMode")
    line_separator: str = Field(default=DEFAULT_LINE_SEPARATOR, alias="lineSeparator")
    encoding: str = DEFAULT_ENCODING
    temp_attempts: int = Field(default=DEFAULT_TEMP_ATTEMPTS, alias="tempAttempts", gt=0)

    @field_validator("dir_mode", "file_mode", mode="before")
    @classmethod
    def _parse_mode(cls, value: Any) -> Any:
        """Accept octal strings such as "0755" or "0o644"."""
        if isinstance(value, str):
            return parse_mode(value)
        return value

    @field_validator("dir_mode", "file_mode")
    @classmethod
    def _check_mode(cls, value: int) -> int:
        if not 0 <= value <= MAX_MODE:
            raise ValueError(f"mode {value:#o} out of range")
        return value

    @field_validator("line_separator")
    @classmethod
    def _check_separator(cls, value: str) -> str:
        if not value:
            raise ValueError("line separator cannot be empty")
        return value


DEFAULTS = FsDefaults()


def parse_mode(value: str) -> int:
    """Parse an octal permission string.

    Args:
        value: Octal digits, optionally prefixed with "0o".

    Returns:
        Integer mode.

    Raises:
        ValueError: If the string is not valid octal.

    Example:
        >>> parse_mode("0755")
        493
    """
    text = value.strip().lower()
    if text.startswith("0o"):
        text = text[2:]
    return int(text, 8)


def load_defaults(path: Path) -> FsDefaults:
    """Load defaults from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed FsDefaults, or the built-in defaults if the file is missing.

    Raises:
        ValueError: If the file is not a YAML mapping or has invalid values.
    """
    if not path.exists():
        logger.debug("No config at %s, using built-in defaults", path)
        return DEFAULTS

    try:
        data = yaml.safe_load(path.read_text(encoding=DEFAULT_ENCODING)) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a mapping")
    return FsDefaults.model_validate(data)
