"""Configuration models for touch and copy operations."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Permission bits for directories created by touch, and the copy fallback
DEFAULT_DIR_MODE = 0o755
DEFAULT_FILE_MODE = 0o644
DEFAULT_CHUNK_SIZE = 1024 * 1024

MAX_MODE = 0o7777


def _parse_mode(value: Any) -> Any:
    """Accept octal strings such as "0755" or "0o755" for mode fields."""
    if isinstance(value, str):
        text = value.strip().lower()
        if text.startswith("0o"):
            text = text[2:]
        try:
            return int(text, 8)
        except ValueError as e:
            raise ValueError(f"invalid octal mode: {value!r}") from e
    return value


def _check_mode(value: int) -> int:
    if not 0 <= value <= MAX_MODE:
        raise ValueError(f"mode {value:#o} outside 0..{MAX_MODE:#o}")
    return value


class TouchOptions(BaseModel):
    """Options for touch."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    dir_mode: int = Field(default=DEFAULT_DIR_MODE, alias="dirMode")
    file_mode: int = Field(default=DEFAULT_FILE_MODE, alias="fileMode")
    update_times: bool = Field(default=True, alias="updateTimes")

    @field_validator("dir_mode", "file_mode", mode="before")
    @classmethod
    def _parse_octal(cls, value: Any) -> Any:
        return _parse_mode(value)

    @field_validator("dir_mode", "file_mode")
    @classmethod
    def _mode_in_range(cls, value: int) -> int:
        return _check_mode(value)


class CopyOptions(BaseModel):
    """Options for copy_all and copy_file."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    fallback_dir_mode: int = Field(default=DEFAULT_DIR_MODE, alias="fallbackDirMode")
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0, alias="chunkSize")

    @field_validator("fallback_dir_mode", mode="before")
    @classmethod
    def _parse_octal(cls, value: Any) -> Any:
        return _parse_mode(value)

    @field_validator("fallback_dir_mode")
    @classmethod
    def _mode_in_range(cls, value: int) -> int:
        return _check_mode(value)


class Settings(BaseModel):
    """Top level settings, loadable from a JSON file."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    touch_options: TouchOptions = Field(default_factory=TouchOptions, alias="touch")
    copy_options: CopyOptions = Field(default_factory=CopyOptions, alias="copy")

    @classmethod
    def from_file(cls, path: Path) -> Settings:
        """Load settings from a JSON file.

        Args:
            path: Path to the settings file.

        Returns:
            Parsed Settings.

        Raises:
            FileNotFoundError: If the file does not exist.
            pydantic.ValidationError: If the content is invalid.
        """
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        data = json.loads(path.read_text())
        return cls.model_validate(data)
