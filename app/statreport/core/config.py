"""Configuration for statreport.

Settings are read from ~/.config/statreport/config.toml:

    [checksum]
    algorithm = "crc32"
    chunk_size = 65536

Every key is optional; a missing default config file means defaults.
"""

import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from statreport.core.checksum import DEFAULT_ALGORITHM, DEFAULT_CHUNK_SIZE, ChecksumAlgorithm
from statreport.core.paths import get_config_path


class ChecksumConfig(BaseModel):
    """Checksum settings.

    Attributes:
        algorithm: Checksum algorithm for regular file content.
        chunk_size: Read size in bytes (512 B to 16 MiB).
    """

    model_config = ConfigDict(extra="forbid")

    algorithm: Annotated[
        ChecksumAlgorithm,
        Field(description="Checksum algorithm (crc32, adler32, xor32)"),
    ] = DEFAULT_ALGORITHM
    chunk_size: Annotated[
        int,
        Field(ge=512, le=16 * 1024 * 1024, description="Read size in bytes"),
    ] = DEFAULT_CHUNK_SIZE


class StatConfig(BaseModel):
    """Top-level statreport configuration."""

    model_config = ConfigDict(extra="forbid")

    checksum: ChecksumConfig = Field(default_factory=ChecksumConfig)


class StatConfigError(Exception):
    """Base exception for configuration errors."""


class StatConfigNotFoundError(StatConfigError):
    """Raised when an explicitly requested config file is not found."""


class StatConfigParseError(StatConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> StatConfig:
    """Load configuration from a TOML file.

    Args:
        path: Explicit config file. If None, uses the default config path
            and falls back to defaults when that file does not exist.

    Returns:
        Validated StatConfig object.

    Raises:
        StatConfigNotFoundError: If an explicit config file doesn't exist.
        StatConfigParseError: If the TOML syntax is invalid.
        StatConfigError: If the file can't be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        if path is not None:
            raise StatConfigNotFoundError(f"Config file not found: {config_path}")
        return StatConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise StatConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise StatConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return StatConfig.model_validate(data)
    except ValidationError as e:
        raise StatConfigError(f"Invalid config content in {config_path}: {e}") from e
