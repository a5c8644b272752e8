"""Configuration file I/O.

This module defines the user configuration model and provides functions
for loading and saving it in TOML format with Pydantic validation.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from treewipe.core.paths import ensure_config_dir, get_config_path


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when configuration content is invalid."""


class TreewipeConfig(BaseModel):
    """User configuration for treewipe.

    Attributes:
        prune_directories: Remove nested directories bottom-up when erasing.
        confirm: Ask for confirmation before erasing.
        record_history: Append completed erasures to the history file.
        protected_paths: Extra glob patterns for roots that must never be erased.
    """

    model_config = ConfigDict(extra="forbid")

    prune_directories: Annotated[
        bool, Field(description="Remove nested directories bottom-up when erasing")
    ] = True
    confirm: Annotated[bool, Field(description="Ask before erasing")] = True
    record_history: Annotated[bool, Field(description="Record erasures to history")] = True
    protected_paths: Annotated[
        list[str],
        Field(default_factory=list, description="Additional protected path patterns"),
    ]

    @field_validator("protected_paths")
    @classmethod
    def validate_patterns(cls, v: list[str]) -> list[str]:
        """Reject empty patterns and patterns that are neither absolute nor ~-relative."""
        for pattern in v:
            if not pattern.strip():
                msg = "protected_paths: pattern cannot be empty"
                raise ValueError(msg)
            if not pattern.startswith(("/", "~")):
                msg = f"protected_paths: pattern must start with '/' or '~', got '{pattern}'"
                raise ValueError(msg)
        return v


def load_config(path: Path | None = None) -> TreewipeConfig:
    """Load and validate the configuration.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default path.

    Returns:
        Validated TreewipeConfig.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigError: If the file cannot be read.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return TreewipeConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return TreewipeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e


def save_config(config: TreewipeConfig, path: Path | None = None) -> Path:
    """Save the configuration to a TOML file.

    The file is written to a temporary file in the same directory and
    moved into place with os.replace().

    Args:
        config: Configuration to save.
        path: Destination. If None, uses the default path.

    Returns:
        Path where the configuration was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    try:
        if path is None:
            ensure_config_dir()
        else:
            config_path.parent.mkdir(parents=True, exist_ok=True)
    except (OSError, RuntimeError) as e:
        raise ConfigError(f"Failed to write config: {e}") from e

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def require_config(config_path: Path | None = None) -> TreewipeConfig:
    """Load configuration or exit with a helpful error message.

    Args:
        config_path: Optional custom config path.

    Returns:
        Loaded and validated TreewipeConfig.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    import typer

    from treewipe.utils.formatting import print_error, print_info

    path = config_path or get_config_path()
    try:
        return load_config(path)
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        print_info(f"Fix or remove {path} to continue.")
        raise typer.Exit(code=1) from e
