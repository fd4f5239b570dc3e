"""User configuration for treeops.

Configuration is stored in ~/.config/treeops/config.toml and supplies
defaults for CLI arguments that were not given explicitly.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from treeops.core.paths import get_config_path

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class TreeopsConfig(BaseModel):
    """Defaults applied by the treeops CLI.

    Attributes:
        default_directory: Directory used when none is given.
        default_extension: Extension filter used when --ext is omitted.
        log_level: Logging level when neither --verbose nor --quiet is set.
    """

    model_config = ConfigDict(extra="forbid")

    default_directory: Annotated[
        str,
        Field(min_length=1, description="Directory used when none is given"),
    ] = "."
    default_extension: Annotated[
        str | None,
        Field(description="Extension filter used when --ext is omitted"),
    ] = None
    log_level: Annotated[
        LogLevel,
        Field(description="Default logging level"),
    ] = "WARNING"


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> TreeopsConfig:
    """Load configuration from a TOML file.

    A missing file is not an error; defaults are returned instead.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated TreeopsConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return TreeopsConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return TreeopsConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def save_config(config: TreeopsConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file in the same directory and
    moved into place with os.replace().

    Args:
        config: The TreeopsConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    # TOML has no null; unset values are omitted
    data = config.model_dump(exclude_none=True)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
