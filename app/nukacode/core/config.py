"""User configuration for nuke.

Configuration is stored in ~/.config/nuke/config.toml and applies to
every project. A missing file means defaults.

Example::

    fun = false
    extra_ignore = ["**/fixtures/**/dist"]
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from nukacode.core.errors import ConfigError, ConfigParseError
from nukacode.core.paths import get_config_path

logger = logging.getLogger(__name__)


class NukeConfig(BaseModel):
    """User-level settings.

    Attributes:
        fun: Print ASCII art after a successful nuke.
        extra_ignore: Gitignore-style exclusion patterns applied in every
            project, in addition to the project's .nukeignore.
    """

    model_config = ConfigDict(extra="forbid")

    fun: Annotated[
        bool,
        Field(description="Print ASCII art after a successful nuke"),
    ] = True
    extra_ignore: Annotated[
        list[str],
        Field(description="Exclusion patterns applied in every project"),
    ] = []


def load_config(path: Path | None = None) -> NukeConfig:
    """Load user configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated NukeConfig; defaults when the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or the content doesn't match
            the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No user config at %s, using defaults", config_path)
        return NukeConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return NukeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e
