"""Filesystem locations used by nuke.

User-level files live in the XDG config directory (``~/.config/nuke/``
unless ``XDG_CONFIG_HOME`` says otherwise). Everything else is a fixed
name relative to the project root.
"""

import os
from pathlib import Path

APP_NAME = "nuke"

IGNORE_FILE_NAME = ".nukeignore"
NUKE_DIR_NAME = ".nuke"
GITIGNORE_FILE_NAME = ".gitignore"
PACKAGE_JSON_NAME = "package.json"


def get_config_dir() -> Path:
    """Directory holding config.toml and theme.toml.

    An empty ``XDG_CONFIG_HOME`` counts as unset.
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
    return base / APP_NAME


def get_config_path() -> Path:
    """User settings file (config.toml)."""
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """User color overrides (theme.toml)."""
    return get_config_dir() / "theme.toml"


def get_ignore_file(root: Path) -> Path:
    """The project's .nukeignore file."""
    return root / IGNORE_FILE_NAME


def get_nuke_dir(root: Path) -> Path:
    """The project's .nuke working directory."""
    return root / NUKE_DIR_NAME


def get_gitignore_file(root: Path) -> Path:
    """The project's .gitignore file."""
    return root / GITIGNORE_FILE_NAME


def get_package_json(root: Path) -> Path:
    """The project's package.json manifest."""
    return root / PACKAGE_JSON_NAME
