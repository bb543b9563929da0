"""package.json and lockfile detection.

Only presence is consumed: nuke refuses to run without a package.json,
and a lockfile at the root marks the directory as a project root.
"""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from nukacode.core.errors import ManifestError, ManifestNotFoundError, ManifestParseError
from nukacode.core.paths import PACKAGE_JSON_NAME, get_package_json

LOCKFILE_NAMES: frozenset[str] = frozenset(
    {
        "pnpm-lock.yaml",
        "yarn.lock",
        "package-lock.json",
    }
)


def _resolve_package_json(path: Path) -> Path:
    """Accept either a project directory or the package.json itself."""
    if path.name == PACKAGE_JSON_NAME:
        return path
    return get_package_json(path)


def read_package_json_or_raise(path: Path) -> dict[str, Any]:
    """Read and parse a package.json file.

    Args:
        path: Project directory or path to package.json.

    Returns:
        Parsed package.json object.

    Raises:
        ManifestNotFoundError: If the file doesn't exist.
        ManifestParseError: If the content is not a JSON object.
        ManifestError: If the file cannot be read.
    """
    manifest_path = _resolve_package_json(path)

    if not manifest_path.exists():
        raise ManifestNotFoundError(f"No package.json found at {manifest_path}")

    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ManifestParseError(f"Invalid JSON in {manifest_path}: {e}") from e
    except OSError as e:
        raise ManifestError(f"Failed to read {manifest_path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestParseError(f"Expected a JSON object in {manifest_path}")
    return data


def read_package_json(path: Path) -> dict[str, Any] | None:
    """Read a package.json file, returning None on any failure."""
    try:
        return read_package_json_or_raise(path)
    except ManifestError:
        return None


def require_package_json(root: Path) -> dict[str, Any]:
    """Get the project's package.json or fail with a user-facing error.

    Args:
        root: Project root directory.

    Returns:
        Parsed package.json object.

    Raises:
        ManifestNotFoundError: If there is no readable package.json at root.
    """
    package_json = read_package_json(root)
    if package_json is None:
        raise ManifestNotFoundError(
            "No package.json found in current working directory, "
            "please run this command in the root of your project."
        )
    return package_json


def is_lockfile(path: str | Path) -> bool:
    """Check whether a file name is a known package manager lockfile."""
    return Path(path).name in LOCKFILE_NAMES


def has_lockfile(paths: Iterable[str | Path]) -> bool:
    """Check whether any of the given paths is a lockfile."""
    return any(is_lockfile(p) for p in paths)

