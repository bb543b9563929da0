"""Project initialization.

An initialized project has a .nukeignore file and a .nuke working
directory at its root, and a .gitignore that keeps .nuke out of version
control while tracking .nukeignore.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from nukacode.core.manifest import has_lockfile, require_package_json
from nukacode.core.paths import (
    IGNORE_FILE_NAME,
    NUKE_DIR_NAME,
    get_gitignore_file,
    get_ignore_file,
    get_nuke_dir,
)

logger = logging.getLogger(__name__)

IGNORE_FILE_TEMPLATE = (
    "# Add your project's ignore patterns here for the files you DO NOT want to nuke\n"
)

GITIGNORE_HEADER = "# Nuke (nuka-cola)"
GITIGNORE_LINES: tuple[str, ...] = (
    NUKE_DIR_NAME,
    f"!{IGNORE_FILE_NAME}",
)

ROOT_PROMPT = "Are you in the root of your project?"


def is_initialized(root: Path) -> bool:
    """Check whether the project already has a .nukeignore file."""
    return get_ignore_file(root).exists()


def is_project_root(root: Path) -> bool:
    """Check whether a package manager lockfile sits directly in ``root``."""
    try:
        return has_lockfile(entry.name for entry in root.iterdir())
    except OSError as e:
        logger.debug("Cannot list %s: %s", root, e)
        return False


def append_to_gitignore(gitignore_file: Path) -> bool:
    """Add the nuke entries to a .gitignore file.

    Creates the file if it doesn't exist. Lines already present are not
    repeated.

    Args:
        gitignore_file: Path to the .gitignore file.

    Returns:
        True if the file was created or modified.
    """
    if not gitignore_file.exists():
        logger.info("No .gitignore file found, creating one at %s", gitignore_file)
        gitignore_file.write_text(
            "\n".join((GITIGNORE_HEADER, *GITIGNORE_LINES)) + "\n", encoding="utf-8"
        )
        return True

    contents = gitignore_file.read_text(encoding="utf-8")
    existing = {line.strip() for line in contents.splitlines()}
    missing = [line for line in GITIGNORE_LINES if line not in existing]
    if not missing:
        return False

    block = "\n".join((GITIGNORE_HEADER, *missing))
    separator = "" if not contents or contents.endswith("\n") else "\n"
    gitignore_file.write_text(f"{contents}{separator}\n{block}\n", encoding="utf-8")
    return True


def initialize(
    root: Path,
    force: bool = False,
    confirm: Callable[[str], bool] | None = None,
) -> bool:
    """Initialize nuke in a project.

    Requires a package.json at ``root``. Unless forced, a root without a
    lockfile is only accepted if ``confirm`` answers yes.

    Args:
        root: Project root directory.
        force: Skip the project root check.
        confirm: Asks the user a yes/no question. Without it, an
            unconfirmed root is declined.

    Returns:
        True if the project was initialized by this call.

    Raises:
        ManifestNotFoundError: If there is no package.json at root.
    """
    require_package_json(root)

    if is_initialized(root):
        return False

    if not force and not is_project_root(root):
        logger.info("No lockfile found in %s", root)
        if confirm is None or not confirm(ROOT_PROMPT):
            return False

    logger.info("Initializing project at %s", root)
    ignore_file = get_ignore_file(root)
    ignore_file.write_text(IGNORE_FILE_TEMPLATE, encoding="utf-8")
    get_nuke_dir(root).mkdir(exist_ok=True)
    append_to_gitignore(get_gitignore_file(root))
    return True
