"""Working tree safety check.

Nuking is refused on a dirty git working tree unless forced, so that
nothing uncommitted is lost along with the artifacts.
"""

import logging
import subprocess
from pathlib import Path

from nukacode.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)


def is_git_dirty(root: Path) -> bool:
    """Check whether the git working tree at ``root`` has uncommitted changes.

    Untracked files count as changes. When git is not installed or
    ``root`` is not inside a repository there is nothing to protect, so
    the tree is reported clean.

    Args:
        root: Directory inside the working tree.

    Returns:
        True if ``git status --porcelain`` reports any change.
    """
    if not command_exists("git"):
        logger.debug("git not found, skipping working tree check")
        return False

    try:
        result = run_command(["git", "status", "--porcelain"], cwd=root, timeout=30.0)
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug("git status failed in %s: %s", root, e)
        return False

    if not result.success:
        logger.debug("Not a git working tree (%s): %s", root, result.stderr.strip())
        return False

    return bool(result.stdout.strip())
