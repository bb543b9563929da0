"""Deletion of matched artifact paths.

Removes files, symlinks and directory trees. Each path is removed
independently: a failure is recorded and the remaining paths are still
processed. Paths that disappeared before their turn (typically because
a parent match was removed first) count as nothing removed, not as a
failure. Entries that vanish while a tree is being removed are skipped.
"""

import logging
import shutil
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

# rmtree stops at the first entry that disappears under it; each retry
# resumes on what is left.
RMTREE_ATTEMPTS = 3


@dataclass(frozen=True, slots=True)
class RemovalFailure:
    """A path that could not be removed.

    Attributes:
        path: Absolute path that was operated on.
        error: Error message from the failed operation.
    """

    path: Path
    error: str


@dataclass(slots=True)
class CategoryResult:
    """Outcome of removing one category's targets.

    Truthy when at least one path was actually removed (or, in dry-run
    mode, would have been).

    Attributes:
        removed: Paths removed, in processing order.
        failures: Paths whose removal failed.
        dry_run: Whether nothing was actually deleted.
    """

    removed: list[Path] = field(default_factory=list)
    failures: list[RemovalFailure] = field(default_factory=list)
    dry_run: bool = False

    def __bool__(self) -> bool:
        return bool(self.removed)

    @property
    def failed(self) -> bool:
        """True if any removal failed."""
        return bool(self.failures)


def _rmtree(path: Path) -> None:
    """Remove a directory tree, tolerating entries that vanish midway."""
    for attempt in range(1, RMTREE_ATTEMPTS + 1):
        try:
            shutil.rmtree(path)
            return
        except FileNotFoundError:
            if not path.exists():
                logger.debug("Vanished during removal: %s", path)
                return
            if attempt == RMTREE_ATTEMPTS:
                raise
            logger.debug("Entry vanished under %s, retrying", path)


class Remover:
    """Removes filesystem paths recursively.

    Attributes:
        _dry_run: If True, report what would be removed without removing.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the Remover.

        Args:
            dry_run: If True, report what would be deleted without deleting.
        """
        self._dry_run = dry_run

    def remove(self, path: Path) -> bool:
        """Remove a single path.

        Directories are removed with their whole subtree. Symlinks are
        unlinked and never followed, including links to directories and
        dead links.

        Args:
            path: Absolute path to remove.

        Returns:
            True if the path existed and was removed, False if it was
            already gone. A directory that existed when the call started
            counts as removed even if parts of it vanished concurrently.

        Raises:
            OSError: If the path exists but cannot be removed.
        """
        if not path.is_symlink() and not path.exists():
            logger.debug("Already gone: %s", path)
            return False

        if self._dry_run:
            logger.info("Dry-run: would remove %s", path)
            return True

        # Directories (but not symlinks to directories)
        if path.is_dir() and not path.is_symlink():
            _rmtree(path)
        else:
            try:
                path.unlink()
            except FileNotFoundError:
                logger.debug("Vanished during removal: %s", path)
                return False

        logger.debug("Removed %s", path)
        return True

    def remove_all(self, paths: Iterable[Path]) -> CategoryResult:
        """Remove every path, collecting failures instead of raising.

        Args:
            paths: Absolute paths to remove.

        Returns:
            CategoryResult listing removed paths and failures.
        """
        result = CategoryResult(dry_run=self._dry_run)

        for path in paths:
            try:
                if self.remove(path):
                    result.removed.append(path)
            except OSError as e:
                logger.warning("Failed to remove %s: %s", path, e)
                result.failures.append(RemovalFailure(path=path, error=str(e)))

        return result
