"""Exclusion rules from the project's .nukeignore file.

The .nukeignore file uses gitignore syntax: blank lines and ``#``
comments are skipped, ``!`` negates, a trailing ``/`` restricts a rule
to directories, ``**`` matches any depth and patterns are anchored at
the project root. Matching is delegated to ``pathspec``.

A missing, unreadable or empty ignore file means "exclude nothing".
"""

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path, PurePath

import pathspec

from nukacode.core.paths import get_ignore_file

logger = logging.getLogger(__name__)


class IgnoreContentCache:
    """Raw .nukeignore content, read at most once per project root.

    One instance is owned by a single nuke invocation so that running
    several categories does not re-read the file. Content is stored only
    after a successful read; there is no invalidation.
    """

    def __init__(self) -> None:
        self._contents: dict[Path, str] = {}
        self._lock = threading.Lock()

    def read(self, root: Path) -> str | None:
        """Return the ignore file content for ``root``.

        Args:
            root: Project root directory.

        Returns:
            File content, or None if the file is missing or unreadable.
        """
        key = root.resolve()
        cached = self._contents.get(key)
        if cached is not None:
            return cached

        with self._lock:
            cached = self._contents.get(key)
            if cached is not None:
                return cached

            ignore_file = get_ignore_file(key)
            try:
                content = ignore_file.read_text(encoding="utf-8")
            except FileNotFoundError:
                logger.debug("No ignore file at %s", ignore_file)
                return None
            except (OSError, UnicodeDecodeError) as e:
                logger.debug("Cannot read ignore file %s: %s", ignore_file, e)
                return None

            self._contents[key] = content
            return content


@dataclass(frozen=True, slots=True)
class IgnoreFilter:
    """Compiled exclusion rules for one project root.

    Attributes:
        spec: Compiled gitignore path spec.
    """

    spec: pathspec.GitIgnoreSpec

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "IgnoreFilter":
        """Compile gitignore-style lines into a filter."""
        return cls(spec=pathspec.GitIgnoreSpec.from_lines(lines))

    @property
    def has_rules(self) -> bool:
        """True if at least one line is an actual rule (not blank or a comment)."""
        return any(pattern.include is not None for pattern in self.spec.patterns)

    def is_excluded(self, relative_path: str | PurePath, is_dir: bool = False) -> bool:
        """Check whether a path is excluded from nuking.

        Args:
            relative_path: Path relative to the project root.
            is_dir: Whether the path is a directory. Directory-only rules
                (trailing ``/``) only apply when this is True.

        Returns:
            True if an active rule excludes the path.

        Raises:
            ValueError: If an absolute path is passed.
        """
        path = PurePath(relative_path)
        if path.is_absolute():
            msg = f"Expected a path relative to the project root, got {relative_path}"
            raise ValueError(msg)

        posix = path.as_posix()
        if is_dir and not posix.endswith("/"):
            posix += "/"
        return self.spec.match_file(posix)


def load_ignore_filter(
    root: Path,
    cache: IgnoreContentCache | None = None,
    extra_patterns: Iterable[str] = (),
) -> IgnoreFilter:
    """Build the exclusion filter for a project root.

    The compiled rule set is rebuilt on every call; only the raw file
    content is cached.

    Args:
        root: Project root directory containing .nukeignore.
        cache: Content cache shared across one invocation. A fresh one is
            used when omitted.
        extra_patterns: Additional gitignore-style rules, applied before the
            project's own rules so the project file can negate them.

    Returns:
        IgnoreFilter for the project. Never raises for I/O errors.
    """
    content = (cache or IgnoreContentCache()).read(root)
    lines = [*extra_patterns, *(content or "").splitlines()]
    return IgnoreFilter.from_lines(lines)
