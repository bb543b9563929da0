"""Glob expansion against the project tree.

Patterns are relative to the project root and use glob syntax per path
segment (``*``, ``?``, ``[...]``, and ``**`` for any number of
segments), extended with brace groups such as ``{dist,out}``. The walk
never descends into symlinked directories, so cyclic links cannot loop;
a symlink whose own name matches is still returned.
"""

import logging
import os
from collections.abc import Iterable
from fnmatch import fnmatchcase
from pathlib import Path, PurePosixPath

logger = logging.getLogger(__name__)


def _find_brace_group(pattern: str) -> tuple[int, int] | None:
    """Locate the first top-level brace group containing a comma.

    Returns:
        (start, end) indices of the braces, or None if there is none.
    """
    depth = 0
    start = -1
    has_comma = False
    for i, char in enumerate(pattern):
        if char == "{":
            if depth == 0:
                start = i
                has_comma = False
            depth += 1
        elif char == "}" and depth > 0:
            depth -= 1
            if depth == 0 and has_comma:
                return start, i
        elif char == "," and depth == 1:
            has_comma = True
    return None


def _split_alternatives(body: str) -> list[str]:
    """Split a brace group body on its top-level commas."""
    parts: list[str] = []
    depth = 0
    current = ""
    for char in body:
        if char == "," and depth == 0:
            parts.append(current)
            current = ""
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        current += char
    parts.append(current)
    return parts


def expand_braces(pattern: str) -> list[str]:
    """Expand brace groups into separate patterns.

    ``src/{dist,out}`` becomes ``["src/dist", "src/out"]``. Groups may be
    nested. Braces without a comma are left untouched.

    Args:
        pattern: Glob pattern possibly containing brace groups.

    Returns:
        Expanded patterns in left-to-right order, without duplicates.
    """
    group = _find_brace_group(pattern)
    if group is None:
        return [pattern]

    start, end = group
    prefix, body, suffix = pattern[:start], pattern[start + 1 : end], pattern[end + 1 :]

    expanded: list[str] = []
    for alternative in _split_alternatives(body):
        expanded.extend(expand_braces(f"{prefix}{alternative}{suffix}"))
    return list(dict.fromkeys(expanded))


def _compile(patterns: Iterable[str]) -> list[tuple[str, ...]]:
    """Expand braces and split each pattern into its path segments."""
    compiled: list[tuple[str, ...]] = []
    for pattern in patterns:
        for expanded in expand_braces(pattern):
            if not expanded or PurePosixPath(expanded).is_absolute():
                logger.debug("Skipping unusable pattern %r", expanded)
                continue
            parts = tuple(part for part in expanded.split("/") if part not in ("", "."))
            if parts and parts not in compiled:
                compiled.append(parts)
    return compiled


def _match_parts(pattern: tuple[str, ...], parts: tuple[str, ...]) -> bool:
    """Match path segments against pattern segments; ``**`` spans any number."""
    if not pattern:
        return not parts
    head, rest = pattern[0], pattern[1:]
    if head == "**":
        return any(_match_parts(rest, parts[i:]) for i in range(len(parts) + 1))
    return bool(parts) and fnmatchcase(parts[0], head) and _match_parts(rest, parts[1:])


def _matches(pattern: tuple[str, ...], parts: tuple[str, ...]) -> bool:
    if pattern[-1] != "**" and not fnmatchcase(parts[-1], pattern[-1]):
        return False
    return _match_parts(pattern, parts)


def match(patterns: Iterable[str], root: Path, *, prune: bool = False) -> list[Path]:
    """Expand glob patterns into the existing paths they match.

    The tree is walked once and every entry is tested against all
    patterns. Symlinked directories are never descended into.

    Args:
        patterns: Glob patterns relative to ``root``.
        root: Project root directory.
        prune: Do not look inside matched directories, so nothing nested
            in another match is returned.

    Returns:
        Absolute paths ordered by the first pattern that matches them, then
        by path, each at most once. Patterns that match nothing contribute
        nothing; a missing root yields an empty list.
    """
    root = root.absolute()
    if not root.is_dir():
        logger.debug("Match root does not exist: %s", root)
        return []

    compiled = _compile(patterns)
    found: dict[Path, int] = {}

    def _on_error(error: OSError) -> None:
        logger.debug("Cannot scan %s: %s", error.filename, error)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        current = Path(dirpath)
        base = current.relative_to(root).parts
        dirnames.sort()
        for name in (*dirnames, *filenames):
            parts = (*base, name)
            rank = next(
                (i for i, pattern in enumerate(compiled) if _matches(pattern, parts)),
                None,
            )
            if rank is not None:
                found[current / name] = rank
        if prune:
            dirnames[:] = [name for name in dirnames if current / name not in found]

    logger.debug("Matched %d path(s) under %s", len(found), root)
    return sorted(found, key=lambda path: (found[path], path))
