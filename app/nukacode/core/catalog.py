"""Glob catalog for nukeable project artifacts.

Maps each artifact category to the glob patterns that locate it,
relative to the project root. Pure data, no filesystem access.
"""

from collections.abc import Iterable
from enum import Enum
from typing import assert_never

DEEP_PREFIX = "**/"


class Category(str, Enum):
    """Artifact categories that can be nuked.

    The values double as the ``type`` choices of the CLI.

    Attributes:
        DEPENDENCIES: Installed dependency trees (node_modules, Yarn PnP files).
        CACHE: Task runner and build tool caches.
        BUILD: Build outputs and framework output directories.
        ALL: Union of the three categories above.
    """

    DEPENDENCIES = "node_modules"
    CACHE = "cache"
    BUILD = "build"
    ALL = "all"


# Yarn 2+ Plug'n'Play artifacts only ever live at the root.
_PNP_FILES: tuple[str, ...] = (
    ".pnp.cjs",
    ".pnp.loader.mjs",
)

_CACHE_DIRS: tuple[str, ...] = (
    ".turbo",
    ".nx/cache",
)

_BUILD_DIRS: tuple[str, ...] = (
    # Build artifacts
    "dist",
    "out",
    "output",
    "outputs",
    "bundle",
    ".output",
    ".outputs",
    ".build",
    # Frameworks
    ".vercel",
    ".next",
    ".nuxt",
    ".svelte-kit",
    ".vinxi",
    ".vuepress/dist",
    "storybook-static",
    "coverage",
    "public/build",
)


def unique(patterns: Iterable[str]) -> list[str]:
    """Drop duplicate patterns, keeping the first occurrence of each.

    Args:
        patterns: Patterns in priority order.

    Returns:
        De-duplicated patterns in first-seen order.
    """
    return list(dict.fromkeys(patterns))


def to_deep_glob(patterns: Iterable[str]) -> list[str]:
    """Expand shallow patterns so they also match at any depth.

    Each pattern yields its root-level form followed by a ``**/``-prefixed
    form. Patterns that are already deep are kept as they are.

    Args:
        patterns: Shallow glob patterns relative to the project root.

    Returns:
        De-duplicated list of shallow and deep patterns.
    """
    expanded: list[str] = []
    for pattern in patterns:
        if pattern.startswith(DEEP_PREFIX):
            expanded.append(pattern)
            continue
        expanded.append(pattern)
        expanded.append(f"{DEEP_PREFIX}{pattern}")
    return unique(expanded)


def get_dependencies_globs() -> list[str]:
    """Glob patterns for node_modules at any depth and Yarn PnP files."""
    return unique([*to_deep_glob(["node_modules"]), *_PNP_FILES])


def get_cache_globs() -> list[str]:
    """Glob patterns for cache directories at any depth."""
    return to_deep_glob(_CACHE_DIRS)


def get_build_globs() -> list[str]:
    """Glob patterns for build output directories at any depth."""
    return to_deep_glob(_BUILD_DIRS)


def get_globs(category: Category) -> list[str]:
    """Get the glob patterns for an artifact category.

    Args:
        category: Category to resolve. ``ALL`` resolves to the union of the
            dependencies, cache and build patterns, in that order.

    Returns:
        Ordered, de-duplicated glob patterns.
    """
    match category:
        case Category.DEPENDENCIES:
            return get_dependencies_globs()
        case Category.CACHE:
            return get_cache_globs()
        case Category.BUILD:
            return get_build_globs()
        case Category.ALL:
            return unique(
                [
                    *get_dependencies_globs(),
                    *get_cache_globs(),
                    *get_build_globs(),
                ]
            )
        case _:
            assert_never(category)
