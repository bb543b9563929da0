"""Core nuke pipeline.

Glob catalog, ignore filtering, matching, removal and orchestration,
plus the project and configuration helpers the CLI builds on.
"""

from nukacode.core.catalog import Category, get_globs, to_deep_glob, unique
from nukacode.core.ignore import IgnoreContentCache, IgnoreFilter, load_ignore_filter
from nukacode.core.matcher import expand_braces, match
from nukacode.core.nuke import NukeSummary, Nuker, list_targets, nuke
from nukacode.core.remover import CategoryResult, RemovalFailure, Remover

__all__ = [
    "Category",
    "CategoryResult",
    "IgnoreContentCache",
    "IgnoreFilter",
    "NukeSummary",
    "Nuker",
    "RemovalFailure",
    "Remover",
    "expand_braces",
    "get_globs",
    "list_targets",
    "load_ignore_filter",
    "match",
    "nuke",
    "to_deep_glob",
    "unique",
]
