"""Nuke orchestration.

Ties the pipeline together for one project root: catalog globs are
matched against the tree, excluded matches are dropped, and the rest is
removed. A matched directory that holds excluded entries is not removed
whole: only its non-excluded contents go, and the excluded entries keep
their parent directories. Listing targets runs exactly the same pipeline without the
removal step.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import assert_never

from nukacode.core import matcher
from nukacode.core.catalog import Category, get_globs
from nukacode.core.config import NukeConfig
from nukacode.core.ignore import IgnoreContentCache, IgnoreFilter, load_ignore_filter
from nukacode.core.remover import CategoryResult, RemovalFailure, Remover

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class NukeSummary:
    """Aggregate result of nuking every category.

    Attributes:
        node_modules: Result of the dependencies category.
        cache: Result of the cache category.
        builds: Result of the build category.
    """

    node_modules: CategoryResult = field(default_factory=CategoryResult)
    cache: CategoryResult = field(default_factory=CategoryResult)
    builds: CategoryResult = field(default_factory=CategoryResult)

    def __bool__(self) -> bool:
        return any(self.results.values())

    @property
    def results(self) -> dict[str, CategoryResult]:
        """Per-category results keyed by summary name."""
        return {
            "cache": self.cache,
            "builds": self.builds,
            "node_modules": self.node_modules,
        }

    @property
    def removed(self) -> list[Path]:
        """Every removed path across categories."""
        return [p for r in self.results.values() for p in r.removed]

    @property
    def failures(self) -> list[RemovalFailure]:
        """Every failure across categories."""
        return [f for r in self.results.values() for f in r.failures]

    def to_dict(self) -> dict[str, bool]:
        """Whether anything was removed, per category."""
        return {name: bool(result) for name, result in self.results.items()}


class Nuker:
    """Runs the nuke pipeline for one project root.

    A Nuker represents a single invocation: it owns the ignore content
    cache, so the .nukeignore file is read at most once however many
    categories are processed.

    Args:
        root: Project root directory.
        config: User configuration. Defaults are used when omitted.
        dry_run: If True, report removals without deleting anything.
    """

    def __init__(
        self,
        root: Path,
        *,
        config: NukeConfig | None = None,
        dry_run: bool = False,
    ) -> None:
        self._root = root.absolute()
        self._config = config or NukeConfig()
        self._cache = IgnoreContentCache()
        self._remover = Remover(dry_run=dry_run)

    @property
    def root(self) -> Path:
        """Absolute project root."""
        return self._root

    def ignore_filter(self) -> IgnoreFilter:
        """Build the exclusion filter from the cached ignore content."""
        return load_ignore_filter(
            self._root,
            cache=self._cache,
            extra_patterns=self._config.extra_ignore,
        )

    def list_targets(
        self,
        category: Category,
        *,
        include_child_matches: bool = False,
    ) -> list[Path]:
        """Resolve the paths a nuke of ``category`` would remove.

        Args:
            category: Category to resolve.
            include_child_matches: Also report matches nested inside other
                matches (they go away with their parent anyway).

        Returns:
            Absolute paths that match the category and are not excluded.
            A matched directory with excluded entries below it is replaced
            by its removable contents.
        """
        ignore = self.ignore_filter()
        matches = matcher.match(get_globs(category), self._root, prune=not include_child_matches)
        targets: dict[Path, None] = {}
        for path in matches:
            if self._is_excluded(ignore, path):
                continue
            targets.update(dict.fromkeys(self._removable_parts(ignore, path)))
        return list(targets)

    def _is_excluded(self, ignore: IgnoreFilter, path: Path) -> bool:
        relative = path.relative_to(self._root)
        if ignore.is_excluded(relative, is_dir=path.is_dir() and not path.is_symlink()):
            logger.debug("Excluded by ignore rules: %s", relative)
            return True
        return False

    def _removable_parts(self, ignore: IgnoreFilter, path: Path) -> list[Path]:
        """Split a target into the largest subtrees holding nothing excluded.

        Returns ``[path]`` when nothing below it is excluded. Excluded
        directories are not descended into, so a negated rule cannot
        re-include anything below them.
        """
        if not ignore.has_rules or path.is_symlink() or not path.is_dir():
            return [path]

        try:
            entries = sorted(path.iterdir())
        except OSError as e:
            logger.debug("Cannot list %s: %s", path, e)
            return [path]

        parts: list[Path] = []
        whole = True
        for entry in entries:
            if self._is_excluded(ignore, entry):
                whole = False
                continue
            entry_parts = self._removable_parts(ignore, entry)
            if entry_parts != [entry]:
                whole = False
            parts.extend(entry_parts)
        return [path] if whole else parts

    def nuke(self, category: Category) -> CategoryResult | NukeSummary:
        """Remove the targets of a category.

        Args:
            category: Category to nuke. ``ALL`` runs dependencies, cache and
                build one after another and aggregates the results.

        Returns:
            CategoryResult for a single category, NukeSummary for ``ALL``.
        """
        match category:
            case Category.ALL:
                return self.nuke_everything()
            case Category.DEPENDENCIES | Category.CACHE | Category.BUILD:
                return self._nuke_category(category)
            case _:
                assert_never(category)

    def nuke_everything(self) -> NukeSummary:
        """Nuke dependencies, cache and builds, in that order."""
        node_modules = self._nuke_category(Category.DEPENDENCIES)
        cache = self._nuke_category(Category.CACHE)
        builds = self._nuke_category(Category.BUILD)
        return NukeSummary(node_modules=node_modules, cache=cache, builds=builds)

    def _nuke_category(self, category: Category) -> CategoryResult:
        targets = self.list_targets(category)
        logger.info("Nuking %d %s target(s) under %s", len(targets), category.value, self._root)
        result = self._remover.remove_all(targets)
        if result.failed:
            logger.warning(
                "%d %s target(s) could not be removed",
                len(result.failures),
                category.value,
            )
        return result


def nuke(
    category: Category,
    root: Path,
    *,
    config: NukeConfig | None = None,
) -> CategoryResult | NukeSummary:
    """Nuke a category under ``root`` in a fresh invocation."""
    return Nuker(root, config=config).nuke(category)


def list_targets(
    category: Category,
    root: Path,
    *,
    config: NukeConfig | None = None,
) -> list[Path]:
    """List the targets of a category under ``root`` without removing them."""
    return Nuker(root, config=config).list_targets(category)
