"""Shared Rich display functions for targets and results.

Provides the glob list, the target tree, the deletion results table and
the celebratory art used by the nuke, list and init commands.
"""

from collections.abc import Iterable
from pathlib import Path

from rich.table import Table
from rich.tree import Tree

from nukacode.core.remover import CategoryResult, RemovalFailure
from nukacode.utils.formatting import console, format_size, print_warning

LOGO = r"""
     _..._
   .'     '.      [bold]NUKA-CODE[/bold]
  (  (   )  )     [muted]nuke your non-essentials[/muted]
   '._(_)_.'
      | |
  ____|_|____
"""

MUSHROOM = r"""
        _ ._  _ , _ ._
      (_ ' ( `  )_  .__)
    ( (  (    )   `)  ) _)
   (__ (_   (_ . _) _) ,__)
       `~~`\ ' . /`~~`
            ;   ;
            /   \
___________/_ __ \___________
"""


def print_logo() -> None:
    """Print the banner."""
    console.print(f"[header]{LOGO}[/header]", highlight=False)


def print_mushroom() -> None:
    """Print the mushroom cloud shown after a successful nuke."""
    console.print(f"[warning]{MUSHROOM}[/warning]", highlight=False)


def print_glob_list(globs: Iterable[str]) -> None:
    """Print glob patterns as a bulleted list."""
    for pattern in globs:
        console.print(f"  • [glob]{pattern}[/glob]", highlight=False)


def build_target_tree(paths: Iterable[Path], root: Path) -> Tree:
    """Build a Rich tree of paths relative to the project root.

    Intermediate directories are shown as plain branches; the targets
    themselves are highlighted.

    Args:
        paths: Absolute target paths under ``root``.
        root: Project root directory, used as the tree label.

    Returns:
        Rich Tree rooted at the project directory.
    """
    tree = Tree(f"[bold_header]{root.name or root}[/bold_header]", guide_style="border")
    branches: dict[tuple[str, ...], Tree] = {(): tree}

    for path in sorted(paths):
        parts = path.relative_to(root).parts
        for depth in range(1, len(parts) + 1):
            key = parts[:depth]
            if key in branches:
                continue
            is_target = depth == len(parts)
            label = f"[target]{key[-1]}[/target]" if is_target else f"[muted]{key[-1]}[/muted]"
            branches[key] = branches[key[:-1]].add(label)

    return tree


def print_target_tree(paths: list[Path], root: Path) -> None:
    """Print targets as a tree with a count and size summary."""
    console.print(build_target_tree(paths, root))
    total = sum(get_size(p) or 0 for p in paths)
    console.print(f"\n[dim]{len(paths)} target(s), {format_size(total)} total[/dim]")


def create_results_table(results: dict[str, CategoryResult], root: Path) -> Table:
    """Create a Rich table listing what each category removed.

    Args:
        results: Category results keyed by display name.
        root: Project root, used to show paths relative to it.

    Returns:
        Rich Table with one row per removed path.
    """
    dry_run = any(r.dry_run for r in results.values())
    title = "Nuked (dry-run)" if dry_run else "Nuked"
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Category", width=14)
    table.add_column("Path", style="target", no_wrap=True)

    for name, result in results.items():
        for path in result.removed:
            table.add_row(name, _relative(path, root))

    return table


def print_failures(failures: list[RemovalFailure], root: Path) -> None:
    """Print an aggregate warning for paths that could not be removed."""
    if not failures:
        return

    print_warning(f"{len(failures)} target(s) could not be nuked:")
    for failure in failures:
        relative = _relative(failure.path, root)
        console.print(f"  [error]✗[/error] {relative} [muted]{failure.error}[/muted]")


def get_size(path: Path) -> int | None:
    """Get size in bytes for a path.

    For files and symlinks, returns the entry's own size. For directories,
    returns the sum of all files recursively. Returns None on any error.
    """
    try:
        if path.is_symlink() or path.is_file():
            return path.lstat().st_size

        if path.is_dir():
            total = 0
            for child in path.rglob("*"):
                try:
                    if child.is_file() and not child.is_symlink():
                        total += child.stat().st_size
                except OSError:
                    continue
            return total
    except OSError:
        return None

    return None


def _relative(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)
