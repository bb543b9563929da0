"""Nuke command implementation.

Deletes the artifacts of a category from the project, after checking
that the working tree is clean and the project is initialized.
"""

from pathlib import Path
from typing import Annotated

import typer

from nukacode.cli.display import (
    create_results_table,
    print_failures,
    print_mushroom,
)
from nukacode.core.catalog import Category
from nukacode.core.config import NukeConfig
from nukacode.core.errors import DirtyWorkingTreeError, NukeError
from nukacode.core.git import is_git_dirty
from nukacode.core.nuke import Nuker, NukeSummary
from nukacode.core.project import initialize
from nukacode.core.remover import CategoryResult
from nukacode.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def _confirm(question: str) -> bool:
    return typer.confirm(question, default=False)


def _check_working_tree(root: Path, force: bool) -> None:
    """Refuse to continue on a dirty tree unless forced.

    Raises:
        DirtyWorkingTreeError: If the tree is dirty and force is False.
    """
    if not is_git_dirty(root):
        return
    if not force:
        raise DirtyWorkingTreeError("You have unsaved changes, please commit them first")
    print_warning("You have unsaved changes, but you are forcing the nuke... good luck!")


def _as_results(
    result: CategoryResult | NukeSummary, category: Category
) -> dict[str, CategoryResult]:
    if isinstance(result, NukeSummary):
        return result.results
    return {category.value: result}


def nuke_it(
    ctx: typer.Context,
    nuke_type: Annotated[
        Category,
        typer.Argument(
            help="The type of nuke to perform.",
            case_sensitive=False,
            show_default=True,
        ),
    ] = Category.ALL,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="DANGER: bypass the uncommitted changes check.",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show what would be nuked without deleting anything.",
        ),
    ] = False,
) -> None:
    """Time to NUKE IT! Drop the nuke on your project.

    Deletes dependency directories, caches and build outputs, except for
    anything matched by the project's .nukeignore file.

    Examples:
        nuke                     # Nuke everything
        nuke node_modules        # Only dependency directories
        nuke build --dry-run     # Preview build output removal
        nuke cache --force       # Nuke even with uncommitted changes
    """
    obj = ctx.ensure_object(dict)
    root: Path = obj.get("root") or Path.cwd()
    config: NukeConfig = obj.get("config") or NukeConfig()
    fun = config.fun and not obj.get("no_fun", False)

    console.print("[info]Nuking your project...[/info]")

    try:
        _check_working_tree(root, force)
        # Must run after the dirty check, since it writes files
        initialize(root, confirm=_confirm)
    except NukeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    nuker = Nuker(root, config=config, dry_run=dry_run)
    with console.status("Nuking your project... brace for impact!"):
        result = nuker.nuke(nuke_type)

    results = _as_results(result, nuke_type)

    if result:
        console.print(create_results_table(results, nuker.root))
        if dry_run:
            print_info("Dry-run: nothing was deleted.")
        else:
            if fun:
                print_mushroom()
            print_success("You successfully nuked your project, good job!")
    else:
        print_info("Well this is awkward... nothing was nuked. Maybe you should try again?")

    print_failures([f for r in results.values() for f in r.failures], nuker.root)
