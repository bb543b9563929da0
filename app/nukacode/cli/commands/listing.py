"""List command implementation.

Shows what a nuke would delete, either as glob patterns or as the
concrete files and directories found in the project.
"""

from pathlib import Path
from typing import Annotated

import typer

from nukacode.cli.display import print_glob_list, print_target_tree
from nukacode.core.catalog import Category, get_globs
from nukacode.core.config import NukeConfig
from nukacode.core.nuke import Nuker
from nukacode.utils.formatting import console, print_info, print_success


def list_targets(
    ctx: typer.Context,
    nuke_type: Annotated[
        Category,
        typer.Argument(
            help="The type of nuke to preview.",
            case_sensitive=False,
            show_default=True,
        ),
    ] = Category.ALL,
    glob: Annotated[
        bool,
        typer.Option(
            "--glob",
            "-g",
            help="Show the glob patterns instead of the files.",
        ),
    ] = False,
) -> None:
    """List all the files that would be nuked.

    Examples:
        nuke list                # Files and directories to be nuked
        nuke list cache          # Only cache directories
        nuke list --glob         # Glob patterns, before .nukeignore
    """
    obj = ctx.ensure_object(dict)
    root: Path = obj.get("root") or Path.cwd()
    config: NukeConfig = obj.get("config") or NukeConfig()

    if glob:
        print_info("The following globs will be nuked:\n")
        print_glob_list(get_globs(nuke_type))
        console.print(
            "\n  [muted](this does not include what is ignored in your .nukeignore file)[/muted]"
        )
        return

    nuker = Nuker(root, config=config)
    targets = nuker.list_targets(nuke_type, include_child_matches=obj.get("verbose", False))

    if not targets:
        print_success("Nothing to nuke. Your project is already clean.")
        return

    print_info("The following files & directories will be nuked:\n")
    print_target_tree(targets, nuker.root)
