"""Init command implementation.

Creates the project's .nukeignore file and adds the nuke entries to
.gitignore.
"""

from pathlib import Path

import typer

from nukacode.core.errors import NukeError
from nukacode.core.paths import IGNORE_FILE_NAME
from nukacode.core.project import initialize, is_initialized
from nukacode.utils.formatting import print_error, print_success


def init_project(ctx: typer.Context) -> None:
    """Initialize the project.

    Writes a .nukeignore file for the patterns you do NOT want to nuke
    and updates .gitignore. Requires a package.json in the project root.
    """
    obj = ctx.ensure_object(dict)
    root: Path = obj.get("root") or Path.cwd()

    if is_initialized(root):
        print_success("Project already initialized")
        return

    try:
        initialize(root, force=True)
    except NukeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Project initialized, add your exclusions to {IGNORE_FILE_NAME}")
