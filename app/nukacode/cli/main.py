"""Main CLI application entry point.

Defines the Typer application and global options. Running ``nuke``
without a command, or with arguments that don't name one, runs the
``it`` command: ``nuke cache -f`` is ``nuke it cache -f``.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler
from typer.core import TyperGroup

from nukacode import __version__
from nukacode.cli.commands import init, listing, nuke
from nukacode.cli.display import print_logo
from nukacode.core.config import load_config
from nukacode.core.errors import ConfigError
from nukacode.utils.formatting import err_console, print_error

DEFAULT_COMMAND = "it"


class DefaultCommandGroup(TyperGroup):
    """Command group that falls back to a default command.

    The first argument that is not a group option decides: if it names a
    command, parsing proceeds as usual; otherwise the default command
    name is inserted before it.
    """

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        index = self._first_command_arg(ctx, args)
        if index is not None and args[index] not in self.commands:
            args = [*args[:index], DEFAULT_COMMAND, *args[index:]]
        return super().parse_args(ctx, args)

    def _first_command_arg(self, ctx: typer.Context, args: list[str]) -> int | None:
        # Typer may ship its own click, so options are recognized by their
        # parameter type name rather than by class.
        takes_value: dict[str, bool] = {}
        for param in self.get_params(ctx):
            if getattr(param, "param_type_name", None) != "option":
                continue
            expects_value = not getattr(param, "is_flag", False) and not getattr(
                param, "count", False
            )
            for opt in (*param.opts, *param.secondary_opts):
                takes_value[opt] = expects_value

        i = 0
        while i < len(args):
            arg = args[i]
            name = arg.split("=", 1)[0]
            if name in takes_value:
                i += 2 if takes_value[name] and "=" not in arg else 1
                continue
            return i
        return None


app = typer.Typer(
    name="nuke",
    cls=DefaultCommandGroup,
    help="Nuke your non-essentials: node_modules, caches and build directories.",
    invoke_without_command=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"nuke version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route package logging through Rich on stderr."""
    logger = logging.getLogger("nukacode")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=err_console, show_path=False, show_time=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Run with verbose output.",
        ),
    ] = False,
    no_fun: Annotated[
        bool,
        typer.Option(
            "--no-fun",
            help="Do not print ascii art to the console.",
        ),
    ] = False,
    root: Annotated[
        Path | None,
        typer.Option(
            "--root",
            "-C",
            help="Project root directory (defaults to the current directory).",
            file_okay=False,
            dir_okay=True,
            exists=True,
        ),
    ] = None,
) -> None:
    """nuke - a CLI tool for nuking your non-essentials.

    Deletes node_modules, cache and build directories from your project,
    except for what you list in .nukeignore.
    """
    configure_logging(verbose)

    try:
        config = load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["no_fun"] = no_fun
    ctx.obj["root"] = (root or Path.cwd()).absolute()
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        if config.fun and not no_fun:
            print_logo()
        nuke.nuke_it(ctx)


# Register commands
app.command(name=DEFAULT_COMMAND)(nuke.nuke_it)
app.command(name="list")(listing.list_targets)
app.command(name="init")(init.init_project)


if __name__ == "__main__":
    app()
