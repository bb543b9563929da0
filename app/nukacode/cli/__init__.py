"""CLI package for nuka-code.

This package contains the Typer application and all subcommands.
"""

from nukacode.cli.main import app

__all__ = ["app"]
