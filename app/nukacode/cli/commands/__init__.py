"""CLI commands for nuka-code.

This package contains all subcommand implementations.
"""

from nukacode.cli.commands import init, listing, nuke

__all__ = ["init", "listing", "nuke"]
