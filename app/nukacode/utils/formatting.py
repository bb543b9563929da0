"""Themed Rich consoles and message helpers.

Regular output goes to ``console`` (stdout); warnings and errors go to
``err_console`` (stderr) so they survive output redirection.
"""

import sys

from rich.console import Console

from nukacode.core.theme import get_theme

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def _color_system() -> str | None:
    """Force truecolor on a TTY so hex theme colors render exactly."""
    return "truecolor" if sys.stdout.isatty() else None


console = Console(theme=get_theme(), color_system=_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_color_system())


def format_size(size_bytes: int | None) -> str:
    """Format a byte count for humans, e.g. ``1.5 MB``.

    Unknown sizes (None) format like zero.
    """
    size = float(size_bytes or 0)
    for unit in _SIZE_UNITS[:-1]:
        if abs(size) < 1024:
            return f"{int(size)} B" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} {_SIZE_UNITS[-1]}"


def print_info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[info]{message}[/]")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning to stderr."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error to stderr."""
    err_console.print(f"[error]Error:[/] {message}")
