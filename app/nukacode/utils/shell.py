"""Subprocess helpers for the external tools nuke consults (git)."""

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of an external command.

    Attributes:
        stdout: Decoded standard output.
        stderr: Decoded standard error.
        returncode: Process exit status.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """True if the command exited with status 0."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = 60.0,
    cwd: str | Path | None = None,
) -> CommandResult:
    """Run a command to completion and capture its text output.

    Args:
        args: Executable followed by its arguments. No shell is involved.
        check: Raise on a non-zero exit status instead of returning it.
        timeout: Seconds to wait before giving up, or None to wait forever.
        cwd: Directory to run in. Defaults to the current directory.

    Returns:
        CommandResult for the finished process.

    Raises:
        subprocess.CalledProcessError: If ``check`` is set and the command fails.
        subprocess.TimeoutExpired: If the timeout elapses.
        OSError: If the executable cannot be started.
    """
    completed = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=check,
        timeout=timeout,
        cwd=cwd,
    )
    return CommandResult(completed.stdout, completed.stderr, completed.returncode)


def command_exists(name: str) -> bool:
    """Check whether an executable is available on PATH."""
    return shutil.which(name) is not None
