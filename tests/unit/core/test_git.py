"""Unit tests for the git working tree check."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

from nukacode.core.git import is_git_dirty
from nukacode.utils.shell import CommandResult


class TestIsGitDirty:
    """Tests for is_git_dirty function."""

    @patch("nukacode.core.git.run_command")
    @patch("nukacode.core.git.command_exists", return_value=True)
    def test_clean_tree(self, _exists: MagicMock, mock_run: MagicMock, tmp_path: Path) -> None:
        """Empty porcelain output means clean."""
        mock_run.return_value = CommandResult(stdout="", stderr="", returncode=0)

        assert is_git_dirty(tmp_path) is False
        mock_run.assert_called_once_with(
            ["git", "status", "--porcelain"], cwd=tmp_path, timeout=30.0
        )

    @patch("nukacode.core.git.run_command")
    @patch("nukacode.core.git.command_exists", return_value=True)
    def test_modified_files(
        self, _exists: MagicMock, mock_run: MagicMock, tmp_path: Path
    ) -> None:
        """Any porcelain line means dirty."""
        mock_run.return_value = CommandResult(
            stdout=" M src/index.ts\n?? notes.md\n", stderr="", returncode=0
        )

        assert is_git_dirty(tmp_path) is True

    @patch("nukacode.core.git.run_command")
    @patch("nukacode.core.git.command_exists", return_value=True)
    def test_not_a_repository(
        self, _exists: MagicMock, mock_run: MagicMock, tmp_path: Path
    ) -> None:
        """Outside a repository the tree counts as clean."""
        mock_run.return_value = CommandResult(
            stdout="", stderr="fatal: not a git repository", returncode=128
        )

        assert is_git_dirty(tmp_path) is False

    @patch("nukacode.core.git.run_command")
    @patch("nukacode.core.git.command_exists", return_value=False)
    def test_git_not_installed(
        self, _exists: MagicMock, mock_run: MagicMock, tmp_path: Path
    ) -> None:
        """Without git the check is skipped."""
        assert is_git_dirty(tmp_path) is False
        mock_run.assert_not_called()

    @patch("nukacode.core.git.run_command")
    @patch("nukacode.core.git.command_exists", return_value=True)
    def test_timeout(self, _exists: MagicMock, mock_run: MagicMock, tmp_path: Path) -> None:
        """A hanging git counts as clean."""
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="git", timeout=30.0)

        assert is_git_dirty(tmp_path) is False
