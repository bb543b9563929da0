"""Unit tests for the nuke command.

Tests for ``nuke it`` and the default command routing of bare ``nuke``.
"""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from nukacode.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def clean_git() -> Iterator[MagicMock]:
    """Report a clean working tree."""
    with patch("nukacode.cli.commands.nuke.is_git_dirty", return_value=False) as mock:
        yield mock


@pytest.fixture
def dirty_git() -> Iterator[MagicMock]:
    """Report uncommitted changes."""
    with patch("nukacode.cli.commands.nuke.is_git_dirty", return_value=True) as mock:
        yield mock


class TestNukeCommand:
    """Tests for nuke it command."""

    def test_help(self) -> None:
        """Nuke command shows help."""
        result = runner.invoke(app, ["it", "--help"])
        assert result.exit_code == 0
        assert "--dry-run" in result.output

    def test_nukes_everything(self, monorepo: Path, clean_git: MagicMock) -> None:
        """Every category is removed and the project initialized."""
        result = runner.invoke(app, ["-C", str(monorepo), "it"])

        assert result.exit_code == 0, result.output
        assert "You successfully nuked your project, good job!" in result.output
        assert not (monorepo / "node_modules").exists()
        assert not (monorepo / ".nx/cache").exists()
        assert not (monorepo / "packages/app/dist").exists()
        assert (monorepo / "src/index.ts").exists()
        assert (monorepo / ".nukeignore").exists()
        clean_git.assert_called_once_with(monorepo)

    def test_single_category(self, monorepo: Path, clean_git: MagicMock) -> None:
        """Only the requested category is removed."""
        result = runner.invoke(app, ["-C", str(monorepo), "it", "cache"])

        assert result.exit_code == 0, result.output
        assert not (monorepo / ".nx/cache").exists()
        assert (monorepo / "node_modules").exists()
        assert (monorepo / "coverage").exists()

    def test_respects_nukeignore(self, monorepo: Path, clean_git: MagicMock) -> None:
        """Paths in .nukeignore survive."""
        (monorepo / ".nukeignore").write_text("packages/app/node_modules\n")

        result = runner.invoke(app, ["-C", str(monorepo), "it", "node_modules"])

        assert result.exit_code == 0, result.output
        assert not (monorepo / "node_modules").exists()
        assert (monorepo / "packages/app/node_modules").is_dir()

    def test_invalid_category(self, monorepo: Path, clean_git: MagicMock) -> None:
        """Unknown categories are rejected by the parser."""
        result = runner.invoke(app, ["-C", str(monorepo), "it", "logs"])
        assert result.exit_code == 2

    def test_category_case_insensitive(self, monorepo: Path, clean_git: MagicMock) -> None:
        """Category names are matched case-insensitively."""
        result = runner.invoke(app, ["-C", str(monorepo), "it", "CACHE"])
        assert result.exit_code == 0, result.output
        assert not (monorepo / ".nx/cache").exists()

    def test_dry_run(self, monorepo: Path, clean_git: MagicMock) -> None:
        """Dry-run lists what would go without deleting."""
        result = runner.invoke(app, ["-C", str(monorepo), "it", "--dry-run"])

        assert result.exit_code == 0, result.output
        assert "Nuked (dry-run)" in result.output
        assert "nothing was deleted" in result.output
        assert (monorepo / "node_modules").exists()

    def test_nothing_to_nuke(self, project: Path, clean_git: MagicMock) -> None:
        """A clean project reports that nothing was nuked."""
        result = runner.invoke(app, ["-C", str(project), "it"])

        assert result.exit_code == 0, result.output
        assert "nothing was nuked" in result.output

    def test_dirty_tree_refused(self, monorepo: Path, dirty_git: MagicMock) -> None:
        """Uncommitted changes stop the nuke."""
        result = runner.invoke(app, ["-C", str(monorepo), "it"])

        assert result.exit_code == 1
        assert "You have unsaved changes" in result.output
        assert (monorepo / "node_modules").exists()
        assert not (monorepo / ".nukeignore").exists()

    def test_dirty_tree_forced(self, monorepo: Path, dirty_git: MagicMock) -> None:
        """--force nukes anyway with a warning."""
        result = runner.invoke(app, ["-C", str(monorepo), "it", "--force"])

        assert result.exit_code == 0, result.output
        assert "forcing the nuke" in result.output
        assert not (monorepo / "node_modules").exists()

    def test_missing_package_json(self, tmp_path: Path, clean_git: MagicMock) -> None:
        """Without package.json the command fails and deletes nothing."""
        (tmp_path / "node_modules").mkdir()

        result = runner.invoke(app, ["-C", str(tmp_path), "it"])

        assert result.exit_code == 1
        assert "No package.json found" in result.output
        assert (tmp_path / "node_modules").exists()

    def test_no_lockfile_prompts(self, tmp_path: Path, clean_git: MagicMock) -> None:
        """Without a lockfile the user confirms the project root."""
        (tmp_path / "package.json").write_text("{}")
        (tmp_path / "dist").mkdir()

        result = runner.invoke(app, ["-C", str(tmp_path), "it"], input="y\n")

        assert result.exit_code == 0, result.output
        assert "Are you in the root of your project?" in result.output
        assert (tmp_path / ".nukeignore").exists()
        assert not (tmp_path / "dist").exists()

    def test_mushroom_and_no_fun(self, monorepo: Path, clean_git: MagicMock) -> None:
        """--no-fun suppresses the ascii art."""
        result = runner.invoke(app, ["-C", str(monorepo), "--no-fun", "it"])

        assert result.exit_code == 0, result.output
        assert "`~~`" not in result.output

    def test_mushroom_shown_by_default(self, monorepo: Path, clean_git: MagicMock) -> None:
        """A successful nuke ends with the mushroom cloud."""
        result = runner.invoke(app, ["-C", str(monorepo), "it"])
        assert "`~~`" in result.output

    def test_fun_disabled_in_config(
        self, monorepo: Path, clean_git: MagicMock, isolated_config_home: Path
    ) -> None:
        """fun = false in the user config suppresses the ascii art."""
        (isolated_config_home / "nuke").mkdir()
        (isolated_config_home / "nuke" / "config.toml").write_text("fun = false\n")

        result = runner.invoke(app, ["-C", str(monorepo), "it"])

        assert result.exit_code == 0, result.output
        assert "`~~`" not in result.output

    def test_removal_failure_reported(self, monorepo: Path, clean_git: MagicMock) -> None:
        """Failed paths are listed and the exit code stays 0."""
        with patch(
            "nukacode.core.remover.shutil.rmtree", side_effect=PermissionError("denied")
        ):
            result = runner.invoke(app, ["-C", str(monorepo), "it", "cache"])

        assert result.exit_code == 0, result.output
        assert "could not be nuked" in result.output
        assert (monorepo / ".nx/cache").exists()


class TestDefaultCommand:
    """Tests for routing arguments to the default command."""

    def test_bare_nuke_runs_it(self, monorepo: Path, clean_git: MagicMock) -> None:
        """nuke with no command nukes everything."""
        result = runner.invoke(app, ["-C", str(monorepo)])

        assert result.exit_code == 0, result.output
        assert "NUKA-CODE" in result.output
        assert not (monorepo / "node_modules").exists()

    def test_bare_nuke_no_fun_hides_logo(self, monorepo: Path, clean_git: MagicMock) -> None:
        """--no-fun also hides the banner."""
        result = runner.invoke(app, ["-C", str(monorepo), "--no-fun"])

        assert result.exit_code == 0, result.output
        assert "NUKA-CODE" not in result.output

    def test_category_without_command(self, monorepo: Path, clean_git: MagicMock) -> None:
        """nuke cache is nuke it cache."""
        result = runner.invoke(app, ["-C", str(monorepo), "cache"])

        assert result.exit_code == 0, result.output
        assert not (monorepo / ".nx/cache").exists()
        assert (monorepo / "node_modules").exists()

    def test_option_without_command(self, monorepo: Path, clean_git: MagicMock) -> None:
        """nuke --dry-run is nuke it --dry-run."""
        result = runner.invoke(app, ["-C", str(monorepo), "--dry-run"])

        assert result.exit_code == 0, result.output
        assert (monorepo / "node_modules").exists()

    def test_root_with_equals(self, monorepo: Path, clean_git: MagicMock) -> None:
        """--root=PATH is skipped as a single token."""
        result = runner.invoke(app, [f"--root={monorepo}", "build", "-n"])

        assert result.exit_code == 0, result.output
        assert (monorepo / "coverage").exists()
        assert "coverage" in result.output
