"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import json
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Create files and directories under tmp_path.

    Entries ending in "/" are created as directories; anything else is
    created as a file (with its parents). Returns the root.
    """

    def _make(*entries: str) -> Path:
        for entry in entries:
            target = tmp_path / entry
            if entry.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text("x")
        return tmp_path

    return _make


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A minimal JavaScript project root with package.json and a lockfile."""
    (tmp_path / "package.json").write_text(json.dumps({"name": "test-project", "version": "1.0.0"}))
    (tmp_path / "pnpm-lock.yaml").write_text("lockfileVersion: '9.0'\n")
    return tmp_path


@pytest.fixture
def monorepo(project: Path) -> Path:
    """A project with nested workspaces and every artifact category present."""
    for directory in (
        "node_modules/react",
        "packages/app/node_modules/lodash",
        "packages/app/dist",
        "packages/lib/.turbo",
        "apps/web/.next/cache",
        ".nx/cache",
        "coverage",
        "src",
    ):
        (project / directory).mkdir(parents=True)
    (project / "node_modules/react/index.js").write_text("module.exports = {}")
    (project / "packages/app/dist/index.js").write_text("bundle")
    (project / "src/index.ts").write_text("export {}")
    (project / ".pnp.cjs").write_text("pnp")
    return project
