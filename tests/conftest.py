"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from click.testing import CliRunner

# ============================================================================
# Config Isolation
# ============================================================================
# Point the global config location at an empty temp directory so a user's
# ~/.config/pathlang/config.toml never changes test results.


@pytest.fixture(autouse=True)
def isolate_global_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect XDG_CONFIG_HOME to a per-test directory.

    Returns:
        The directory used as XDG_CONFIG_HOME.
    """
    config_home = tmp_path / "xdg_config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a project directory with sample source files and chdir into it.

    Returns:
        Path to the project root.
    """
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "src" / "example.py").write_text(
        'def greet(name):\n    """Say hello."""\n    return f"Hello, {name}!"\n'
    )
    (root / "src" / "config.yml").write_text("name: demo\nversion: 1\n")
    (root / "Dockerfile").write_text("FROM python:3.12\nRUN pip install pathlang\n")
    (root / "notes.txt").write_text("first line\nsecond line\nthird line\n")
    monkeypatch.chdir(root)
    return root
