"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest

SAMPLE_CONTENT = b"The quick brown fox jumps over the lazy dog.\n"


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config is never read."""
    config_home = tmp_path / "xdg-config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """A small regular file with known content."""
    path = tmp_path / "notes.txt"
    path.write_bytes(SAMPLE_CONTENT)
    return path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    """A regular file with no content."""
    path = tmp_path / "empty.txt"
    path.touch()
    return path


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """A directory holding one file."""
    path = tmp_path / "folder"
    path.mkdir()
    (path / "inner.txt").write_text("inner")
    return path
