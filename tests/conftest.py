"""Shared pytest fixtures and test utilities for safemove."""

import errno
import os
from pathlib import Path

import pytest
from click.testing import CliRunner
from pytest import MonkeyPatch


@pytest.fixture(autouse=True, scope="function")
def isolate_app_config(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Automatically isolate app config directory for all tests.

    This fixture runs automatically for every test and ensures that tests
    never touch the real user app config directory.

    Returns:
        Path: The isolated temporary app config directory for the test.
    """
    isolated_config_dir = tmp_path / "app_config"
    isolated_config_dir.mkdir(exist_ok=True)

    monkeypatch.setenv("SAFEMOVE_APP_CONFIG_DIR", str(isolated_config_dir))

    return isolated_config_dir


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def no_atomic_rename(monkeypatch: MonkeyPatch) -> list[tuple[str, str]]:
    """Make every rename fail as if source and target were on different devices.

    Returns:
        List that records each (source, target) pair a rename was attempted for.
    """
    attempts: list[tuple[str, str]] = []

    def cross_device(src, dst, *args, **kwargs):
        attempts.append((os.fspath(src), os.fspath(dst)))
        raise OSError(errno.EXDEV, "Invalid cross-device link")

    monkeypatch.setattr(os, "rename", cross_device)
    monkeypatch.setattr(os, "replace", cross_device)
    return attempts


def make_file(path: Path, content: str = "content") -> Path:
    """Create a file (and its parent directories) with the given content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path
