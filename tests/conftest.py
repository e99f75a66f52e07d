"""Shared pytest fixtures for all tests."""

from pathlib import Path

import pytest

from triggerwrap.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep TRIGGERWRAP_* variables from the outer environment out of tests."""
    for name in ("TRIGGERWRAP_INCLUDE", "TRIGGERWRAP_EXCLUDE", "TRIGGERWRAP_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def trigger_source():
    """A trigger with an import prologue and an early return."""
    return 'import { f } from "x";\n\nif (!f()) return;\ng();'


@pytest.fixture
def write_source(tmp_path):
    """Create a source file under tmp_path."""
    def _create_file(relative: str, content: str) -> Path:
        """
        Create a source file, making parent directories as needed.

        Args:
            relative: Path relative to tmp_path
            content: File content

        Returns:
            Path to the created file
        """
        filepath = tmp_path / relative
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_text(content, encoding="utf-8")
        return filepath

    return _create_file
