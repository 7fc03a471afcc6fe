"""Pytest configuration and fixtures for the test suite."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest


@pytest.fixture
def temp_workspace() -> Generator[Path, None, None]:
    """Create a temporary workspace for file operations."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir).resolve()


@pytest.fixture
def site_root(temp_workspace: Path) -> Path:
    """Create a small directory tree to search, next to a same-prefix sibling."""
    root = temp_workspace / "www"
    (root / "public" / "css").mkdir(parents=True)
    (root / "app" / "conf").mkdir(parents=True)
    (root / "app" / "foo" / "bar").mkdir(parents=True)
    (root / "public" / "index.html").write_text("<html></html>")
    (root / "public" / "css" / "site.css").write_text("body { color: red; }")
    (root / "app" / "conf" / "app.ini").write_text("[app]\nname = demo\n")
    (root / "app" / "app.ini").write_text("[app]\n")

    secret = temp_workspace / "www-secret"
    secret.mkdir()
    (secret / "app.ini").write_text("password = hunter2\n")
    return root
