"""Shared pytest configuration for kitro tests."""

from pathlib import Path

import pytest


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    """An empty pages directory."""
    root = tmp_path / "pages"
    root.mkdir()
    return root
