"""Tests for pyproject.toml — declared runtime requirements."""

import tomllib
from pathlib import Path

import pytest

_PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


@pytest.fixture(scope="module")
def project() -> dict:
    with _PYPROJECT.open("rb") as f:
        return tomllib.load(f)["project"]


class TestProjectMetadata:
    def test_python_floor_matches_kida(self, project: dict) -> None:
        assert project["requires-python"] == ">=3.14"

    def test_runtime_dependencies(self, project: dict) -> None:
        names = {dep.split(">")[0].split("=")[0].strip() for dep in project["dependencies"]}
        assert names == {"anyio", "kida-templates"}

    def test_console_script(self, project: dict) -> None:
        assert project["scripts"]["kitro"] == "kitro.cli:main"
