"""Unit tests for package metadata and entry points."""

import tomllib
from pathlib import Path

import pytest
from click.testing import CliRunner

from taskboard import __version__, get_version
from taskboard.cli import main

PYPROJECT = Path(__file__).parents[2] / "pyproject.toml"


@pytest.fixture(scope="module")
def project() -> dict:
    with PYPROJECT.open("rb") as f:
        return tomllib.load(f)["project"]


@pytest.mark.unit
class TestPackageMetadata:
    """Tests that the package agrees with its build metadata."""

    def test_version_matches_pyproject(self, project: dict) -> None:
        assert get_version() == __version__ == project["version"]

    def test_console_script_targets_cli(self, project: dict) -> None:
        assert project["scripts"]["taskboard"] == "taskboard.cli:main"

    def test_cli_lists_commands(self) -> None:
        result = CliRunner().invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "serve" in result.output
        assert "load" in result.output
