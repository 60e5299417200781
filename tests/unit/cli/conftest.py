"""Fixtures shared by the CLI tests."""

import pytest
import yaml
from click.testing import CliRunner

from focusnav.config import CONFIG_ENV_VAR


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def project_dir(tmp_path, monkeypatch):
    """Run every command from an empty project directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return tmp_path


@pytest.fixture
def grid_file(tmp_path, grid_layout):
    path = tmp_path / "grid.yaml"
    path.write_text(yaml.safe_dump(grid_layout))
    return str(path)


@pytest.fixture
def menu_file(tmp_path, menu_layout):
    path = tmp_path / "menu.yaml"
    path.write_text(yaml.safe_dump(menu_layout))
    return str(path)
