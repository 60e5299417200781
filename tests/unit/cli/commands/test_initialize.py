"""
Unit tests for the 'init' command.
"""

from unittest.mock import patch

import yaml

from focusnav.cli.commands.initialize import init
from focusnav.config import load_config


class TestInitCommand:
    """Test the init command."""

    def test_init_creates_config(self, runner, project_dir):
        result = runner.invoke(init)

        assert result.exit_code == 0
        assert "Initialized successfully" in result.output

        config_path = project_dir / ".focusnav" / "config.yaml"
        assert config_path.exists()

        with open(config_path) as f:
            config = yaml.safe_load(f)

        assert config["default_overlap_threshold"] == 0.3
        assert config["stale_destination_policy"] == "geometric"
        assert config["key_map"]["ArrowLeft"] == "left"
        assert config["key_map"]["29460"] == "up"

    def test_written_config_loads(self, runner, project_dir):
        runner.invoke(init)
        config = load_config()
        assert len(config.key_map) == 28

    @patch("focusnav.cli.commands.initialize.Confirm.ask")
    def test_existing_config_kept_when_declined(self, mock_confirm, runner, project_dir):
        mock_confirm.return_value = False
        config_path = project_dir / ".focusnav" / "config.yaml"
        config_path.parent.mkdir()
        config_path.write_text("epsilon: 0.01\n")

        result = runner.invoke(init)

        assert result.exit_code == 0
        assert "Aborted" in result.output
        assert config_path.read_text() == "epsilon: 0.01\n"

    @patch("focusnav.cli.commands.initialize.Confirm.ask")
    def test_force_overwrites_without_prompt(self, mock_confirm, runner, project_dir):
        config_path = project_dir / ".focusnav" / "config.yaml"
        config_path.parent.mkdir()
        config_path.write_text("epsilon: 0.01\n")

        result = runner.invoke(init, ["--force"])

        assert result.exit_code == 0
        mock_confirm.assert_not_called()
        assert yaml.safe_load(config_path.read_text())["epsilon"] == 1e-6
