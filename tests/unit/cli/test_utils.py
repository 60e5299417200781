"""Unit tests for CLI utilities."""

import json

import pytest

from focusnav.cli.utils import emit_json, load_navigator, run_guarded
from focusnav.core.exceptions import ConfigError, LayoutError, NodeNotFoundError


class TestUtils:
    def test_load_navigator(self, grid_file):
        navigator = load_navigator(grid_file)
        assert navigator.get_default_focus().node_id == "btn-1"

    def test_load_navigator_with_config(self, grid_file, tmp_path):
        config = tmp_path / "nav.yaml"
        config.write_text("stale_destination_policy: no_match\n")
        navigator = load_navigator(grid_file, str(config))
        assert navigator.config.stale_destination_policy == "no_match"

    def test_load_navigator_missing_config(self, grid_file, tmp_path):
        with pytest.raises(ConfigError):
            load_navigator(grid_file, str(tmp_path / "missing.yaml"))

    def test_load_navigator_bad_layout(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("nodes: [{id: a}, {id: a}]\n")
        with pytest.raises(LayoutError):
            load_navigator(str(path))

    def test_emit_json_envelope(self, capsys):
        emit_json("next", {"node": "btn-2"})
        envelope = json.loads(capsys.readouterr().out)
        assert envelope == {
            "command": "next",
            "status": "success",
            "data": {"node": "btn-2"},
            "error": None,
        }

    def test_run_guarded_returns_result(self):
        assert run_guarded("next", False, lambda: 42) == 42

    def test_run_guarded_exits_on_engine_error(self, capsys):
        def fail():
            raise NodeNotFoundError("ghost")

        with pytest.raises(SystemExit) as exc:
            run_guarded("next", False, fail)
        assert exc.value.code == 1
        assert "Node 'ghost' not found" in capsys.readouterr().err

    def test_run_guarded_json_error(self, capsys):
        def fail():
            raise NodeNotFoundError("ghost")

        with pytest.raises(SystemExit):
            run_guarded("next", True, fail)
        envelope = json.loads(capsys.readouterr().out)
        assert envelope["status"] == "error"
        assert "ghost" in envelope["error"]
