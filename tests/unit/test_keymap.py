"""Unit tests for the key map."""

import pytest

from focusnav.core.exceptions import UnknownDirectionError
from focusnav.core.types import Direction
from focusnav.keymap import DEFAULT_KEY_MAP, KeyMap


class TestDefaultKeyMap:
    @pytest.mark.parametrize("key, direction", [
        (37, Direction.LEFT),
        ("ArrowLeft", Direction.LEFT),
        (218, Direction.LEFT),
        (39, Direction.RIGHT),
        (22, Direction.RIGHT),
        (38, Direction.UP),
        (29460, Direction.UP),
        (40, Direction.DOWN),
        ("29461", Direction.DOWN),
        ("ArrowDown", Direction.DOWN),
    ])
    def test_remote_codes(self, key, direction):
        assert KeyMap().lookup(key) == direction

    def test_unknown_key(self):
        keys = KeyMap()
        assert keys.lookup("Enter") is None
        assert keys.lookup(13) is None
        assert 13 not in keys

    def test_each_direction_has_seven_keys(self):
        keys = KeyMap()
        for direction in Direction:
            assert len(keys.keys_for(direction)) == 7
        assert len(keys) == len(DEFAULT_KEY_MAP) == 28


class TestReplacement:
    def test_custom_table_replaces_defaults(self):
        keys = KeyMap({"h": "left", "l": "right"})
        assert keys.lookup("h") == Direction.LEFT
        assert keys.lookup(37) is None
        assert len(keys) == 2

    def test_replace(self):
        keys = KeyMap()
        keys.replace({1: Direction.UP})
        assert keys.lookup("1") == Direction.UP
        assert "ArrowUp" not in keys

    def test_invalid_direction(self):
        with pytest.raises(UnknownDirectionError):
            KeyMap({"x": "sideways"})
