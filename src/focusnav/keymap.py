"""
Key -> direction mapping.

Translates raw input symbols (DOM key names, numeric key codes sent by TV
remotes and set-top boxes) into abstract directions. The table is plain
configuration and can be replaced wholesale.
"""

from typing import Dict, Mapping, Optional, Union

from .core.types import Direction

Key = Union[str, int]

# Remote-control key codes across common TV platforms, plus DOM key names.
DEFAULT_KEY_MAP: Dict[str, Direction] = {
    **{code: Direction.LEFT for code in ("4", "21", "37", "205", "214", "218", "ArrowLeft")},
    **{code: Direction.RIGHT for code in ("5", "22", "39", "206", "213", "217", "ArrowRight")},
    **{code: Direction.UP for code in ("19", "38", "203", "211", "215", "29460", "ArrowUp")},
    **{code: Direction.DOWN for code in ("20", "40", "204", "212", "216", "29461", "ArrowDown")},
}


class KeyMap:
    """
    Replaceable lookup table from key symbol to direction.

    Keys are normalized to strings, so ``37`` and ``"37"`` are the same key.

    Example:
        ```python
        keys = KeyMap()
        keys.lookup(37)            # Direction.LEFT
        keys.lookup("ArrowDown")   # Direction.DOWN
        keys.lookup("Enter")       # None
        ```
    """

    def __init__(self, table: Optional[Mapping[Key, Union[Direction, str]]] = None):
        source = DEFAULT_KEY_MAP if table is None else table
        self._table: Dict[str, Direction] = {
            str(key): Direction.parse(value) for key, value in source.items()
        }

    def lookup(self, key: Key) -> Optional[Direction]:
        """Direction for ``key``, or None if the key does not navigate."""
        return self._table.get(str(key))

    def replace(self, table: Mapping[Key, Union[Direction, str]]) -> None:
        """Swap in a new table. The old one is discarded entirely."""
        self._table = {str(key): Direction.parse(value) for key, value in table.items()}

    def keys_for(self, direction: Direction) -> list:
        return [key for key, value in self._table.items() if value == direction]

    def __contains__(self, key: Key) -> bool:
        return str(key) in self._table

    def __len__(self) -> int:
        return len(self._table)
