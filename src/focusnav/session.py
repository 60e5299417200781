"""
Focus session: caller-side glue around the navigator.

Plays the role of a device key handler. It owns the "currently focused"
node, asks the navigator where to go, moves focus on a match and then
records the move so autofocus containers remember it. Keeping the
record step here, right after the move, gives the serialized
navigate -> move -> record order the engine relies on.
"""

import logging
from typing import List, Optional, Union

from .core.navigator import NodeRef, SpatialNavigator
from .core.types import Direction, FocusDecision, FocusNode
from .keymap import Key, KeyMap

logger = logging.getLogger(__name__)


class FocusSession:
    """
    Tracks focus over a sequence of key presses.

    Attributes:
        navigator: Engine used to resolve moves.
        keymap: Key -> direction table.
        scope: Node (or id) navigation is confined to.
        current: The focused node, or None before ``start``.
        history: Ids of every node that received focus, in order.
    """

    def __init__(
        self,
        navigator: SpatialNavigator,
        keymap: Optional[KeyMap] = None,
        scope: Optional[NodeRef] = None,
    ):
        self.navigator = navigator
        self.keymap = keymap or KeyMap(navigator.config.key_map)
        self.scope = scope
        self.current: Optional[FocusNode] = None
        self.history: List[str] = []

    def start(self, initial: Optional[NodeRef] = None) -> Optional[FocusNode]:
        """Focus ``initial`` if given, else the default focus of the scope."""
        if initial is not None:
            self._focus(self.navigator.resolve_node(initial))
            return self.current

        decision = self.navigator.get_default_focus(self.scope)
        if decision.matched:
            self._focus(decision.node)
        return self.current

    def handle_key(self, key: Key) -> Optional[FocusDecision]:
        """
        Process one key press.

        Returns:
            The navigator's decision, or None if the key is not a direction.
        """
        direction = self.keymap.lookup(key)
        if direction is None:
            logger.debug("Ignoring non-directional key %r", key)
            return None
        return self.move(direction)

    def move(self, direction: Union[Direction, str]) -> FocusDecision:
        """Move focus one step in ``direction`` if a target exists."""
        decision = self.navigator.get_next_focus(self.current, direction, self.scope)
        if decision.matched:
            self._focus(decision.node)
        return decision

    def _focus(self, node: FocusNode) -> None:
        self.current = node
        self.history.append(node.id)
        self.navigator.record_focus(node, self.scope)
