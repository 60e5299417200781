"""
Spatial navigator: the public entry point of the engine.

Wires discovery, ranking and resolution into the two navigation
operations, plus the memory update callers run after moving focus.

Example:
    ```python
    navigator = SpatialNavigator(load_layout("home.yaml"))
    decision = navigator.get_next_focus("btn-1", "right")
    if decision.matched:
        move_focus(decision.node)
        navigator.record_focus(decision.node)
    ```
"""

import logging
from typing import List, Optional, Union

from ..config import NavigatorConfig
from .discovery import discover
from .exceptions import InvalidScopeError, NodeNotFoundError
from .memory import record_focus
from .ranking import ScoredCandidate, score_candidates
from .resolver import FocusResolver
from .tree import IdResolver, TreeAdapter
from .types import DecisionReason, Direction, FocusDecision, FocusNode

logger = logging.getLogger(__name__)

NodeRef = Union[FocusNode, str]


class SpatialNavigator:
    """
    Resolves directional focus moves over a focus tree.

    The navigator holds no focus state of its own. Every call is a pure
    computation over the current tree except ``record_focus``, which writes
    container memory and must be called only after focus actually moved.
    Calls are expected to be serialized: a new request should not start
    before the previous move has been recorded.

    Attributes:
        tree: The containment tree (validated on construction when the
            adapter supports it).
        config: Navigator settings.
        resolver: The underlying ``FocusResolver``.
    """

    def __init__(
        self,
        tree: TreeAdapter,
        config: Optional[NavigatorConfig] = None,
        ids: Optional[IdResolver] = None,
    ):
        validate = getattr(tree, "validate", None)
        if callable(validate):
            validate()
        self.tree = tree
        self.config = config or NavigatorConfig()
        self.resolver = FocusResolver(tree, self.config, ids)

    # --- public operations ---

    def get_default_focus(
        self,
        scope: Optional[NodeRef] = None,
        direction: Optional[Union[Direction, str]] = None,
    ) -> FocusDecision:
        """
        Establish focus inside ``scope`` when nothing is focused yet.

        The first candidate in document order wins. If it is a container,
        it is entered using destinations, memory, or the geometrically
        first child for ``direction`` (the configured entry direction when
        None). A plain container has none of these, so focus stays put.
        """
        scope_node = self._resolve_scope(scope)
        entry = (
            Direction.parse(direction)
            if direction is not None
            else self.config.default_entry_direction
        )

        candidates = discover(self.tree, None, scope_node)
        if not candidates:
            logger.debug("No focusable candidates in scope '%s'", scope_node.id)
            return FocusDecision.no_match(DecisionReason.NO_CANDIDATES)

        first = candidates[0]
        if first.is_container:
            return self.resolver.resolve_container(None, entry, first, dom_order_as_default=False)
        return FocusDecision(node=first, via_autofocus_parent=False, reason=DecisionReason.CANDIDATE)

    def get_next_focus(
        self,
        origin: Optional[NodeRef],
        direction: Union[Direction, str],
        scope: Optional[NodeRef] = None,
    ) -> FocusDecision:
        """
        Find the node that should receive focus after moving ``direction``.

        Args:
            origin: Currently focused node (or its id). None delegates to
                ``get_default_focus``.
            direction: One of up, down, left, right.
            scope: Node (or id) the search is confined to. Defaults to the
                document root.

        Raises:
            InvalidScopeError: If ``scope`` is not part of the tree.
            NodeNotFoundError: If ``origin`` is not part of the tree.
            UnknownDirectionError: If ``direction`` is not a direction.
        """
        direction = Direction.parse(direction)
        if origin is None:
            return self.get_default_focus(scope, direction)

        origin_node = self.resolve_node(origin)
        scope_node = self._resolve_scope(scope)

        ranked = [scored.node for scored in self._score(origin_node, direction, scope_node)]
        decision = self.resolver.resolve(ranked, origin_node, direction)
        logger.debug(
            "Move %s from '%s' -> %s (%s)",
            direction, origin_node.id, decision.node_id, decision.reason,
        )
        return decision

    def candidates(
        self,
        origin: Optional[NodeRef],
        direction: Union[Direction, str],
        scope: Optional[NodeRef] = None,
    ) -> List[ScoredCandidate]:
        """Ranked candidates with their metrics, for diagnostics."""
        direction = Direction.parse(direction)
        origin_node = self.resolve_node(origin) if origin is not None else None
        return self._score(origin_node, direction, self._resolve_scope(scope))

    def record_focus(self, focused: NodeRef, scope: Optional[NodeRef] = None) -> List[FocusNode]:
        """Update autofocus container memory after focus moved to ``focused``."""
        focused_node = self.resolve_node(focused)
        scope_node = self._resolve_scope(scope)
        return record_focus(self.tree, focused_node, scope_node)

    def resolve_node(self, ref: NodeRef) -> FocusNode:
        """Look up a node (or id), raising NodeNotFoundError if absent."""
        node_id = ref if isinstance(ref, str) else ref.id
        node = self.tree.get(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        return node

    # --- helpers ---

    def _score(
        self,
        origin: Optional[FocusNode],
        direction: Direction,
        scope: FocusNode,
    ) -> List[ScoredCandidate]:
        focusables = discover(self.tree, origin, scope)
        return score_candidates(
            focusables,
            origin.rect if origin is not None else None,
            direction,
            self.config.default_overlap_threshold,
            self.config.epsilon,
        )

    def _resolve_scope(self, scope: Optional[NodeRef]) -> FocusNode:
        if scope is None:
            return self.tree.root
        scope_id = scope if isinstance(scope, str) else scope.id
        node = self.tree.get(scope_id)
        if node is None:
            raise InvalidScopeError(scope_id)
        return node
