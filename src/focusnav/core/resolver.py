"""
Navigation and container resolution.

Turns a ranked candidate list into a single focus decision.

Resolution Strategy:
    1. Block-exit: if the origin's container blocks the requested direction,
       only the best candidate is considered, and only if it is a plain
       element of that same container. Anything else is a NoMatch.
    2. Plain candidates are returned as they are.
    3. Focusable containers are entered:
        a. First destination id that exists anywhere in the tree
        b. Stale destinations on a non-autofocus container fall back
           according to ``StaleDestinationPolicy``
        c. Autofocus containers restore their last focused child
        d. Otherwise a default child, by document order or geometry
"""

import logging
from typing import Optional, Sequence

from ..config import NavigatorConfig, StaleDestinationPolicy
from .discovery import discover, first_focusable
from .ranking import rank
from .tree import IdResolver, TreeAdapter, nearest_container
from .types import DecisionReason, Direction, FocusDecision, FocusNode

logger = logging.getLogger(__name__)


class FocusResolver:
    """
    Resolves ranked candidates and containers into focus decisions.

    Attributes:
        tree: Containment tree used for ancestry and discovery.
        config: Navigator settings (thresholds, fallback policy).
        ids: Global id lookup for destinations and focus memory. Defaults
            to the tree itself.
    """

    def __init__(
        self,
        tree: TreeAdapter,
        config: Optional[NavigatorConfig] = None,
        ids: Optional[IdResolver] = None,
    ):
        self.tree = tree
        self.config = config or NavigatorConfig()
        self.ids = ids or tree

    def resolve(
        self,
        ranked: Sequence[FocusNode],
        origin: Optional[FocusNode],
        direction: Direction,
    ) -> FocusDecision:
        """
        Pick the next focus from ``ranked`` (best first).

        Args:
            ranked: Output of ``rank``.
            origin: The currently focused node, if any.
            direction: Requested direction.
        """
        if not ranked:
            return FocusDecision.no_match(DecisionReason.NO_CANDIDATES)

        best = ranked[0]
        origin_container = nearest_container(self.tree, origin)

        if origin_container is not None and origin_container.blocks(direction):
            if not best.is_container:
                best_container = nearest_container(self.tree, best)
                if best_container is not None and best_container.id == origin_container.id:
                    return FocusDecision(
                        node=best,
                        via_autofocus_parent=origin_container.autofocus,
                        reason=DecisionReason.CANDIDATE,
                    )
            logger.debug(
                "Exit %s from '%s' is blocked (best candidate '%s')",
                direction, origin_container.id, best.id,
            )
            return FocusDecision.no_match(DecisionReason.BLOCKED)

        if best.is_focusable_container:
            return self.resolve_container(origin, direction, best, dom_order_as_default=True)

        container = nearest_container(self.tree, best)
        return FocusDecision(
            node=best,
            via_autofocus_parent=container is not None and container.autofocus,
            reason=DecisionReason.CANDIDATE,
        )

    def resolve_container(
        self,
        origin: Optional[FocusNode],
        direction: Direction,
        container: FocusNode,
        dom_order_as_default: bool,
    ) -> FocusDecision:
        """
        Find the element that should receive focus when entering ``container``.

        Args:
            origin: The currently focused node, if any.
            direction: Direction the container is entered from.
            container: The container being entered.
            dom_order_as_default: When nothing is remembered, take the first
                focusable child in document order (True) or the child the
                geometric search picks (False).
        """
        via_autofocus = container.autofocus

        if container.destinations:
            for destination_id in container.destinations:
                target = self.ids.get(destination_id)
                if target is not None:
                    logger.debug("Container '%s' routes to destination '%s'", container.id, target.id)
                    return FocusDecision(
                        node=target,
                        via_autofocus_parent=via_autofocus,
                        reason=DecisionReason.DESTINATION,
                    )

            if not container.autofocus:
                logger.debug(
                    "No destination of '%s' exists (%s), policy=%s",
                    container.id,
                    " ".join(container.destinations),
                    self.config.stale_destination_policy,
                )
                if self.config.stale_destination_policy == StaleDestinationPolicy.NO_MATCH:
                    return FocusDecision.no_match(DecisionReason.STALE_DESTINATION)
                return self._enter_geometrically(origin, direction, container)

        if container.autofocus:
            remembered = None
            if container.last_focused_child_id is not None:
                remembered = self.ids.get(container.last_focused_child_id)
            if remembered is not None:
                return FocusDecision(
                    node=remembered,
                    via_autofocus_parent=True,
                    reason=DecisionReason.LAST_FOCUSED,
                )

            if dom_order_as_default:
                node = first_focusable(self.tree, container)
                if node is None:
                    return FocusDecision.no_match(DecisionReason.EMPTY_CONTAINER, via_autofocus_parent=True)
                return FocusDecision(node=node, via_autofocus_parent=True, reason=DecisionReason.DOM_ORDER)

            return self._enter_geometrically(origin, direction, container)

        return FocusDecision.no_match(DecisionReason.EMPTY_CONTAINER, via_autofocus_parent=via_autofocus)

    def _enter_geometrically(
        self,
        origin: Optional[FocusNode],
        direction: Direction,
        container: FocusNode,
    ) -> FocusDecision:
        """Treat ``container`` as a scope and navigate into it from ``origin``."""
        candidates = discover(self.tree, None, container)
        ranked = rank(
            candidates,
            origin.rect if origin is not None else None,
            direction,
            self.config.default_overlap_threshold,
            self.config.epsilon,
        )
        decision = self.resolve(ranked, origin, direction)

        if not decision.matched and decision.reason != DecisionReason.BLOCKED:
            return FocusDecision.no_match(
                DecisionReason.EMPTY_CONTAINER,
                via_autofocus_parent=container.autofocus,
            )
        if decision.reason == DecisionReason.CANDIDATE:
            return decision.model_copy(update={"reason": DecisionReason.GEOMETRIC_ENTRY})
        return decision
