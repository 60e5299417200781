"""
Candidate discovery.

Enumerates the nodes inside a scope that may receive focus for one
navigation request:

1. Descendants of the scope, in document order.
2. Ignored nodes are dropped together with their whole subtree.
3. A node qualifies if it is a focusable container or has ``tab_rank >= 0``.
4. Containers holding the current focus are never candidates themselves.
5. A focusable container collapses its subtree into a single candidate;
   plain containers do not, so their children stay individually eligible.
"""

import logging
from typing import List, Optional

from .tree import TreeAdapter
from .types import FocusNode

logger = logging.getLogger(__name__)


def _is_ignored(node: FocusNode) -> bool:
    return node.ignored


def _qualifies(node: FocusNode) -> bool:
    return node.is_focusable_container or node.is_tabbable


def discover(
    tree: TreeAdapter,
    origin: Optional[FocusNode],
    scope: FocusNode,
) -> List[FocusNode]:
    """
    Collect navigation candidates inside ``scope``.

    Args:
        tree: The containment tree.
        origin: The currently focused node, or None when establishing focus.
        scope: The node whose descendants are searched.

    Returns:
        Candidates in document order. Empty when nothing qualifies.
    """
    focusables = [
        node
        for node in tree.iter_descendants(scope, prune=_is_ignored)
        if _qualifies(node)
    ]

    if origin is not None:
        focusables = [
            node
            for node in focusables
            if not (
                node.is_container
                and (node.id == origin.id or tree.contains(node, origin))
            )
        ]

    collapsing = [node for node in focusables if node.is_focusable_container]
    if not collapsing:
        return focusables

    candidates = [
        node
        for node in focusables
        if not any(tree.contains(container, node) for container in collapsing)
    ]
    logger.debug(
        "Discovered %d candidates in '%s' (%d collapsed into focusable containers)",
        len(candidates),
        scope.id,
        len(focusables) - len(candidates),
    )
    return candidates


def first_focusable(tree: TreeAdapter, container: FocusNode) -> Optional[FocusNode]:
    """First tabbable, non-ignored descendant of ``container`` in document order."""
    for node in tree.iter_descendants(container, prune=_is_ignored):
        if node.is_tabbable:
            return node
    return None
