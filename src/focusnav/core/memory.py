"""
Last-focused-child memory.

The only mutation the engine performs: after the caller has moved focus,
every autofocus container between the focused node and the scope records
the focused id, so re-entering the container restores it.
"""

import logging
from typing import List, Optional

from .tree import TreeAdapter
from .types import FocusNode

logger = logging.getLogger(__name__)


def record_focus(
    tree: TreeAdapter,
    focused: FocusNode,
    scope: Optional[FocusNode] = None,
) -> List[FocusNode]:
    """
    Propagate ``focused`` into the memory of its autofocus ancestors.

    Walks up from the parent of ``focused``, stopping at (and excluding)
    ``scope``. The document root is never updated.

    Returns:
        The containers whose ``last_focused_child_id`` was written.
    """
    boundary = scope or tree.root
    root_id = tree.root.id
    updated: List[FocusNode] = []

    for ancestor in tree.ancestors(focused):
        if ancestor.id == boundary.id or ancestor.id == root_id:
            break
        if ancestor.is_container and ancestor.autofocus:
            ancestor.last_focused_child_id = focused.id
            updated.append(ancestor)

    if updated:
        logger.debug(
            "Recorded '%s' as last focus of %s",
            focused.id,
            ", ".join(c.id for c in updated),
        )
    return updated
