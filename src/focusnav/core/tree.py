"""
Focus tree: the structural view the navigation engine reads.

The engine only talks to the ``TreeAdapter`` protocol, so any concrete
render backend (a live widget toolkit, a DOM bridge, a test fixture) can
drive it. ``FocusTree`` is the in-memory implementation used by the layout
loader, the CLI and the tests.

It manages:
- The id -> node table used for destination and last-focus lookups.
- Ordered child lists, which define document (traversal) order.
- A rustworkx containment graph used to validate the structure
  (acyclic, single root, no orphans).
"""

import logging
from typing import Callable, Dict, Iterator, List, Optional, Protocol, runtime_checkable

import rustworkx as rx

from .exceptions import CycleError, DuplicateNodeError, LayoutError, NodeNotFoundError
from .types import FocusNode

logger = logging.getLogger(__name__)


@runtime_checkable
class IdResolver(Protocol):
    """Global id -> node lookup used for destinations and focus memory."""

    def get(self, node_id: str) -> Optional[FocusNode]:
        ...


@runtime_checkable
class TreeAdapter(IdResolver, Protocol):
    """Read access to a rooted containment tree of focus nodes."""

    @property
    def root(self) -> FocusNode:
        ...

    def parent(self, node: FocusNode) -> Optional[FocusNode]:
        ...

    def children(self, node: FocusNode) -> List[FocusNode]:
        ...

    def iter_descendants(
        self,
        node: FocusNode,
        prune: Optional[Callable[[FocusNode], bool]] = None,
    ) -> Iterator[FocusNode]:
        ...

    def ancestors(self, node: FocusNode) -> Iterator[FocusNode]:
        ...

    def contains(self, ancestor: FocusNode, node: FocusNode) -> bool:
        ...


class FocusTree:
    """
    In-memory containment tree backed by rustworkx.

    Nodes can be added with their parent directly or attached afterwards,
    which is how flat render-tree dumps (``parent`` references in any order)
    are loaded. Call ``validate()`` once the tree is assembled.

    Example:
        ```python
        tree = FocusTree(FocusNode(id="document"))
        tree.add_node(FocusNode(id="menu", is_container=True, autofocus=True), "document")
        tree.add_node(FocusNode(id="home", rect=Rect(left=0, top=0, right=100, bottom=40)), "menu")
        tree.validate()
        ```
    """

    def __init__(self, root: FocusNode):
        self._graph = rx.PyDiGraph(multigraph=False)
        self._nodes: Dict[str, FocusNode] = {}
        self._id_to_idx: Dict[str, int] = {}
        self._parent: Dict[str, str] = {}
        self._children: Dict[str, List[str]] = {}
        self._root_id = root.id
        self.add_node(root)

    # --- construction ---

    def add_node(self, node: FocusNode, parent_id: Optional[str] = None) -> FocusNode:
        """Register a node, optionally attaching it under ``parent_id``."""
        if node.id in self._nodes:
            raise DuplicateNodeError(node.id)

        self._nodes[node.id] = node
        self._id_to_idx[node.id] = self._graph.add_node(node.id)
        self._children[node.id] = []

        if parent_id is not None:
            self.attach(node.id, parent_id)
        return node

    def attach(self, child_id: str, parent_id: str) -> None:
        """Make ``parent_id`` the parent of ``child_id`` (appended last)."""
        self.require(child_id)
        self.require(parent_id)
        if child_id == self._root_id:
            raise LayoutError(f"Root node '{child_id}' cannot have a parent")
        if child_id in self._parent:
            raise LayoutError(
                f"Node '{child_id}' already has parent '{self._parent[child_id]}'"
            )
        if child_id == parent_id:
            raise CycleError([child_id, child_id])

        self._parent[child_id] = parent_id
        self._children[parent_id].append(child_id)
        self._graph.add_edge(self._id_to_idx[parent_id], self._id_to_idx[child_id], None)

    def validate(self) -> "FocusTree":
        """
        Check the containment relation is a proper rooted tree.

        Raises:
            CycleError: If the parent relation loops.
            LayoutError: If a node is not reachable from the root.
        """
        if not rx.is_directed_acyclic_graph(self._graph):
            cycle = next(iter(rx.simple_cycles(self._graph)), [])
            ids = [self._graph[idx] for idx in cycle]
            if ids:
                ids.append(ids[0])
            raise CycleError(ids)

        orphans = [
            node_id
            for node_id in self._nodes
            if node_id != self._root_id and node_id not in self._parent
        ]
        if orphans:
            raise LayoutError(f"Nodes without a parent: {', '.join(sorted(orphans))}")

        logger.debug("Validated focus tree with %d nodes", len(self._nodes))
        return self

    # --- lookup ---

    @property
    def root(self) -> FocusNode:
        return self._nodes[self._root_id]

    def get(self, node_id: str) -> Optional[FocusNode]:
        """Retrieve a node by id anywhere in the tree."""
        if node_id is None:
            return None
        return self._nodes.get(node_id)

    def require(self, node_id: str) -> FocusNode:
        node = self._nodes.get(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        return node

    def iter_nodes(self) -> Iterator[FocusNode]:
        """All nodes in document order, root first."""
        yield self.root
        yield from self.iter_descendants(self.root)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._nodes

    # --- structure ---

    def parent(self, node: FocusNode) -> Optional[FocusNode]:
        parent_id = self._parent.get(node.id)
        return self._nodes[parent_id] if parent_id is not None else None

    def children(self, node: FocusNode) -> List[FocusNode]:
        return [self._nodes[child_id] for child_id in self._children.get(node.id, [])]

    def iter_descendants(
        self,
        node: FocusNode,
        prune: Optional[Callable[[FocusNode], bool]] = None,
    ) -> Iterator[FocusNode]:
        """
        Yield the strict descendants of ``node`` in document (pre-)order.

        Any descendant for which ``prune`` returns True is skipped together
        with its whole subtree.
        """
        stack = list(reversed(self._children.get(node.id, [])))
        while stack:
            current = self._nodes[stack.pop()]
            if prune is not None and prune(current):
                continue
            yield current
            stack.extend(reversed(self._children[current.id]))

    def ancestors(self, node: FocusNode) -> Iterator[FocusNode]:
        """Yield parent, grandparent, ... up to and including the root."""
        parent_id = self._parent.get(node.id)
        while parent_id is not None:
            yield self._nodes[parent_id]
            parent_id = self._parent.get(parent_id)

    def contains(self, ancestor: FocusNode, node: FocusNode) -> bool:
        """True if ``node`` is a strict descendant of ``ancestor``."""
        return any(a.id == ancestor.id for a in self.ancestors(node))


def nearest_container(tree: TreeAdapter, node: Optional[FocusNode]) -> Optional[FocusNode]:
    """
    First container ancestor of ``node``.

    The document root is the boundary and is never returned, mirroring how
    a page body is never a navigation container.
    """
    if node is None:
        return None
    root = tree.root
    for ancestor in tree.ancestors(node):
        if ancestor.id == root.id:
            return None
        if ancestor.is_container:
            return ancestor
    return None
