"""Unit tests for the focus tree."""

import pytest

from focusnav.core.exceptions import (
    CycleError,
    DuplicateNodeError,
    LayoutError,
    NodeNotFoundError,
)
from focusnav.core.tree import FocusTree, TreeAdapter, nearest_container
from focusnav.core.types import FocusNode


@pytest.fixture
def tree():
    """
    document
    ├── header (container)
    │   ├── logo
    │   └── search
    └── main (container)
        └── row (container)
            └── card
    """
    t = FocusTree(FocusNode(id="document", tab_rank=-1))
    t.add_node(FocusNode(id="header", is_container=True), "document")
    t.add_node(FocusNode(id="logo"), "header")
    t.add_node(FocusNode(id="search"), "header")
    t.add_node(FocusNode(id="main", is_container=True), "document")
    t.add_node(FocusNode(id="row", is_container=True), "main")
    t.add_node(FocusNode(id="card"), "row")
    return t.validate()


class TestConstruction:
    def test_duplicate_id(self, tree):
        with pytest.raises(DuplicateNodeError) as exc:
            tree.add_node(FocusNode(id="logo"), "header")
        assert exc.value.node_id == "logo"

    def test_unknown_parent(self, tree):
        with pytest.raises(NodeNotFoundError):
            tree.add_node(FocusNode(id="new"), "missing")

    def test_second_parent_rejected(self, tree):
        with pytest.raises(LayoutError, match="already has parent"):
            tree.attach("logo", "main")

    def test_root_cannot_be_attached(self, tree):
        with pytest.raises(LayoutError):
            tree.attach("document", "main")

    def test_self_parent_is_a_cycle(self):
        t = FocusTree(FocusNode(id="document"))
        t.add_node(FocusNode(id="loop", is_container=True))
        with pytest.raises(CycleError):
            t.attach("loop", "loop")

    def test_cycle_detected_on_validate(self):
        t = FocusTree(FocusNode(id="document"))
        t.add_node(FocusNode(id="a", is_container=True))
        t.add_node(FocusNode(id="b", is_container=True))
        t.attach("a", "b")
        t.attach("b", "a")

        with pytest.raises(CycleError) as exc:
            t.validate()
        assert set(exc.value.node_ids) == {"a", "b"}

    def test_orphans_detected_on_validate(self):
        t = FocusTree(FocusNode(id="document"))
        t.add_node(FocusNode(id="floating"))
        with pytest.raises(LayoutError, match="floating"):
            t.validate()

    def test_satisfies_adapter_protocol(self, tree):
        assert isinstance(tree, TreeAdapter)


class TestTraversal:
    def test_document_order(self, tree):
        ids = [n.id for n in tree.iter_nodes()]
        assert ids == ["document", "header", "logo", "search", "main", "row", "card"]

    def test_descendants_are_strict(self, tree):
        ids = [n.id for n in tree.iter_descendants(tree.get("main"))]
        assert ids == ["row", "card"]

    def test_prune_skips_whole_subtree(self, tree):
        ids = [
            n.id
            for n in tree.iter_descendants(tree.root, prune=lambda n: n.id == "header")
        ]
        assert ids == ["main", "row", "card"]

    def test_ancestors(self, tree):
        ids = [n.id for n in tree.ancestors(tree.get("card"))]
        assert ids == ["row", "main", "document"]

    def test_contains_is_strict(self, tree):
        main, card = tree.get("main"), tree.get("card")
        assert tree.contains(main, card)
        assert not tree.contains(card, main)
        assert not tree.contains(main, main)

    def test_lookup(self, tree):
        assert tree.get("search").id == "search"
        assert tree.get("nope") is None
        assert "card" in tree
        assert len(tree) == 7
        with pytest.raises(NodeNotFoundError):
            tree.require("nope")


class TestNearestContainer:
    def test_closest_container_wins(self, tree):
        assert nearest_container(tree, tree.get("card")).id == "row"
        assert nearest_container(tree, tree.get("row")).id == "main"

    def test_document_root_is_never_a_container(self, tree):
        assert nearest_container(tree, tree.get("main")) is None
        assert nearest_container(tree, None) is None
