"""Scenario tests for the spatial navigator."""

import pytest

from focusnav.core.exceptions import InvalidScopeError, NodeNotFoundError, UnknownDirectionError
from focusnav.core.navigator import SpatialNavigator
from focusnav.core.types import DecisionReason, Direction, FocusNode
from focusnav.layout import parse_layout


class TestGrid:
    @pytest.mark.parametrize("origin, direction, expected", [
        ("btn-1", "right", "btn-2"),
        ("btn-1", "down", "btn-3"),
        ("btn-2", "left", "btn-1"),
        ("btn-2", "down", "btn-4"),
        ("btn-4", "up", "btn-2"),
        ("btn-4", "left", "btn-3"),
        ("btn-3", "up", "btn-1"),
    ])
    def test_moves(self, grid_navigator, origin, direction, expected):
        decision = grid_navigator.get_next_focus(origin, direction)
        assert decision.node_id == expected
        assert decision.reason == DecisionReason.CANDIDATE
        assert decision.via_autofocus_parent is False

    @pytest.mark.parametrize("origin, direction", [
        ("btn-1", "left"),
        ("btn-1", "up"),
        ("btn-4", "right"),
        ("btn-4", "down"),
    ])
    def test_edges_keep_focus(self, grid_navigator, origin, direction):
        decision = grid_navigator.get_next_focus(origin, direction)
        assert not decision.matched
        assert decision.reason == DecisionReason.NO_CANDIDATES

    def test_default_focus_is_first_in_document_order(self, grid_navigator):
        decision = grid_navigator.get_default_focus()
        assert decision.node_id == "btn-1"

    def test_no_origin_delegates_to_default_focus(self, grid_navigator):
        assert grid_navigator.get_next_focus(None, Direction.RIGHT).node_id == "btn-1"

    def test_node_objects_are_accepted(self, grid_navigator, grid_tree):
        decision = grid_navigator.get_next_focus(grid_tree.get("btn-1"), Direction.DOWN)
        assert decision.node_id == "btn-3"

    def test_decisions_are_deterministic(self, grid_navigator):
        first = grid_navigator.get_next_focus("btn-1", "right")
        second = grid_navigator.get_next_focus("btn-1", "right")
        assert first.to_dict() == second.to_dict()

    def test_candidates_are_ordered(self, grid_navigator):
        scored = grid_navigator.candidates("btn-1", "right")
        assert [s.node.id for s in scored] == ["btn-2", "btn-4"]


class TestErrors:
    def test_unknown_scope(self, grid_navigator):
        with pytest.raises(InvalidScopeError):
            grid_navigator.get_next_focus("btn-1", "right", scope="nowhere")

    def test_detached_scope_node(self, grid_navigator):
        with pytest.raises(InvalidScopeError):
            grid_navigator.get_default_focus(FocusNode(id="detached"))

    def test_unknown_origin(self, grid_navigator):
        with pytest.raises(NodeNotFoundError):
            grid_navigator.get_next_focus("ghost", "right")

    def test_unknown_direction(self, grid_navigator):
        with pytest.raises(UnknownDirectionError):
            grid_navigator.get_next_focus("btn-1", "diagonal")


class TestAutofocusMemory:
    def test_first_entry_uses_document_order(self, menu_navigator):
        decision = menu_navigator.get_next_focus("content", "left")
        assert decision.node_id == "m1"
        assert decision.reason == DecisionReason.DOM_ORDER

    def test_reentry_restores_last_focus(self, menu_navigator):
        menu_navigator.record_focus("m3")
        decision = menu_navigator.get_next_focus("content", "left")
        assert decision.node_id == "m3"
        assert decision.reason == DecisionReason.LAST_FOCUSED
        assert decision.via_autofocus_parent is True

    def test_moves_inside_container_report_autofocus_parent(self, menu_navigator):
        decision = menu_navigator.get_next_focus("m1", "down")
        assert decision.node_id == "m2"
        assert decision.via_autofocus_parent is True

    def test_navigation_is_pure(self, menu_navigator):
        menu_navigator.get_next_focus("m1", "down")
        assert menu_navigator.tree.get("menu").last_focused_child_id is None


class TestDefaultFocus:
    def test_autofocus_container_entered_geometrically(self):
        navigator = SpatialNavigator(parse_layout({
            "nodes": [{
                "id": "panel", "container": True, "autofocus": True, "rect": [0, 0, 100, 150],
                "children": [
                    {"id": "low", "rect": [0, 100, 100, 150]},
                    {"id": "high", "rect": [0, 0, 100, 50]},
                ],
            }]
        }))
        decision = navigator.get_default_focus()
        assert decision.node_id == "high"
        assert decision.reason == DecisionReason.GEOMETRIC_ENTRY

    def test_autofocus_container_memory(self):
        navigator = SpatialNavigator(parse_layout({
            "nodes": [{
                "id": "panel", "container": True, "autofocus": True, "focus": "low",
                "rect": [0, 0, 100, 150],
                "children": [
                    {"id": "low", "rect": [0, 100, 100, 150]},
                    {"id": "high", "rect": [0, 0, 100, 50]},
                ],
            }]
        }))
        assert navigator.get_default_focus().node_id == "low"

    def test_tabbable_plain_container_first_keeps_focus(self):
        navigator = SpatialNavigator(parse_layout({
            "nodes": [{
                "id": "box", "container": True, "tabindex": 0, "rect": [0, 0, 100, 50],
                "children": [{"id": "inner", "rect": [0, 0, 100, 50]}],
            }]
        }))
        decision = navigator.get_default_focus()
        assert decision.node is None
        assert decision.reason == DecisionReason.EMPTY_CONTAINER

    def test_scope_restricts_default_focus(self, menu_navigator):
        assert menu_navigator.get_default_focus(scope="menu").node_id == "m1"

    def test_nothing_focusable(self):
        navigator = SpatialNavigator(parse_layout({"nodes": [{"id": "x", "ignore": True}]}))
        decision = navigator.get_default_focus()
        assert decision.reason == DecisionReason.NO_CANDIDATES


class TestScope:
    def test_scope_confines_search(self):
        navigator = SpatialNavigator(parse_layout({
            "nodes": [
                {"id": "dialog", "container": True, "children": [
                    {"id": "ok", "rect": [0, 0, 100, 50]},
                    {"id": "cancel", "rect": [100, 0, 200, 50]},
                ]},
                {"id": "behind", "rect": [300, 0, 400, 50]},
            ]
        }))
        assert navigator.get_next_focus("cancel", "right").node_id == "behind"
        decision = navigator.get_next_focus("cancel", "right", scope="dialog")
        assert decision.reason == DecisionReason.NO_CANDIDATES

    def test_record_focus_respects_scope(self, menu_navigator):
        updated = menu_navigator.record_focus("m2", scope="menu")
        assert updated == []
        assert menu_navigator.tree.get("menu").last_focused_child_id is None
