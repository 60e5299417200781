"""Shared layouts for the unit tests."""

import copy

import pytest

from focusnav.core.navigator import SpatialNavigator
from focusnav.layout import parse_layout


GRID_LAYOUT = {
    "nodes": [
        {"id": "btn-1", "rect": [0, 0, 100, 50]},
        {"id": "btn-2", "rect": [100, 0, 200, 50]},
        {"id": "btn-3", "rect": [0, 50, 100, 100]},
        {"id": "btn-4", "rect": [100, 50, 200, 100]},
    ]
}

# A vertical autofocus menu beside a single content button
MENU_LAYOUT = {
    "nodes": [
        {
            "id": "menu",
            "container": True,
            "autofocus": True,
            "rect": [0, 0, 100, 150],
            "children": [
                {"id": "m1", "rect": [0, 0, 100, 50]},
                {"id": "m2", "rect": [0, 50, 100, 100]},
                {"id": "m3", "rect": [0, 100, 100, 150]},
            ],
        },
        {"id": "content", "rect": [200, 0, 300, 150]},
    ]
}


@pytest.fixture
def grid_layout():
    return copy.deepcopy(GRID_LAYOUT)


@pytest.fixture
def menu_layout():
    return copy.deepcopy(MENU_LAYOUT)


@pytest.fixture
def grid_tree(grid_layout):
    return parse_layout(grid_layout)


@pytest.fixture
def grid_navigator(grid_tree):
    return SpatialNavigator(grid_tree)


@pytest.fixture
def menu_navigator(menu_layout):
    return SpatialNavigator(parse_layout(menu_layout))
