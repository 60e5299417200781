"""
focusnav - Spatial navigation for remote-controlled UIs.

Decides which element receives focus when a directional key (up, down,
left, right) is pressed on a device without a pointer: TVs, set-top boxes,
consoles.

Key Components:
- core: Node model, focus tree and the navigation engine
- keymap: Key code -> direction table
- session: Key-handler glue that moves and records focus
- layout: YAML/JSON render-tree snapshots
- cli: Command-line interface
"""

from .core import (
    DecisionReason,
    Direction,
    FocusDecision,
    FocusNode,
    FocusTree,
    Rect,
    SpatialNavigator,
    record_focus,
)
from .config import NavigatorConfig, StaleDestinationPolicy, load_config
from .keymap import KeyMap
from .layout import load_layout, parse_layout
from .session import FocusSession

__version__ = "0.1.0"

__all__ = [
    "DecisionReason",
    "Direction",
    "FocusDecision",
    "FocusNode",
    "FocusSession",
    "FocusTree",
    "KeyMap",
    "NavigatorConfig",
    "Rect",
    "SpatialNavigator",
    "StaleDestinationPolicy",
    "load_config",
    "load_layout",
    "parse_layout",
    "record_focus",
]
