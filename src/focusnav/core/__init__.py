"""
focusnav Core Module.

Core Types & Tree:
    - FocusNode, Rect, Direction: Node model
    - FocusTree, TreeAdapter, IdResolver: Containment tree and lookups

Engine:
    - discover: Candidate discovery within a scope
    - rank, score_candidates: Geometric ranking
    - FocusResolver: Block-exit and container resolution
    - record_focus: Last-focused-child memory
    - SpatialNavigator: Default and directional focus
"""

from .exceptions import (
    ConfigError,
    CycleError,
    DuplicateNodeError,
    FocusNavError,
    InvalidScopeError,
    LayoutError,
    NodeNotFoundError,
    UnknownDirectionError,
)
from .types import DecisionReason, Direction, FocusDecision, FocusNode, Point, Rect
from .tree import FocusTree, IdResolver, TreeAdapter, nearest_container
from .discovery import discover, first_focusable
from .ranking import ScoredCandidate, rank, score_candidates
from .resolver import FocusResolver
from .memory import record_focus
from .navigator import SpatialNavigator

__all__ = [
    "ConfigError",
    "CycleError",
    "DecisionReason",
    "Direction",
    "DuplicateNodeError",
    "FocusDecision",
    "FocusNavError",
    "FocusNode",
    "FocusResolver",
    "FocusTree",
    "IdResolver",
    "InvalidScopeError",
    "LayoutError",
    "NodeNotFoundError",
    "Point",
    "Rect",
    "ScoredCandidate",
    "SpatialNavigator",
    "TreeAdapter",
    "UnknownDirectionError",
    "discover",
    "first_focusable",
    "nearest_container",
    "rank",
    "record_focus",
    "score_candidates",
]
