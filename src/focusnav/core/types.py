"""
Core type definitions for focusnav.

The node model is deliberately renderer-agnostic: a ``FocusNode`` carries the
geometry and navigation attributes of one on-screen element, while the tree
structure lives in a ``TreeAdapter`` (see ``focusnav.core.tree``).
"""

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import UnknownDirectionError


class Direction(StrEnum):
    """Abstract directional input."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, value: object) -> "Direction":
        """Coerce a string (any case) or Direction, raising on anything else."""
        if isinstance(value, Direction):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownDirectionError(value) from None


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Point:
    """A point in the shared screen coordinate space."""
    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


class Rect(BaseModel):
    """
    Axis-aligned bounding box.

    Stored as edges; width and height are derived so they can never
    disagree with the edges.
    """
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_edges(self) -> "Rect":
        if self.right < self.left:
            raise ValueError(f"right ({self.right}) is less than left ({self.left})")
        if self.bottom < self.top:
            raise ValueError(f"bottom ({self.bottom}) is less than top ({self.top})")
        return self

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> "Rect":
        return cls(left=x, top=y, right=x + width, bottom=y + height)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def is_empty(self) -> bool:
        """True for a zero-area box that can never receive focus."""
        return self.width == 0 and self.height == 0

    @property
    def center(self) -> Point:
        return Point((self.left + self.right) / 2, (self.top + self.bottom) / 2)


class FocusNode(BaseModel):
    """
    A focusable element or container.

    Container-only attributes (autofocus, destinations, block_exit,
    last_focused_child_id) are rejected on plain elements.
    ``last_focused_child_id`` is the single mutable field the engine writes,
    through ``focusnav.core.memory.record_focus``.
    """
    id: str
    rect: Rect = Field(default_factory=Rect)
    tab_rank: int = 0
    is_container: bool = False
    autofocus: bool = False
    destinations: List[str] = Field(default_factory=list)
    block_exit: Set[Direction] = Field(default_factory=set)
    last_focused_child_id: Optional[str] = None
    ignored: bool = False
    overlap_threshold: Optional[float] = Field(default=None, ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=False, extra="ignore")

    @model_validator(mode="after")
    def _container_only_attributes(self) -> "FocusNode":
        if self.is_container:
            return self
        offending = [
            name
            for name, is_set in (
                ("autofocus", self.autofocus),
                ("destinations", bool(self.destinations)),
                ("block_exit", bool(self.block_exit)),
                ("last_focused_child_id", self.last_focused_child_id is not None),
            )
            if is_set
        ]
        if offending:
            raise ValueError(
                f"Node '{self.id}' is not a container but sets {', '.join(offending)}"
            )
        return self

    @property
    def is_focusable_container(self) -> bool:
        """A container that stands in for its subtree during discovery."""
        return self.is_container and (self.autofocus or len(self.destinations) > 0)

    @property
    def is_tabbable(self) -> bool:
        return self.tab_rank >= 0

    def blocks(self, direction: Direction) -> bool:
        return self.is_container and direction in self.block_exit

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, FocusNode):
            return self.id == other.id
        return False


class DecisionReason(StrEnum):
    """Why a navigation request produced the decision it did."""
    CANDIDATE = "candidate"
    DESTINATION = "destination"
    LAST_FOCUSED = "last_focused"
    DOM_ORDER = "dom_order"
    GEOMETRIC_ENTRY = "geometric_entry"
    STALE_DESTINATION = "stale_destination"
    BLOCKED = "blocked"
    NO_CANDIDATES = "no_candidates"
    EMPTY_CONTAINER = "empty_container"


class FocusDecision(BaseModel):
    """
    Outcome of a navigation request.

    ``node`` is the element that should receive focus next, or ``None`` for
    NoMatch (focus stays where it is). ``via_autofocus_parent`` tells the
    caller whether the chosen element's enclosing container remembers focus.
    """
    node: Optional[FocusNode] = None
    via_autofocus_parent: bool = False
    reason: DecisionReason = DecisionReason.CANDIDATE

    model_config = ConfigDict(frozen=True)

    @property
    def matched(self) -> bool:
        return self.node is not None

    @property
    def node_id(self) -> Optional[str]:
        return self.node.id if self.node is not None else None

    @classmethod
    def no_match(
        cls,
        reason: DecisionReason = DecisionReason.NO_CANDIDATES,
        via_autofocus_parent: bool = False,
    ) -> "FocusDecision":
        return cls(node=None, via_autofocus_parent=via_autofocus_parent, reason=reason)

    def to_dict(self) -> dict:
        """Stable JSON-friendly representation."""
        return {
            "node": self.node_id,
            "via_autofocus_parent": self.via_autofocus_parent,
            "reason": self.reason.value,
            "matched": self.matched,
        }
