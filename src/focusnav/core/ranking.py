"""
Geometric ranking of navigation candidates.

For a request leaving ``origin_rect`` in ``direction``:

- The exit point is the midpoint of the origin edge facing the direction.
- A candidate is valid only if its weighted entry point lies strictly
  beyond the exit point. The entry point sits ``overlap_threshold`` of the
  way into the candidate along the travel axis, so a candidate may overlap
  the origin by less than that fraction and still count as "ahead".
- Valid candidates are ordered by alignment delta (perpendicular offset of
  the nearest point), then distance, then discovery order. Alignment always
  dominates: a far but aligned candidate beats a near but offset one.
"""

import logging
from dataclasses import dataclass
from functools import cmp_to_key
from typing import List, Optional, Sequence

from ..config import DEFAULT_OVERLAP_THRESHOLD, EPSILON
from .types import Direction, FocusNode, Point, Rect

logger = logging.getLogger(__name__)

# Used as the origin when no element holds focus yet
EMPTY_RECT = Rect()


@dataclass
class ScoredCandidate:
    """A valid candidate with the metrics it was ranked by."""
    node: FocusNode
    alignment_delta: float
    distance: float
    order: int
    nearest: Point

    def to_dict(self) -> dict:
        return {
            "node": self.node.id,
            "alignment_delta": round(self.alignment_delta, 3),
            "distance": round(self.distance, 3),
            "nearest": [round(self.nearest.x, 3), round(self.nearest.y, 3)],
            "order": self.order,
        }


def exit_point(rect: Rect, direction: Direction) -> Point:
    """Midpoint of the edge of ``rect`` facing ``direction``."""
    if direction == Direction.LEFT:
        return Point(rect.left, (rect.top + rect.bottom) / 2)
    if direction == Direction.RIGHT:
        return Point(rect.right, (rect.top + rect.bottom) / 2)
    if direction == Direction.UP:
        return Point((rect.left + rect.right) / 2, rect.top)
    return Point((rect.left + rect.right) / 2, rect.bottom)


def weighted_entry_point(rect: Rect, direction: Direction, threshold: float) -> Point:
    """Point ``threshold`` of the way into ``rect`` from its near edge."""
    if direction == Direction.LEFT:
        x_factor, y_factor = 1 - threshold, 0.5
    elif direction == Direction.RIGHT:
        x_factor, y_factor = threshold, 0.5
    elif direction == Direction.UP:
        x_factor, y_factor = 0.5, 1 - threshold
    else:
        x_factor, y_factor = 0.5, threshold
    return Point(rect.left + rect.width * x_factor, rect.top + rect.height * y_factor)


def is_valid_candidate(
    rect: Rect,
    direction: Direction,
    exit_at: Point,
    threshold: Optional[float] = None,
) -> bool:
    """True if ``rect`` is non-empty and lies ahead of ``exit_at``."""
    if rect.is_empty:
        return False
    if threshold is None:
        threshold = DEFAULT_OVERLAP_THRESHOLD

    entry = weighted_entry_point(rect, direction, threshold)
    if direction == Direction.LEFT:
        return exit_at.x > entry.x
    if direction == Direction.RIGHT:
        return entry.x > exit_at.x
    if direction == Direction.UP:
        return exit_at.y > entry.y
    return entry.y > exit_at.y


def nearest_point(point: Point, direction: Direction, rect: Rect) -> Point:
    """
    Point of ``rect`` a move from ``point`` in ``direction`` reaches first.

    The travel axis snaps to the near edge; the perpendicular coordinate is
    kept when it falls within the rect, else clamped to the nearest corner.
    """
    if direction.is_horizontal:
        x = rect.right if direction == Direction.LEFT else rect.left
        y = min(max(point.y, rect.top), rect.bottom)
        return Point(x, y)

    y = rect.bottom if direction == Direction.UP else rect.top
    x = min(max(point.x, rect.left), rect.right)
    return Point(x, y)


def score_candidates(
    candidates: Sequence[FocusNode],
    origin_rect: Optional[Rect],
    direction: Direction,
    default_threshold: float = DEFAULT_OVERLAP_THRESHOLD,
    epsilon: float = EPSILON,
) -> List[ScoredCandidate]:
    """
    Filter invalid candidates and return the rest scored, best first.

    Args:
        candidates: Nodes in discovery order.
        origin_rect: Bounding box being left, or None for no current focus.
        direction: Direction of travel.
        default_threshold: Overlap threshold for nodes that set none.
        epsilon: Tolerance below which two metrics are considered equal.
    """
    exit_at = exit_point(origin_rect or EMPTY_RECT, direction)

    scored: List[ScoredCandidate] = []
    for order, node in enumerate(candidates):
        threshold = node.overlap_threshold
        if threshold is None:
            threshold = default_threshold
        if not is_valid_candidate(node.rect, direction, exit_at, threshold):
            continue

        nearest = nearest_point(exit_at, direction, node.rect)
        if direction.is_horizontal:
            alignment_delta = abs(exit_at.y - nearest.y)
        else:
            alignment_delta = abs(exit_at.x - nearest.x)

        scored.append(ScoredCandidate(
            node=node,
            alignment_delta=alignment_delta,
            distance=exit_at.distance_to(nearest),
            order=order,
            nearest=nearest,
        ))

    def compare(a: ScoredCandidate, b: ScoredCandidate) -> int:
        alignment_diff = a.alignment_delta - b.alignment_delta
        if abs(alignment_diff) > epsilon:
            return -1 if alignment_diff < 0 else 1
        distance_diff = a.distance - b.distance
        if abs(distance_diff) > epsilon:
            return -1 if distance_diff < 0 else 1
        return a.order - b.order

    scored.sort(key=cmp_to_key(compare))
    logger.debug(
        "Ranked %d of %d candidates moving %s from %s",
        len(scored), len(candidates), direction, exit_at,
    )
    return scored


def rank(
    candidates: Sequence[FocusNode],
    origin_rect: Optional[Rect],
    direction: Direction,
    default_threshold: float = DEFAULT_OVERLAP_THRESHOLD,
    epsilon: float = EPSILON,
) -> List[FocusNode]:
    """Valid candidates ordered best first."""
    return [
        scored.node
        for scored in score_candidates(
            candidates, origin_rect, direction, default_threshold, epsilon
        )
    ]
