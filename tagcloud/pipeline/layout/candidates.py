"""Candidate starting points for the layout search."""

from __future__ import annotations

from typing import Iterator

from tagcloud.geometry import Point, Rectangle


class CandidatePoints:
    """An insertion-ordered, deduplicated set of search start points.

    Iteration order is the order points were first added, so ties between
    equally good candidates always resolve the same way.
    """

    def __init__(self) -> None:
        # dict keys keep insertion order and give O(1) membership.
        self._points: dict[Point, None] = {}

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(list(self._points))

    def __contains__(self, point: object) -> bool:
        return point in self._points

    def add(self, point: Point) -> bool:
        """Add *point*; return False when it was already present."""
        if point in self._points:
            return False
        self._points[point] = None
        return True

    def add_rectangle_anchors(self, rectangle: Rectangle) -> int:
        """Add the corners and edge midpoints of *rectangle*.

        Returns how many of the 8 anchors were new.
        """
        return sum(self.add(p) for p in rectangle.corners_and_midpoints())
