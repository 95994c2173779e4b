"""Objective and penalty functions for the layout search.

A candidate is scored by the *center* of the word's rectangle.  Every
placed rectangle, inflated by half the new word's size, becomes a
keep-out region: the set of centers that would make the new rectangle
overlap it.  Positions inside a keep-out region cost
``depth * penalty_weight``; positions outside cost nothing.
"""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from tagcloud.geometry import Point, Rectangle, Size

from .models import PENALTY_WEIGHT


# objective(x, y) -> cost
Objective = Callable[[float, float], float]


def distance_objective(center: Point) -> Objective:
    """Squared Euclidean distance from a candidate center to *center*."""
    cx, cy = center.x, center.y

    def distance(x: float, y: float) -> float:
        return (x - cx) * (x - cx) + (y - cy) * (y - cy)

    return distance


def keep_out_region(placed: Rectangle, size: Size) -> Rectangle:
    """Centers at which a rectangle of *size* would overlap *placed*."""
    return placed.inflate(size.width / 2, size.height / 2)


def penalty_function(
    region: Rectangle, weight: float = PENALTY_WEIGHT,
) -> Objective:
    """Soft cost that is zero outside *region* and huge inside it.

    Depth is the Chebyshev distance to the nearest edge of the region.
    """
    left, right = region.left, region.right
    top, bottom = region.top, region.bottom

    def penalty(x: float, y: float) -> float:
        max_x = max(left - x, x - right)
        max_y = max(top - y, y - bottom)
        raw = min(0.0, max(max_x, max_y))
        if raw < 0:
            raw *= -weight
        return raw

    return penalty


def build_penalty_functions(
    placed: Sequence[Rectangle],
    size: Size,
    weight: float = PENALTY_WEIGHT,
) -> list[Objective]:
    """One penalty function per placed rectangle for a word of *size*."""
    return [penalty_function(keep_out_region(r, size), weight) for r in placed]


class PenaltyField:
    """Sum of all keep-out penalties, evaluated in one vectorized pass.

    Equivalent to summing :func:`build_penalty_functions`, but the cost
    of one evaluation stays flat as the cloud grows, which matters
    because the minimizer calls it hundreds of times per candidate.
    """

    def __init__(
        self,
        placed: Sequence[Rectangle],
        size: Size,
        weight: float = PENALTY_WEIGHT,
    ) -> None:
        regions = [keep_out_region(r, size) for r in placed]
        self.weight = weight
        self._left = np.array([r.left for r in regions], dtype=float)
        self._right = np.array([r.right for r in regions], dtype=float)
        self._top = np.array([r.top for r in regions], dtype=float)
        self._bottom = np.array([r.bottom for r in regions], dtype=float)

    def __len__(self) -> int:
        return len(self._left)

    def __call__(self, x: float, y: float) -> float:
        if not len(self._left):
            return 0.0
        max_x = np.maximum(self._left - x, x - self._right)
        max_y = np.maximum(self._top - y, y - self._bottom)
        raw = np.minimum(0.0, np.maximum(max_x, max_y))
        return float(-raw.sum() * self.weight)


def combined_objective(distance: Objective, penalties: Objective) -> Objective:
    """Distance-to-center plus all keep-out penalties."""

    def objective(x: float, y: float) -> float:
        return distance(x, y) + penalties(x, y)

    return objective
