"""Circular word layout: penalty-guided local search with hard overlap checks."""

from __future__ import annotations

import logging
import math
import time

from tagcloud.config import LAYOUT_RULES, LayoutRules
from tagcloud.geometry import Point, Rectangle, Size, rectangle_centered_at

from .candidates import CandidatePoints
from .minimizer import Minimizer, NelderMeadMinimizer
from .models import (
    WordEntry, WordRectangle, LayoutResult, LayoutError,
    EmptySizeError, DuplicateWordError, PlacementFailedError,
    LayoutTimeoutError,
)
from .penalty import Objective, PenaltyField, combined_objective, distance_objective


log = logging.getLogger(__name__)


class CircularLayoutBuilder:
    """Places words around a center point without overlaps.

    Words are placed in the order they were added, so callers normally add
    the largest (most frequent) words first.  The first word is centered
    exactly on the build center.  Every later word is refined from each
    candidate point (corners and edge midpoints of words already placed)
    by a local minimizer over distance-to-center plus keep-out penalties.
    The best candidate that truly does not overlap anything wins.

    Not thread-safe: use one builder per worker.
    """

    def __init__(
        self,
        *,
        minimizer: Minimizer | None = None,
        rules: LayoutRules = LAYOUT_RULES,
    ) -> None:
        self.rules = rules
        self.minimizer = minimizer or NelderMeadMinimizer.from_rules(rules)
        self._words: dict[str, Size] = {}

    def __len__(self) -> int:
        return len(self._words)

    @property
    def words(self) -> tuple[WordEntry, ...]:
        """Pending words in placement order."""
        return tuple(WordEntry(w, s) for w, s in self._words.items())

    # ── Public API ─────────────────────────────────────────────────

    def add_word(self, word: str, size: Size) -> LayoutResult[None]:
        """Register *word* with its measured *size* for the next build."""
        if size.is_empty:
            return LayoutResult.failure(EmptySizeError(word, size))
        if word in self._words:
            return LayoutResult.failure(DuplicateWordError(word))
        self._words[word] = size
        return LayoutResult.success()

    def build(self, center: Point) -> LayoutResult[list[WordRectangle]]:
        """Place every pending word around *center*.

        The pending words are left untouched whether the build succeeds
        or fails, so a caller can retry with another center or fewer
        words.

        Parameters
        ----------
        center : Point
            Target point; the first word is centered on it and every
            other word is pulled towards it.

        Returns
        -------
        LayoutResult[list[WordRectangle]]
            All placements in add order, or the first failure:
            PlacementFailedError when no candidate fits a word,
            LayoutTimeoutError when ``rules.build_timeout_s`` runs out.
        """
        distance = distance_objective(center)
        placed: list[Rectangle] = []
        candidates = CandidatePoints()
        output: list[WordRectangle] = []
        started = time.monotonic()

        for entry in self.words:
            try:
                rect = self._place(entry, center, distance, placed,
                                   candidates, started)
            except LayoutError as exc:
                log.warning("Layout aborted after %d/%d words: %s",
                            len(output), len(self._words), exc)
                return LayoutResult.failure(exc)

            placed.append(rect)
            candidates.add_rectangle_anchors(rect)
            output.append(WordRectangle(entry.word, rect))

        return LayoutResult.success(output)

    def clear(self) -> None:
        """Forget all pending words."""
        self._words.clear()

    # ── Search ─────────────────────────────────────────────────────

    def _place(
        self,
        entry: WordEntry,
        center: Point,
        distance: Objective,
        placed: list[Rectangle],
        candidates: CandidatePoints,
        started: float,
    ) -> Rectangle:
        if not placed:
            rect = rectangle_centered_at(center, entry.size)
            log.info("Placed '%s' at (%.1f, %.1f) (first word, centered)",
                     entry.word, rect.left, rect.top)
            return rect

        penalties = PenaltyField(placed, entry.size, self.rules.penalty_weight)
        objective = combined_objective(distance, penalties)
        budget = self.rules.build_timeout_s

        best_rect: Rectangle | None = None
        best_value = math.inf

        for start in candidates:
            if budget is not None and time.monotonic() - started >= budget:
                raise LayoutTimeoutError(entry.word, budget)

            point = self.minimizer(objective, start)
            value = objective(point.x, point.y)
            if value >= best_value:
                continue

            # Hard constraint: the penalty only steers the search, the
            # geometric test decides.
            rect = rectangle_centered_at(point, entry.size)
            if any(rect.intersects_with(p) for p in placed):
                log.debug("'%s': candidate from (%.1f, %.1f) -> (%.2f, %.2f) "
                          "overlaps a placed word", entry.word,
                          start.x, start.y, point.x, point.y)
                continue

            best_rect = rect
            best_value = value

        if best_rect is None:
            raise PlacementFailedError(entry.word, len(candidates))

        log.info("Placed '%s' at (%.1f, %.1f) objective=%.2f",
                 entry.word, best_rect.left, best_rect.top, best_value)
        return best_rect
