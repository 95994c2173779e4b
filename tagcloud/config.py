"""Shared tuning constants for the word layout engine.

The layout engine (candidate search, penalty weighting) and the numeric
minimizer it drives both read their parameters from this single source of
truth.  Pass a custom :class:`LayoutRules` to the builder to override them
for one cloud.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutRules:
    """Tuning parameters for the circular word layout.

    All distances are in pixels.
    """

    penalty_weight: float = 1e15
    """Cost per pixel of depth inside a keep-out region.  Large enough that
    any overlap dwarfs the distance-to-center term."""

    minimizer_initial_step: float = 1.0
    """Edge length of the initial Nelder–Mead simplex around a candidate
    point."""

    minimizer_xatol: float = 1e-4
    """Absolute point tolerance for minimizer convergence."""

    minimizer_fatol: float = 1e-4
    """Absolute objective tolerance for minimizer convergence."""

    minimizer_max_iterations: int = 400
    """Iteration cap per minimizer run."""

    build_timeout_s: float | None = None
    """Wall-clock budget for one build.  None means unbounded."""

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def minimizer_max_evaluations(self) -> int:
        """Objective evaluation cap per minimizer run.

        Nelder–Mead in 2-D spends at most a shrink step (3 evaluations)
        plus a reflection per iteration.
        """
        return self.minimizer_max_iterations * 4


# Module-level singleton, importable everywhere.
LAYOUT_RULES = LayoutRules()
