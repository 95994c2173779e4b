"""Local minimizers used to refine a candidate position.

The layout engine only needs ``minimize(objective, start) -> Point``.  Any
callable with that shape can be injected into the builder, including
deterministic stubs in tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import numpy as np
from scipy.optimize import minimize

from tagcloud.config import LAYOUT_RULES, LayoutRules
from tagcloud.geometry import Point

from .penalty import Objective


log = logging.getLogger(__name__)


class Minimizer(Protocol):
    """Unconstrained 2-D local minimizer."""

    def __call__(self, objective: Objective, start: Point) -> Point:
        ...


@dataclass(frozen=True)
class NelderMeadMinimizer:
    """Derivative-free descent via ``scipy.optimize.minimize``.

    The keep-out penalties make the objective piecewise linear with huge
    slopes, so a gradient-free simplex method is used.  The initial
    simplex spans *initial_step* pixels along each axis; scipy's default
    simplex scales with the coordinates and collapses near the origin.
    """

    initial_step: float = LAYOUT_RULES.minimizer_initial_step
    xatol: float = LAYOUT_RULES.minimizer_xatol
    fatol: float = LAYOUT_RULES.minimizer_fatol
    max_iterations: int = LAYOUT_RULES.minimizer_max_iterations
    max_evaluations: int = LAYOUT_RULES.minimizer_max_evaluations

    @classmethod
    def from_rules(cls, rules: LayoutRules) -> NelderMeadMinimizer:
        return cls(
            initial_step=rules.minimizer_initial_step,
            xatol=rules.minimizer_xatol,
            fatol=rules.minimizer_fatol,
            max_iterations=rules.minimizer_max_iterations,
            max_evaluations=rules.minimizer_max_evaluations,
        )

    def __call__(self, objective: Objective, start: Point) -> Point:
        x0 = np.array([start.x, start.y], dtype=float)
        simplex = np.array([
            x0,
            x0 + [self.initial_step, 0.0],
            x0 + [0.0, self.initial_step],
        ])
        result = minimize(
            lambda v: objective(v[0], v[1]),
            x0,
            method="Nelder-Mead",
            options={
                "initial_simplex": simplex,
                "xatol": self.xatol,
                "fatol": self.fatol,
                "maxiter": self.max_iterations,
                "maxfev": self.max_evaluations,
            },
        )
        if not result.success:
            log.debug("Nelder-Mead from (%.2f, %.2f): %s",
                      start.x, start.y, result.message)

        # Never hand back a point worse than the start.
        if float(result.fun) > objective(start.x, start.y):
            return start
        return Point(float(result.x[0]), float(result.x[1]))
