# prbm/kernel/linear.py
"""Closed-form small-deflection (Euler-Bernoulli) cantilever."""

import numpy as np

from ..catalog import LINEAR_STATIONS
from ..model import BeamParameters, ModelResult, ModelType, Point, empty_result


def solve_linear_beam(params: BeamParameters) -> ModelResult:
    """
    Superpose the textbook tip-force and tip-moment deflection curves.

        y(x) = P x² (3L - x) / (6EI) + M0 x² / (2EI)

    The horizontal force nP does not enter small-deflection bending, and the
    tip never moves horizontally: it is reported at (L, y(L)).

    Args:
        params: Beam inputs (SI)

    Returns:
        ModelResult with LINEAR_STATIONS + 1 equally spaced points. An empty
        result when EI == 0.
    """
    E, I, L, P, M0 = params.E, params.I, params.L, params.P, params.M0
    EI = E * I
    if EI == 0:
        return empty_result(ModelType.LINEAR)

    x = np.linspace(0.0, L, LINEAR_STATIONS + 1)
    y = (P * x**2 / (6 * EI)) * (3 * L - x) + (M0 * x**2) / (2 * EI)

    points = tuple(Point(float(xi), float(yi)) for xi, yi in zip(x, y))

    return ModelResult(
        model=ModelType.LINEAR,
        points=points,
        tip_x=L,
        tip_y=points[-1].y,
        tip_angle=(P * L * L) / (2 * EI) + (M0 * L) / EI,
        max_stress=abs((P * L + M0) * params.c / I),
    )
