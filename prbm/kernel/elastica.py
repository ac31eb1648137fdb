# prbm/kernel/elastica.py
"""
Large-deflection elastica by RK4 integration and shooting.

The beam is inextensible and parametrized by arc length s in [0, L]:

    dx/ds = cos(theta)
    dy/ds = sin(theta)
    dtheta/ds = M(s) / EI

The tip loads are dead loads acting at the DEFORMED tip (a, b), so the
bending moment at a station depends on where the tip ends up:

    M(s) = P (a - x) + nP (b - y) + M0

(a, b) is unknown until the integration reaches s = L. We guess it, integrate,
and move the guess halfway toward the integrated tip until the two agree.
"""

import logging
from typing import Tuple

import numpy as np

from ..catalog import (
    SHOOTING_STEPS,
    SHOOTING_MAX_ITER,
    SHOOTING_TOL,
    SHOOTING_DAMPING,
)
from ..model import (
    BeamParameters,
    ConvergenceInfo,
    ModelResult,
    ModelType,
    Point,
    empty_result,
)

logger = logging.getLogger(__name__)


def _derivatives(state: np.ndarray, params: BeamParameters, a: float, b: float, EI: float) -> np.ndarray:
    """Right-hand side of the elastica system for state [x, y, theta]."""
    x, y, theta = state
    M = params.P * (a - x) + params.nP * (b - y) + params.M0
    return np.array([np.cos(theta), np.sin(theta), M / EI])


def integrate_elastica(
    params: BeamParameters,
    a: float,
    b: float,
    steps: int = SHOOTING_STEPS,
) -> np.ndarray:
    """
    Integrate from the clamp (x=0, y=0, theta=0) to s = L for a fixed tip guess.

    Args:
        params: Beam inputs (SI), EI must be non-zero
        a, b: Assumed deformed tip position (m)
        steps: Number of RK4 steps

    Returns:
        (steps + 1, 3) array of [x, y, theta] along the beam
    """
    EI = params.E * params.I
    ds = params.L / steps

    trajectory = np.zeros((steps + 1, 3), dtype=float)
    state = trajectory[0].copy()

    for i in range(steps):
        k1 = _derivatives(state, params, a, b, EI)
        k2 = _derivatives(state + k1 * ds / 2, params, a, b, EI)
        k3 = _derivatives(state + k2 * ds / 2, params, a, b, EI)
        k4 = _derivatives(state + k3 * ds, params, a, b, EI)
        state = state + (ds / 6) * (k1 + 2 * k2 + 2 * k3 + k4)
        trajectory[i + 1] = state

    return trajectory


def shoot_tip(params: BeamParameters) -> Tuple[np.ndarray, float, float, ConvergenceInfo]:
    """
    Damped fixed-point iteration on the deformed tip position.

    Returns:
        trajectory: last integration, (SHOOTING_STEPS + 1, 3)
        a, b: final tip guess (used for the root moment)
        info: iterations run and final residual
    """
    a = params.L
    b = 0.0
    trajectory = None
    residual = np.inf
    converged = False
    iterations = 0

    for iteration in range(SHOOTING_MAX_ITER):
        iterations = iteration + 1
        trajectory = integrate_elastica(params, a, b)

        error_x = trajectory[-1, 0] - a
        error_y = trajectory[-1, 1] - b
        residual = max(abs(error_x), abs(error_y))

        if abs(error_x) < SHOOTING_TOL and abs(error_y) < SHOOTING_TOL:
            converged = True
            break

        a += error_x * SHOOTING_DAMPING
        b += error_y * SHOOTING_DAMPING

    if converged:
        logger.debug("Shooting converged in %d iterations (residual %.3e)", iterations, residual)
    else:
        logger.debug("Shooting stopped after %d iterations (residual %.3e)", iterations, residual)

    info = ConvergenceInfo(iterations=iterations, residual=float(residual), converged=converged)
    return trajectory, a, b, info


def solve_nonlinear_beam(params: BeamParameters) -> ModelResult:
    """
    Large-deflection cantilever under dead tip loads.

    Args:
        params: Beam inputs (SI)

    Returns:
        ModelResult with the last integrated trajectory (SHOOTING_STEPS + 1
        points). Empty result when EI == 0. Non-convergence is reported only
        through result.convergence.
    """
    EI = params.E * params.I
    if EI == 0:
        return empty_result(ModelType.NONLINEAR)

    trajectory, a, b, info = shoot_tip(params)

    points = tuple(Point(float(x), float(y)) for x, y in trajectory[:, :2])
    tip = points[-1]
    root_moment = params.P * a + params.nP * b + params.M0

    return ModelResult(
        model=ModelType.NONLINEAR,
        points=points,
        tip_x=tip.x,
        tip_y=tip.y,
        tip_angle=float(trajectory[-1, 2]),
        max_stress=float(abs(root_moment * params.c / params.I)),
        convergence=info,
    )
