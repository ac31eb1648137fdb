# prbm/kernel/prb1r.py
"""
Single-pivot pseudo-rigid-body (PRB-1R) cantilever.

The flexible beam is replaced by a rigid stub of length (1 - gamma) L along
the original axis, a torsional spring K, and a rigid link of length gamma L:

    fixed ●━━━━━━━━○ pivot (spring K)
                     ╲
                      ╲  gamma L, rotated by Theta
                       ● tip

Moment balance about the pivot with the loads acting at the moved tip:

    f(Theta) = K Theta - (P gamma L cos(Theta) + nP gamma L sin(Theta) + M0) = 0
"""

import logging

import numpy as np

from ..catalog import (
    NEWTON_DAMPING,
    NEWTON_MAX_ITER,
    NEWTON_TOL,
    PRB1R_MODELS,
    Prb1RLoadCase,
    prb1r_constants,
)
from ..model import (
    BeamParameters,
    ConvergenceInfo,
    ModelResult,
    Point,
    Prb1RParameters,
    empty_result,
)

logger = logging.getLogger(__name__)

_MODEL_FOR_CASE = {case: model for model, case in PRB1R_MODELS.items()}


def load_ratio(P: float, nP: float) -> float:
    """n = nP / P, defined as 0 when there is no vertical force."""
    return nP / P if P != 0 else 0.0


def solve_pivot_angle(K: float, params: BeamParameters, gamma: float):
    """
    Damped Newton-Raphson for the pivot rotation Theta, starting from 0.

    Returns:
        (Theta, ConvergenceInfo). The last iterate is returned when the step
        never drops below NEWTON_TOL or the derivative vanishes.
    """
    P, nP, M0 = params.P, params.nP, params.M0
    arm = gamma * params.L

    theta = 0.0
    step = np.inf
    converged = False
    iterations = 0

    for iteration in range(NEWTON_MAX_ITER):
        iterations = iteration + 1
        f = K * theta - (P * arm * np.cos(theta) + nP * arm * np.sin(theta) + M0)
        df = K + P * arm * np.sin(theta) - nP * arm * np.cos(theta)
        if df == 0:
            logger.debug("PRB-1R Newton hit a zero derivative at Theta=%.6f", theta)
            break

        delta = f / df
        theta -= delta * NEWTON_DAMPING
        step = abs(delta)
        if step < NEWTON_TOL:
            converged = True
            break

    logger.debug("PRB-1R Newton: %d iterations, last step %.3e", iterations, step)
    return float(theta), ConvergenceInfo(iterations=iterations, residual=float(step), converged=converged)


def solve_prb1r(params: BeamParameters, load_case: Prb1RLoadCase) -> ModelResult:
    """
    Solve the PRB-1R model for one handbook load case.

    Args:
        params: Beam inputs (SI)
        load_case: Which set of gamma / K_theta / c_theta to use

    Returns:
        ModelResult with 3 points (clamp, pivot, tip), tip angle c_theta * Theta
        and Prb1RParameters diagnostics. Empty result when EI == 0.
    """
    model = _MODEL_FOR_CASE[load_case]
    EI = params.E * params.I
    if EI == 0:
        return empty_result(model)

    L = params.L
    n = load_ratio(params.P, params.nP)
    constants = prb1r_constants(load_case, n)
    gamma = constants.gamma

    K = gamma * constants.k_theta * (EI / L)
    theta, info = solve_pivot_angle(K, params, gamma)

    pivot_x = L * (1 - gamma)
    a = pivot_x + gamma * L * np.cos(theta)
    b = gamma * L * np.sin(theta)

    return ModelResult(
        model=model,
        points=(Point(0.0, 0.0), Point(pivot_x, 0.0), Point(float(a), float(b))),
        tip_x=float(a),
        tip_y=float(b),
        tip_angle=constants.c_theta * theta,
        max_stress=0.0,
        prb_params=Prb1RParameters(
            gamma=gamma,
            k_theta=constants.k_theta,
            c_theta=constants.c_theta,
            stiffness=K,
            n=n,
        ),
        convergence=info,
    )
