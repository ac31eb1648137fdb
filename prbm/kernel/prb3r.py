# prbm/kernel/prb3r.py
"""Three-spring pseudo-rigid-body chain (PRB-3R, Su table A.5.3)."""

import logging
from typing import Tuple

import numpy as np

from ..catalog import (
    RELAXATION_FACTOR,
    RELAXATION_ITER,
    RELAXATION_TOL,
    SU_LINK_RATIOS,
    SU_STIFFNESS_COEFFS,
)
from ..model import (
    BeamParameters,
    ConvergenceInfo,
    ModelResult,
    ModelType,
    Point,
    Prb3RParameters,
    empty_result,
)

logger = logging.getLogger(__name__)


def chain_points(L: float, angles: np.ndarray) -> np.ndarray:
    """
    Positions of the 5 chain points for joint rotations [T1, T2, T3].

    Link k after the fixed segment is oriented at the cumulative rotation
    T1 + ... + Tk.

    Returns:
        (5, 2) array: clamp, joints 1..3, tip
    """
    lengths = L * np.asarray(SU_LINK_RATIOS)
    headings = np.concatenate(([0.0], np.cumsum(angles)))

    pts = np.zeros((5, 2), dtype=float)
    for k in range(4):
        pts[k + 1, 0] = pts[k, 0] + lengths[k] * np.cos(headings[k])
        pts[k + 1, 1] = pts[k, 1] + lengths[k] * np.sin(headings[k])
    return pts


def _joint_moments(params: BeamParameters, angles: np.ndarray) -> np.ndarray:
    """Moment of the tip loads about joints 1..3 at the chain geometry for `angles`."""
    pts = chain_points(params.L, angles)
    a, b = pts[4]
    joints = pts[1:4]
    return params.P * (a - joints[:, 0]) + params.nP * (b - joints[:, 1]) + params.M0


def solve_joint_angles(params: BeamParameters, K: np.ndarray) -> Tuple[np.ndarray, ConvergenceInfo]:
    """
    Under-relaxed successive substitution for the joint rotations.

    Each pass moves every rotation 10% of the way toward M_i / K_i, where
    M_i is the moment of the tip loads about joint i at the current
    geometry. The pass count is fixed.

    The residual max|M_i / K_i - T_i| is evaluated on the returned angles.
    It counts as converged when it is within RELAXATION_TOL of the largest
    target rotation.
    """
    angles = np.zeros(3, dtype=float)

    for _ in range(RELAXATION_ITER):
        correction = _joint_moments(params, angles) / K - angles
        angles = angles + RELAXATION_FACTOR * correction

    targets = _joint_moments(params, angles) / K
    residual = float(np.max(np.abs(targets - angles)))
    converged = residual <= RELAXATION_TOL * float(np.max(np.abs(targets)))

    logger.debug("PRB-3R relaxation: %d passes, residual %.3e", RELAXATION_ITER, residual)
    return angles, ConvergenceInfo(iterations=RELAXATION_ITER, residual=residual, converged=converged)


def solve_prb3r(params: BeamParameters) -> ModelResult:
    """
    Solve the PRB-3R chain.

    Args:
        params: Beam inputs (SI)

    Returns:
        ModelResult with 5 points (clamp, three joints, tip), tip angle
        T1 + T2 + T3 and Prb3RParameters diagnostics. Empty result when
        EI == 0.
    """
    EI = params.E * params.I
    if EI == 0:
        return empty_result(ModelType.PRB_3R)

    K = np.asarray(SU_STIFFNESS_COEFFS) * (EI / params.L)
    angles, info = solve_joint_angles(params, K)

    pts = chain_points(params.L, angles)
    points = tuple(Point(float(x), float(y)) for x, y in pts)

    return ModelResult(
        model=ModelType.PRB_3R,
        points=points,
        tip_x=points[-1].x,
        tip_y=points[-1].y,
        tip_angle=float(np.sum(angles)),
        max_stress=0.0,
        prb_params=Prb3RParameters(
            links=SU_LINK_RATIOS,
            stiffness_coeffs=SU_STIFFNESS_COEFFS,
            stiffness=tuple(float(k) for k in K),
        ),
        convergence=info,
    )
