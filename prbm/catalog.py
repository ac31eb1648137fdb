"""
CATALOG: MODEL CONSTANTS AND DISPLAY METADATA
==============================================

PURPOSE:
--------
This module collects every fixed number the beam models depend on, plus the
presentation metadata (label, color) for each model. Instead of scattering
0.8517 and 2.6706 through the solvers, we keep one table per model family
and reference it by name.

WHY THIS MATTERS:
-----------------
1. **One source of truth**: The PRB constants come from published tables
   (Howell's Handbook of Compliant Mechanisms, Su's 3R chain). A typo here
   changes every result, so they live in one place and are tested directly.

2. **Algorithm vs. presentation**: A ModelType says WHICH model to run.
   MODEL_STYLES says how to DISPLAY it. Renaming a legend entry never touches
   a solver.

ENGINEERING CONTEXT:
--------------------
- **gamma (characteristic radius)**: where along the beam the equivalent
  pivot sits, as a fraction of L measured from the fixed end.
- **K_theta (stiffness coefficient)**: converts EI/L into a torsional spring.
- **c_theta (parametric angle coefficient)**: maps the pivot rotation to the
  beam end slope.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

import numpy as np

from .model import ModelType


# =============================================================================
# PRB-1R (single pivot) LOAD CASES
# =============================================================================

class Prb1RLoadCase(Enum):
    """Handbook load case used to pick the PRB-1R constants."""
    VERTICAL_FORCE = "vertical_force"   # A.1.2
    COMBINED_FORCE = "combined_force"   # A.1.3
    MOMENT = "moment"                   # A.1.5


@dataclass(frozen=True)
class Prb1RConstants:
    gamma: float
    k_theta: float
    c_theta: float


PRB1R_VERTICAL_FORCE = Prb1RConstants(gamma=0.8517, k_theta=2.6706, c_theta=1.2407)
PRB1R_MOMENT = Prb1RConstants(gamma=0.7346, k_theta=1.5164, c_theta=1.0)

# Combined force: gamma depends on n = nP/P, K_theta and c_theta are fixed
PRB1R_COMBINED_K_THETA = 2.65
PRB1R_COMBINED_C_THETA = 1.24
PRB1R_GAMMA_BREAK = -1.83
PRB1R_GAMMA_MIN = 0.70
PRB1R_GAMMA_MAX = 0.95


def combined_force_gamma(n: float) -> float:
    """
    Characteristic radius for a tip force with horizontal ratio n = nP/P.

    Piecewise-linear fit split at n = -1.83, clamped to [0.70, 0.95].
    """
    if n > PRB1R_GAMMA_BREAK:
        gamma = 0.8521 - 0.0183 * n
    else:
        gamma = 0.9123 + 0.0146 * n
    return float(np.clip(gamma, PRB1R_GAMMA_MIN, PRB1R_GAMMA_MAX))


def prb1r_constants(load_case: Prb1RLoadCase, n: float = 0.0) -> Prb1RConstants:
    """Look up gamma, K_theta, c_theta for a load case."""
    if load_case is Prb1RLoadCase.VERTICAL_FORCE:
        return PRB1R_VERTICAL_FORCE
    if load_case is Prb1RLoadCase.COMBINED_FORCE:
        return Prb1RConstants(
            gamma=combined_force_gamma(n),
            k_theta=PRB1R_COMBINED_K_THETA,
            c_theta=PRB1R_COMBINED_C_THETA,
        )
    if load_case is Prb1RLoadCase.MOMENT:
        return PRB1R_MOMENT
    raise ValueError(f"Unknown PRB-1R load case: {load_case!r}")


# =============================================================================
# PRB-3R (Su table A.5.3)
# =============================================================================

# Link-length ratios g0..g3, fixed segment first. They sum to exactly 1.
SU_LINK_RATIOS: Tuple[float, float, float, float] = (0.10, 0.35, 0.40, 0.15)

# Nondimensional spring stiffness at joints 1..3
SU_STIFFNESS_COEFFS: Tuple[float, float, float] = (3.51, 2.99, 2.58)


# =============================================================================
# SOLVER BUDGETS
# =============================================================================

LINEAR_STATIONS = 50            # intervals, 51 points

SHOOTING_STEPS = 100            # RK4 steps per integration, 101 points
SHOOTING_MAX_ITER = 15
SHOOTING_TOL = 1e-6             # m
SHOOTING_DAMPING = 0.5

NEWTON_MAX_ITER = 30
NEWTON_TOL = 1e-8               # rad
NEWTON_DAMPING = 0.8

RELAXATION_ITER = 150
RELAXATION_FACTOR = 0.1
RELAXATION_TOL = 1e-6           # relative to the largest target rotation, diagnostic only


# =============================================================================
# DISPLAY METADATA
# =============================================================================

@dataclass(frozen=True)
class ModelStyle:
    """
    How a model is presented.

    rigid_links tells renderers to draw straight segments with joint markers
    instead of a smooth curve.
    """
    label: str
    description: str
    color: str
    rigid_links: bool


MODEL_STYLES: Dict[ModelType, ModelStyle] = {
    ModelType.LINEAR: ModelStyle(
        label="Linear",
        description="Linear Theory (Small Deflection)",
        color="#3b82f6",    # Blue
        rigid_links=False,
    ),
    ModelType.NONLINEAR: ModelStyle(
        label="Nonlinear",
        description="Nonlinear Theory (Numerical ODE)",
        color="#ef4444",    # Red
        rigid_links=False,
    ),
    ModelType.PRB_1R_VERTICAL: ModelStyle(
        label="PRB 1R (P)",
        description="PRB 1R: Cantilever Vertical Force (A.1.2)",
        color="#22c55e",    # Green
        rigid_links=True,
    ),
    ModelType.PRB_1R_COMBINED: ModelStyle(
        label="PRB 1R (nP)",
        description="PRB 1R: Cantilever General Force (A.1.3)",
        color="#f59e0b",    # Amber
        rigid_links=True,
    ),
    ModelType.PRB_1R_MOMENT: ModelStyle(
        label="PRB 1R (M)",
        description="PRB 1R: Applied Moment (A.1.5)",
        color="#ec4899",    # Pink
        rigid_links=True,
    ),
    ModelType.PRB_3R: ModelStyle(
        label="PRB 3R",
        description="PRB 3R: Combined Force-Moment (Su Table A.5.3)",
        color="#8b5cf6",    # Violet
        rigid_links=True,
    ),
}

# PRB-1R model selectors and the load case each one runs
PRB1R_MODELS: Dict[ModelType, Prb1RLoadCase] = {
    ModelType.PRB_1R_VERTICAL: Prb1RLoadCase.VERTICAL_FORCE,
    ModelType.PRB_1R_COMBINED: Prb1RLoadCase.COMBINED_FORCE,
    ModelType.PRB_1R_MOMENT: Prb1RLoadCase.MOMENT,
}

DEFAULT_MODELS = (
    ModelType.LINEAR,
    ModelType.NONLINEAR,
    ModelType.PRB_1R_COMBINED,
    ModelType.PRB_3R,
)

# Load magnitudes at or below this are drawn as "no load"
NO_LOAD_EPS = 1e-12
