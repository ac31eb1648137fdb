# BeamParameters, Point, ModelResult and the PRB diagnostic records

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

import numpy as np


class ModelType(Enum):
    """Closed set of beam models. Display metadata lives in catalog.MODEL_STYLES."""
    LINEAR = "linear"
    NONLINEAR = "nonlinear"
    PRB_1R_VERTICAL = "prb_1r_vertical"
    PRB_1R_COMBINED = "prb_1r_combined"
    PRB_1R_MOMENT = "prb_1r_moment"
    PRB_3R = "prb_3r"


class BeamParameterError(ValueError):
    """Raised when beam inputs are non-finite or physically impossible."""
    pass


@dataclass(frozen=True)
class BeamParameters:
    """
    Cantilever beam inputs, all SI.

    Parameters:
    -----------
    E : float
        Elastic modulus (Pa)
    I : float
        Second moment of area (m^4). Zero is allowed and yields the
        degenerate (empty) result from every model.
    L : float
        Beam length (m), must be positive
    P : float
        Vertical tip force (N)
    nP : float
        Horizontal tip force (N). Stored as a force, not as the ratio n.
    M0 : float
        Applied tip moment (N·m)
    c : float
        Distance from the neutral axis to the extreme fiber (m)
    A : float
        Cross-section area (m^2). Not used by the solvers.
    """
    E: float
    I: float
    L: float
    P: float = 0.0
    nP: float = 0.0
    M0: float = 0.0
    c: float = 0.0
    A: float = 0.0

    def __post_init__(self):
        for name in ('E', 'I', 'L', 'P', 'nP', 'M0', 'c', 'A'):
            value = getattr(self, name)
            if not np.isfinite(value):
                raise BeamParameterError(f"{name} must be finite, got {value!r}")
        if self.L <= 0:
            raise BeamParameterError(f"L must be positive, got {self.L}")
        for name in ('E', 'I', 'c', 'A'):
            if getattr(self, name) < 0:
                raise BeamParameterError(f"{name} must be non-negative, got {getattr(self, name)}")

    @property
    def EI(self) -> float:
        """Flexural rigidity (N·m^2)."""
        return self.E * self.I

    @classmethod
    def from_section(cls, E: float, L: float, section, P: float = 0.0,
                     nP: float = 0.0, M0: float = 0.0) -> "BeamParameters":
        """Build parameters from a `SectionProperties` (see prbm.section)."""
        return cls(E=E, I=section.I, L=L, P=P, nP=nP, M0=M0, c=section.c, A=section.A)


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Prb1RParameters:
    """Diagnostics of the single-pivot pseudo-rigid-body model."""
    gamma: float        # characteristic radius (fraction of L)
    k_theta: float      # nondimensional stiffness coefficient
    c_theta: float      # tip-angle correction factor
    stiffness: float    # physical spring constant K (N·m/rad)
    n: float            # load ratio nP/P used to pick gamma


@dataclass(frozen=True)
class Prb3RParameters:
    """Diagnostics of the three-spring pseudo-rigid-body chain."""
    links: Tuple[float, float, float, float]
    stiffness_coeffs: Tuple[float, float, float]
    stiffness: Tuple[float, float, float]  # K1..K3 (N·m/rad)


PrbParameters = Union[Prb1RParameters, Prb3RParameters]


@dataclass(frozen=True)
class ConvergenceInfo:
    """
    Optional iteration diagnostic.

    Solvers never raise on non-convergence; they return their last iterate
    and describe it here.
    """
    iterations: int
    residual: float
    converged: bool


@dataclass(frozen=True)
class ModelResult:
    """
    Deflected shape and tip state produced by one model.

    points is a dense polyline for continuum models and the joint list for
    rigid-link models. label and color are looked up from the catalog.
    """
    model: ModelType
    points: Tuple[Point, ...]
    tip_x: float
    tip_y: float
    tip_angle: float
    max_stress: float = 0.0
    prb_params: Optional[PrbParameters] = None
    convergence: Optional[ConvergenceInfo] = None

    @property
    def label(self) -> str:
        from .catalog import MODEL_STYLES
        return MODEL_STYLES[self.model].label

    @property
    def color(self) -> str:
        from .catalog import MODEL_STYLES
        return MODEL_STYLES[self.model].color

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0

    def as_array(self) -> np.ndarray:
        """Polyline as an (n, 2) array of [x, y]."""
        if not self.points:
            return np.zeros((0, 2), dtype=float)
        return np.array([[p.x, p.y] for p in self.points], dtype=float)


def empty_result(model: ModelType) -> ModelResult:
    """Sentinel for a beam with no bending stiffness (EI == 0)."""
    return ModelResult(
        model=model,
        points=(),
        tip_x=0.0,
        tip_y=0.0,
        tip_angle=0.0,
        max_stress=0.0,
    )
