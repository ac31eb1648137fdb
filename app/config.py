# app/config.py
"""
Application configuration and defaults.

Defaults and slider ranges are stored in SI and converted to the active
unit system for display.
"""

import os
from dataclasses import dataclass, field
from typing import List, Tuple

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from prbm.catalog import DEFAULT_MODELS
from prbm.model import ModelType
from prbm.units import INCH, LBF, LBF_IN, MPSI, UnitSystem


@dataclass
class AppConfig:
    """Global application configuration."""

    # App metadata
    app_name: str = "PRBM Beam Explorer"
    app_subtitle: str = "Pseudo-Rigid-Body Model vs Classical Beam Theories"
    version: str = "0.1.0"

    default_unit_system: UnitSystem = UnitSystem.ENGLISH

    # Section defaults (m): 1.25 in x 1/32 in strip, 0.5 in rod
    default_width: float = 1.25 * INCH
    default_height: float = 0.03125 * INCH
    default_diameter: float = 0.5 * INCH

    # Beam defaults: E = 30 Mpsi, L = 20 in, P = 0.5 lbf
    default_E: float = 30.0 * MPSI          # Pa
    default_L: float = 20.0 * INCH          # m
    default_P: float = 0.5 * LBF            # N
    default_nP: float = 0.0                 # N
    default_M0: float = 0.0                 # N·m

    # Slider ranges (SI)
    E_range: Tuple[float, float] = (1e9, 400e9)
    L_range: Tuple[float, float] = (0.05, 2.0)
    P_range: Tuple[float, float] = (-45 * LBF, 45 * LBF)
    nP_range: Tuple[float, float] = (-45 * LBF, 45 * LBF)
    M0_range: Tuple[float, float] = (-175 * LBF_IN, 175 * LBF_IN)

    # Models selected on first load
    default_models: List[ModelType] = None

    # Logging, overridable from the environment
    log_level: str = field(default_factory=lambda: os.environ.get("PRBM_LOG_LEVEL", "INFO"))
    trace_solvers: bool = field(
        default_factory=lambda: os.environ.get("PRBM_TRACE_SOLVERS", "") in ("1", "true", "yes")
    )

    def __post_init__(self):
        if self.default_models is None:
            self.default_models = list(DEFAULT_MODELS)


# Global config instance
CONFIG = AppConfig()
