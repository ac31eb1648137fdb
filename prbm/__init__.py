# prbm - Pseudo-Rigid-Body vs. classical cantilever models
"""
PRBM: CANTILEVER DEFLECTION, FOUR WAYS
======================================

This package computes the deflected shape of a cantilever beam under a tip
force (vertical P, horizontal nP) and a tip moment M0 with four models:

- Linear theory (small deflection, closed form)
- Nonlinear theory (elastica, RK4 + shooting)
- PRB 1R (one pivot + torsional spring, three handbook load cases)
- PRB 3R (three springs in a chain, Su table)

ARCHITECTURE:
-------------
    model.py        BeamParameters, Point, ModelResult, diagnostics
    catalog.py      Model constants, solver budgets, display metadata
    kernel/         The four solvers (pure functions)
    solve.py        ModelType -> solver dispatch
    compare.py      Run a selection, tabulate error vs. Nonlinear
    section.py      Rectangular / circular section properties
    units.py        SI <-> English conversion
    viz.py          Matplotlib plots
"""

from .model import (
    BeamParameters,
    BeamParameterError,
    ConvergenceInfo,
    ModelResult,
    ModelType,
    Point,
    Prb1RParameters,
    Prb3RParameters,
)
from .catalog import MODEL_STYLES, DEFAULT_MODELS, Prb1RLoadCase
from .kernel import solve_linear_beam, solve_nonlinear_beam, solve_prb1r, solve_prb3r
from .solve import solve_model
from .compare import run_models, comparison_table

__version__ = "0.1.0"

__all__ = [
    'BeamParameters',
    'BeamParameterError',
    'ConvergenceInfo',
    'ModelResult',
    'ModelType',
    'Point',
    'Prb1RParameters',
    'Prb3RParameters',
    'MODEL_STYLES',
    'DEFAULT_MODELS',
    'Prb1RLoadCase',
    'solve_linear_beam',
    'solve_nonlinear_beam',
    'solve_prb1r',
    'solve_prb3r',
    'solve_model',
    'run_models',
    'comparison_table',
]
