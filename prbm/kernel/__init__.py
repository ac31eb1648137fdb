# prbm/kernel - The four beam solvers
"""
KERNEL: INDEPENDENT BEAM SOLVERS
================================

Each solver is a pure function BeamParameters -> ModelResult. None of them
depends on another, so any subset can be run, in any order, on any thread.

    linear.py     Closed-form small deflection
    elastica.py   Large deflection, RK4 + shooting on the tip position
    prb1r.py      One pivot + torsional spring, damped Newton
    prb3r.py      Three springs in a chain, under-relaxed substitution
"""

from .linear import solve_linear_beam
from .elastica import solve_nonlinear_beam, integrate_elastica
from .prb1r import solve_prb1r, load_ratio
from .prb3r import solve_prb3r, chain_points

__all__ = [
    'solve_linear_beam',
    'solve_nonlinear_beam',
    'integrate_elastica',
    'solve_prb1r',
    'load_ratio',
    'solve_prb3r',
    'chain_points',
]
