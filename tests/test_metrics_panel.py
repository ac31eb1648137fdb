"""
Diagnostics panel formatting
============================

The PRB panel must show the spring constants in the active unit system and
list every constant each PRB model uses.
"""

import os
import sys

import pytest

# Add app directory to path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "app"))

from components.metrics_panel import format_prb_diagnostics
from prbm.model import BeamParameters, ModelType
from prbm.solve import solve_model
from prbm.units import LBF_IN, UnitSystem


SCENARIO = BeamParameters(E=206.8e9, I=5.09e-12, L=0.508, P=2.224)


def test_prb3r_lists_nondimensional_coefficients():
    result = solve_model(ModelType.PRB_3R, SCENARIO)
    line = format_prb_diagnostics(result, UnitSystem.METRIC)

    assert "K_c = [3.51, 2.99, 2.58]" in line
    assert "γ = [0.10, 0.35, 0.40, 0.15]" in line
    assert line.endswith("N·m/rad")


@pytest.mark.parametrize("system, scale, unit", [
    (UnitSystem.METRIC, 1.0, "N·m/rad"),
    (UnitSystem.ENGLISH, 1.0 / LBF_IN, "lbf·in/rad"),
])
def test_spring_constants_follow_unit_system(system, scale, unit):
    """
    WHAT IS THIS TEST?
    ==================
    K is computed in N·m/rad. In English mode the panel must show it in
    lbf·in/rad (factor ~8.85), for both PRB families.
    """
    prb1r = solve_model(ModelType.PRB_1R_VERTICAL, SCENARIO)
    line = format_prb_diagnostics(prb1r, system)
    assert f"K = {prb1r.prb_params.stiffness * scale:.4e} {unit}" in line

    prb3r = solve_model(ModelType.PRB_3R, SCENARIO)
    line = format_prb_diagnostics(prb3r, system)
    springs = ", ".join(f"{k * scale:.4e}" for k in prb3r.prb_params.stiffness)
    assert f"K = [{springs}] {unit}" in line
    print(f"✓ Spring constants shown in {unit}")


def test_continuum_models_have_no_prb_line():
    for model in (ModelType.LINEAR, ModelType.NONLINEAR):
        assert format_prb_diagnostics(solve_model(model, SCENARIO), UnitSystem.ENGLISH) == ""
