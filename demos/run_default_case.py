# File: demos/run_default_case.py
"""
DEMO: THE DEFAULT VISUALIZER CASE
=================================

A 20 in spring-steel strip (1.25 in x 1/32 in, E = 30 Mpsi) with a 0.5 lbf
tip load, solved with all six model selectors. Prints the comparison table,
checks the linear result against the closed form, and saves two plots.
"""

import matplotlib.pyplot as plt

from prbm.model import ModelType
from prbm.compare import run_models, comparison_table
from prbm.section import rectangular_section
from prbm.units import INCH, UnitSystem, english_beam_parameters
from prbm.viz import plot_deflected_shapes, plot_tip_comparison


def main():
    # Units: English inputs, converted to SI once here
    section = rectangular_section(b=1.25 * INCH, h=0.03125 * INCH)
    params = english_beam_parameters(E_mpsi=30.0, L_in=20.0, section=section, P_lbf=0.5)

    print(f"I = {params.I:.4e} m^4, c = {params.c:.4e} m, EI = {params.EI:.4f} N·m^2")

    results = run_models(params, list(ModelType))
    table = comparison_table(results, UnitSystem.ENGLISH)
    print(table.to_string(index=False, float_format=lambda v: f"{v:.4f}"))

    # Closed-form check
    linear = results[0]
    expected = params.P * params.L**3 / (3 * params.EI)
    print("Linear tip y (m):", linear.tip_y, " expected:", expected)

    nonlinear = results[1]
    print("Nonlinear shooting:", nonlinear.convergence)
    print("Nonlinear / linear tip y:", nonlinear.tip_y / linear.tip_y)

    plot_deflected_shapes(results, params, outpath="artifacts/default_case_shapes.png",
                          unit_system=UnitSystem.ENGLISH)
    plot_tip_comparison(results, outpath="artifacts/default_case_tips.png",
                        unit_system=UnitSystem.ENGLISH)
    plt.show()


if __name__ == "__main__":
    main()
