# app/components/metrics_panel.py
"""
Results table and PRB diagnostics panel.
"""

import streamlit as st
import pandas as pd
from typing import List
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from prbm.model import ModelResult, Prb1RParameters, Prb3RParameters
from prbm.units import UnitSystem, from_si, length_unit, unit_label


def render_section_metrics(I: float, c: float, A: float, unit_system: UnitSystem) -> None:
    """Derived section properties (SI in, displayed in the active units)."""
    cols = st.columns(3)
    with cols[0]:
        st.metric("I", f"{from_si(I, 'second_moment', unit_system):.4g} "
                       f"{unit_label('second_moment', unit_system)}")
    with cols[1]:
        st.metric("c", f"{from_si(c, 'dimension', unit_system):.4g} "
                       f"{unit_label('dimension', unit_system)}")
    with cols[2]:
        st.metric("A", f"{from_si(A, 'area', unit_system):.4g} "
                       f"{unit_label('area', unit_system)}")


def render_results_table(table: pd.DataFrame, unit_system: UnitSystem) -> None:
    """
    Render the comparison table.

    Parameters:
    -----------
    table : pd.DataFrame
        Output of prbm.compare.comparison_table
    unit_system : UnitSystem
        Units the table lengths are already in
    """
    unit = length_unit(unit_system)
    decimals = 3 if unit_system is UnitSystem.METRIC else 2

    display = pd.DataFrame({
        'Model': table['label'],
        f'X ({unit})': table['tip_x'].round(decimals),
        f'Y ({unit})': table['tip_y'].round(decimals),
        'Angle (°)': table['tip_angle_deg'].round(2),
        'Max stress (MPa)': (table['max_stress'] / 1e6).round(1),
        'Error (%)': table['error_pct'].round(2),
    })
    st.dataframe(display, hide_index=True, use_container_width=True)
    st.caption(
        f"*Results are converted to {unit_system.value} for display. "
        "Error is measured against the Nonlinear tip."
    )


def format_prb_diagnostics(result: ModelResult, unit_system: UnitSystem) -> str:
    """
    One markdown line of PRB parameters for a result, or "" for the
    continuum models. Spring constants are shown in the active units.
    """
    prb = result.prb_params
    k_unit = unit_label('rotational_stiffness', unit_system)

    if isinstance(prb, Prb1RParameters):
        K = from_si(prb.stiffness, 'rotational_stiffness', unit_system)
        return (
            f"**{result.label}**: γ = {prb.gamma:.4f}, "
            f"K_Θ = {prb.k_theta:.4f}, c_Θ = {prb.c_theta:.4f}, "
            f"K = {K:.4e} {k_unit}"
        )
    if isinstance(prb, Prb3RParameters):
        links = ", ".join(f"{g:.2f}" for g in prb.links)
        coeffs = ", ".join(f"{k:.2f}" for k in prb.stiffness_coeffs)
        springs = ", ".join(
            f"{from_si(k, 'rotational_stiffness', unit_system):.4e}" for k in prb.stiffness
        )
        return (
            f"**{result.label}**: γ = [{links}], "
            f"K_c = [{coeffs}], K = [{springs}] {k_unit}"
        )
    return ""


def render_prb_diagnostics(results: List[ModelResult], unit_system: UnitSystem) -> None:
    """PRB parameters per model plus a note for any model that stopped short."""
    for r in results:
        line = format_prb_diagnostics(r, unit_system)
        if line:
            st.markdown(line)

        if r.convergence is not None and not r.convergence.converged:
            st.caption(
                f"{r.label} stopped after {r.convergence.iterations} iterations "
                f"(residual {r.convergence.residual:.2e})"
            )
