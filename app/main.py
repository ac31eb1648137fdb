# app/main.py
"""
PRBM Beam Explorer - Real-Time Live Interface

Sliders on the left, deflected shapes and the comparison table on the right.
Every change re-solves the selected models (they are cheap and bounded).

Run with:
    streamlit run app/main.py
"""

import streamlit as st
import sys
from pathlib import Path

# Add app directory to path
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import CONFIG
from components import (
    render_beam_chart,
    render_tip_bars,
    render_section_metrics,
    render_results_table,
    render_prb_diagnostics,
)
from prbm.catalog import MODEL_STYLES
from prbm.compare import comparison_table, run_models
from prbm.logging_config import setup_logging
from prbm.model import BeamParameterError, BeamParameters, ModelType
from prbm.section import CrossSectionType, section_properties
from prbm.units import UnitSystem, convert_dimension, from_si, to_si, unit_label

setup_logging(CONFIG.log_level, trace_solvers=CONFIG.trace_solvers)

# Page configuration - must be first Streamlit command
st.set_page_config(
    page_title=CONFIG.app_name,
    page_icon="📐",
    layout="wide",
    initial_sidebar_state="expanded",
)


def _init_state() -> None:
    """Seed session state with the configured defaults (display units)."""
    if 'unit_system' in st.session_state:
        return
    system = CONFIG.default_unit_system
    st.session_state['unit_system'] = system
    st.session_state['width'] = from_si(CONFIG.default_width, 'dimension', system)
    st.session_state['height'] = from_si(CONFIG.default_height, 'dimension', system)
    st.session_state['diameter'] = from_si(CONFIG.default_diameter, 'dimension', system)
    st.session_state['E'] = from_si(CONFIG.default_E, 'modulus', system)
    st.session_state['L'] = from_si(CONFIG.default_L, 'length', system)
    st.session_state['P'] = from_si(CONFIG.default_P, 'force', system)
    st.session_state['nP'] = from_si(CONFIG.default_nP, 'force', system)
    st.session_state['M0'] = from_si(CONFIG.default_M0, 'moment', system)


def _toggle_units() -> None:
    """Flip the unit system, re-expressing every entered value."""
    old = st.session_state['unit_system']
    new = UnitSystem.METRIC if old is UnitSystem.ENGLISH else UnitSystem.ENGLISH
    for key in ('width', 'height', 'diameter'):
        st.session_state[key] = convert_dimension(st.session_state[key], old, new)
    for key, quantity in (('E', 'modulus'), ('L', 'length'), ('P', 'force'),
                          ('nP', 'force'), ('M0', 'moment')):
        st.session_state[key] = from_si(to_si(st.session_state[key], quantity, old), quantity, new)
    st.session_state['unit_system'] = new


def _slider(label: str, key: str, quantity: str, si_range, system: UnitSystem) -> float:
    lo, hi = (from_si(v, quantity, system) for v in si_range)
    return st.slider(f"{label} [{unit_label(quantity, system)}]",
                     min_value=float(lo), max_value=float(hi), key=key)


_init_state()
system = st.session_state['unit_system']

# =============================================================================
# SIDEBAR - All Parameter Controls
# =============================================================================

with st.sidebar:
    st.title(f"📐 {CONFIG.app_name}")
    st.caption(CONFIG.app_subtitle)
    st.button(f"{system.value} units (switch)", on_click=_toggle_units)

    st.divider()

    # -------------------------------------------------------------------------
    # CROSS SECTION
    # -------------------------------------------------------------------------
    st.subheader("Cross Section")
    section_type = st.radio(
        "Shape", list(CrossSectionType), format_func=lambda t: t.value, horizontal=True,
    )
    dim_unit = unit_label('dimension', system)
    if section_type is CrossSectionType.RECTANGULAR:
        st.number_input(f"Width (b) [{dim_unit}]", min_value=0.0, format="%.5f", key='width')
        st.number_input(f"Height (h) [{dim_unit}]", min_value=0.0, format="%.5f", key='height')
    else:
        st.number_input(f"Diameter (d) [{dim_unit}]", min_value=0.0, format="%.5f", key='diameter')

    # -------------------------------------------------------------------------
    # BEAM AND LOADS
    # -------------------------------------------------------------------------
    st.subheader("Beam")
    _slider("Length (L)", 'L', 'length', CONFIG.L_range, system)
    _slider("Stiffness (E)", 'E', 'modulus', CONFIG.E_range, system)

    st.subheader("Loads")
    _slider("Vertical Load (P)", 'P', 'force', CONFIG.P_range, system)
    _slider("Horizontal (nP)", 'nP', 'force', CONFIG.nP_range, system)
    _slider("Tip Moment (M₀)", 'M0', 'moment', CONFIG.M0_range, system)

    st.subheader("Models")
    selected = st.multiselect(
        "Models to compare",
        list(ModelType),
        default=CONFIG.default_models,
        format_func=lambda m: MODEL_STYLES[m].description,
    )

# =============================================================================
# SOLVE
# =============================================================================

try:
    section = section_properties(
        section_type,
        width=to_si(st.session_state['width'], 'dimension', system),
        height=to_si(st.session_state['height'], 'dimension', system),
        diameter=to_si(st.session_state['diameter'], 'dimension', system),
    )
    params = BeamParameters.from_section(
        E=to_si(st.session_state['E'], 'modulus', system),
        L=to_si(st.session_state['L'], 'length', system),
        section=section,
        P=to_si(st.session_state['P'], 'force', system),
        nP=to_si(st.session_state['nP'], 'force', system),
        M0=to_si(st.session_state['M0'], 'moment', system),
    )
except (BeamParameterError, ValueError) as e:
    st.error(f"Invalid input: {e}")
    st.stop()

results = run_models(params, selected)
table = comparison_table(results, system)

# =============================================================================
# MAIN AREA
# =============================================================================

st.title(CONFIG.app_name)
st.caption(CONFIG.app_subtitle)

render_section_metrics(section.I, section.c, section.A, system)

st.plotly_chart(render_beam_chart(results, params, system), use_container_width=True)

col_chart, col_table = st.columns([1, 1])
with col_chart:
    st.subheader(f"Tip Coordinates Comparison ({unit_label('length', system)})")
    st.plotly_chart(render_tip_bars(results, system), use_container_width=True)
with col_table:
    st.subheader(f"Results Summary ({'SI' if system is UnitSystem.METRIC else 'English'})")
    render_results_table(table, system)

with st.expander("Model diagnostics"):
    render_prb_diagnostics(results, system)

st.caption("Pseudo-Rigid-Body Modeling Tool • Based on the Handbook of Compliant Mechanisms")
