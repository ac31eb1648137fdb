# prbm/units.py
"""
SI <-> English unit conversion.

Everything inside prbm is SI. Conversion happens only at the edges (app,
api, demos). Section dimensions are entered in millimetres in metric mode
and inches in English mode; beam length in metres or inches.
"""

from enum import Enum

from .model import BeamParameters
from .section import SectionProperties

INCH = 0.0254                   # m
LBF = 4.44822                   # N
PSI = 6894.76                   # Pa
MPSI = 1e6 * PSI                # Pa
LBF_IN = LBF * INCH             # N·m
MM = 1e-3                       # m


class UnitSystem(Enum):
    METRIC = "Metric"
    ENGLISH = "English"


# quantity: (SI per METRIC display unit, SI per ENGLISH display unit, labels)
QUANTITIES = {
    'length': (1.0, INCH, 'm', 'in'),
    'dimension': (MM, INCH, 'mm', 'in'),
    'force': (1.0, LBF, 'N', 'lbf'),
    'moment': (1.0, LBF_IN, 'N·m', 'lbf·in'),
    'modulus': (1e9, MPSI, 'GPa', 'Mpsi'),
    'second_moment': (MM**4, INCH**4, 'mm⁴', 'in⁴'),
    'area': (MM**2, INCH**2, 'mm²', 'in²'),
    'rotational_stiffness': (1.0, LBF_IN, 'N·m/rad', 'lbf·in/rad'),
}


def _lookup(quantity: str):
    if quantity not in QUANTITIES:
        raise ValueError(f"Unknown quantity: {quantity!r}")
    return QUANTITIES[quantity]


def to_si(value: float, quantity: str, system: UnitSystem) -> float:
    """Display value -> SI, e.g. to_si(0.5, 'force', UnitSystem.ENGLISH) -> 2.224 N."""
    metric, english, _, _ = _lookup(quantity)
    return value * (metric if system is UnitSystem.METRIC else english)


def from_si(value: float, quantity: str, system: UnitSystem) -> float:
    """SI -> display value."""
    metric, english, _, _ = _lookup(quantity)
    return value / (metric if system is UnitSystem.METRIC else english)


def unit_label(quantity: str, system: UnitSystem) -> str:
    _, _, metric, english = _lookup(quantity)
    return metric if system is UnitSystem.METRIC else english


def length_scale(system: UnitSystem) -> float:
    """Multiply metres by this to display lengths (m or in)."""
    return from_si(1.0, 'length', system)


def length_unit(system: UnitSystem) -> str:
    return unit_label('length', system)


def convert_dimension(value: float, source: UnitSystem, target: UnitSystem) -> float:
    """Re-express a section dimension entry (mm <-> in) when the unit toggle flips."""
    if source is target:
        return value
    return from_si(to_si(value, 'dimension', source), 'dimension', target)


def english_beam_parameters(
    E_mpsi: float,
    L_in: float,
    section: SectionProperties,
    P_lbf: float = 0.0,
    nP_lbf: float = 0.0,
    M0_lbf_in: float = 0.0,
) -> BeamParameters:
    """Build SI BeamParameters from English inputs (Mpsi, in, lbf, lbf·in)."""
    return BeamParameters(
        E=E_mpsi * MPSI,
        I=section.I,
        L=L_in * INCH,
        P=P_lbf * LBF,
        nP=nP_lbf * LBF,
        M0=M0_lbf_in * LBF_IN,
        c=section.c,
        A=section.A,
    )
