# prbm/section.py
"""
CROSS-SECTION PROPERTIES
========================

The solvers only see I, c and A. This module derives them from the two
section shapes the visualizer offers:

    RECTANGULAR (b wide, h deep)        CIRCULAR (diameter d)

        ┌───────── b ─────────┐               ╭───╮
        │                     │ h            │  ●  │ d
        └─────────────────────┘               ╰───╯

    I = b h³ / 12                         I = π d⁴ / 64
    c = h / 2                             c = d / 2
    A = b h                               A = π d² / 4

Bending is about the axis parallel to b, so a thin strip (h << b) is the
flexible direction of a compliant beam.
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np


class CrossSectionType(Enum):
    RECTANGULAR = "Rectangular"
    CIRCULAR = "Circular"


@dataclass(frozen=True)
class SectionProperties:
    """Section properties in SI (m^4, m, m^2)."""
    I: float
    c: float
    A: float

    @property
    def S(self) -> float:
        """Elastic section modulus I / c (m^3)."""
        return self.I / self.c if self.c > 0 else 0.0


def rectangular_section(b: float, h: float) -> SectionProperties:
    """
    Solid rectangle of width b and depth h (m).

    Raises:
        ValueError: If b or h is not positive
    """
    if b <= 0 or h <= 0:
        raise ValueError(f"Rectangular section needs b > 0 and h > 0, got b={b}, h={h}")
    return SectionProperties(I=b * h**3 / 12, c=h / 2, A=b * h)


def circular_section(d: float) -> SectionProperties:
    """
    Solid circle of diameter d (m).

    Raises:
        ValueError: If d is not positive
    """
    if d <= 0:
        raise ValueError(f"Circular section needs d > 0, got d={d}")
    return SectionProperties(I=np.pi * d**4 / 64, c=d / 2, A=np.pi * d**2 / 4)


def section_properties(section_type: CrossSectionType, width: float = 0.0,
                       height: float = 0.0, diameter: float = 0.0) -> SectionProperties:
    """Dispatch on section type; unused dimensions are ignored."""
    if section_type is CrossSectionType.RECTANGULAR:
        return rectangular_section(width, height)
    if section_type is CrossSectionType.CIRCULAR:
        return circular_section(diameter)
    raise ValueError(f"Unknown section type: {section_type!r}")
