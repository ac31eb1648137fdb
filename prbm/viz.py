"""
VISUALIZATION: DEFLECTED SHAPES AND TIP COMPARISON
===================================================

PURPOSE:
--------
Draw the results of several beam models on one set of axes so their
predictions can be compared at a glance.

HOW MODELS ARE DRAWN:
---------------------
- **Continuum models** (Linear, Nonlinear): smooth curves through the dense
  polyline.
- **Pseudo-rigid-body models** (PRB 1R, PRB 3R): straight segments between
  joints with a marker at every joint. These ARE rigid links, so drawing a
  smooth curve through them would misrepresent the model.

Deflections are drawn at true scale: compliant beams deflect a large
fraction of their length, so no exaggeration factor is applied.
"""

import os
from typing import List, Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import FancyArrowPatch, Rectangle

from .catalog import MODEL_STYLES, NO_LOAD_EPS
from .model import BeamParameters, ModelResult
from .units import UnitSystem, length_scale, length_unit

# =============================================================================
# COLOR PALETTE
# =============================================================================

COLORS = {
    'undeformed': '#94a3b8',    # Slate (undeformed beam)
    'support': '#334155',       # Dark slate (wall)
    'load': '#0f172a',          # Near black (tip load arrow)
    'grid': '#E0E0E0',
    'background': '#FAFAFA',
    'text': '#2C3E50',
    'bar_x': '#3b82f6',
    'bar_y': '#10b981',
}

FONT_TITLE = {'family': 'sans-serif', 'weight': 'bold', 'size': 14}
FONT_LABEL = {'family': 'sans-serif', 'weight': 'normal', 'size': 11}


def _save(fig: plt.Figure, outpath: Optional[str]) -> None:
    if outpath is None:
        return
    directory = os.path.dirname(outpath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    fig.savefig(outpath, dpi=150, bbox_inches='tight', facecolor=COLORS['background'])


def _draw_support(ax: plt.Axes, L: float) -> None:
    """Hatched wall at the clamped end."""
    width = 0.04 * L
    ax.add_patch(Rectangle(
        (-width, -0.15 * L), width, 0.3 * L,
        facecolor='none', edgecolor=COLORS['support'], hatch='///', linewidth=1.2,
    ))


def _draw_tip_load(ax: plt.Axes, result: ModelResult, params: BeamParameters, scale: float) -> None:
    """
    Arrow for the resultant tip force. Skipped when the force is effectively
    zero, so a pure-moment case shows no arrow.
    """
    magnitude = np.hypot(params.P, params.nP)
    if magnitude <= NO_LOAD_EPS or result.is_empty:
        return
    arrow_len = 0.15 * params.L * scale
    dx = params.nP / magnitude * arrow_len
    dy = params.P / magnitude * arrow_len
    x, y = result.tip_x * scale, result.tip_y * scale
    ax.add_patch(FancyArrowPatch(
        (x, y), (x + dx, y + dy),
        arrowstyle='-|>', mutation_scale=14, color=COLORS['load'], linewidth=1.5,
    ))


def plot_deflected_shapes(
    results: List[ModelResult],
    params: Optional[BeamParameters] = None,
    outpath: Optional[str] = None,
    unit_system: UnitSystem = UnitSystem.METRIC,
    title: str = "Cantilever: Deflected Shapes",
) -> plt.Figure:
    """
    Overlay every model's deflected shape.

    Parameters:
    -----------
    results : List[ModelResult]
        Output of compare.run_models. Empty results (EI == 0) are skipped.
    params : BeamParameters, optional
        When given, the undeformed beam, the wall and the tip load arrow are
        drawn too.
    outpath : str, optional
        Save the figure here (directory is created if needed)
    unit_system : UnitSystem
        Axis units (m or in)
    title : str
        Plot title

    Returns:
    --------
    plt.Figure
    """
    scale = length_scale(unit_system)
    unit = length_unit(unit_system)

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.set_facecolor(COLORS['background'])

    if params is not None:
        L = params.L * scale
        ax.plot([0, L], [0, 0], linestyle='--', color=COLORS['undeformed'],
                linewidth=1.5, label='Undeformed')
        _draw_support(ax, L)

    for r in results:
        if r.is_empty:
            continue
        style = MODEL_STYLES[r.model]
        xy = r.as_array() * scale
        if style.rigid_links:
            ax.plot(xy[:, 0], xy[:, 1], color=style.color, linewidth=2,
                    marker='o', markersize=5, label=style.label)
        else:
            ax.plot(xy[:, 0], xy[:, 1], color=style.color, linewidth=2, label=style.label)

    if params is not None:
        reference = next((r for r in results if not r.is_empty), None)
        if reference is not None:
            _draw_tip_load(ax, reference, params, scale)

    ax.set_aspect('equal', adjustable='datalim')
    ax.grid(True, color=COLORS['grid'], linewidth=0.8)
    ax.set_xlabel(f"x ({unit})", fontdict=FONT_LABEL)
    ax.set_ylabel(f"y ({unit})", fontdict=FONT_LABEL)
    ax.set_title(title, fontdict=FONT_TITLE, color=COLORS['text'])
    ax.legend(loc='best', frameon=False)

    _save(fig, outpath)
    return fig


def plot_tip_comparison(
    results: List[ModelResult],
    outpath: Optional[str] = None,
    unit_system: UnitSystem = UnitSystem.METRIC,
    title: str = "Tip Coordinates Comparison",
) -> plt.Figure:
    """Grouped bars of tip X and tip Y per model."""
    scale = length_scale(unit_system)
    unit = length_unit(unit_system)
    shown = [r for r in results if not r.is_empty]

    labels = [r.label for r in shown]
    tip_x = [r.tip_x * scale for r in shown]
    tip_y = [r.tip_y * scale for r in shown]

    idx = np.arange(len(shown))
    width = 0.38

    fig, ax = plt.subplots(figsize=(9, 5))
    ax.set_facecolor(COLORS['background'])
    ax.bar(idx - width / 2, tip_x, width, color=COLORS['bar_x'], label=f"X ({unit})")
    ax.bar(idx + width / 2, tip_y, width, color=COLORS['bar_y'], label=f"Y ({unit})")

    ax.set_xticks(idx)
    ax.set_xticklabels(labels, rotation=15)
    ax.grid(True, axis='y', color=COLORS['grid'], linewidth=0.8)
    ax.set_ylabel(f"Tip coordinate ({unit})", fontdict=FONT_LABEL)
    ax.set_title(title, fontdict=FONT_TITLE, color=COLORS['text'])
    ax.legend(frameon=False)

    _save(fig, outpath)
    return fig
