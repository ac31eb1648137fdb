# app/components/beam_viewer.py
"""
Deflected-shape and tip-comparison charts using Plotly.
"""

import plotly.graph_objects as go
from typing import List
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from prbm.catalog import MODEL_STYLES, NO_LOAD_EPS
from prbm.model import BeamParameters, ModelResult
from prbm.units import UnitSystem, length_scale, length_unit


def render_beam_chart(
    results: List[ModelResult],
    params: BeamParameters,
    unit_system: UnitSystem,
    height: int = 500,
) -> go.Figure:
    """
    Overlay every model's deflected shape.

    Parameters:
    -----------
    results : List[ModelResult]
        Solved models
    params : BeamParameters
        Beam inputs (for the undeformed beam and the load arrow)
    unit_system : UnitSystem
        Display units
    height : int
        Figure height in pixels

    Returns:
    --------
    go.Figure
        Plotly figure
    """
    scale = length_scale(unit_system)
    unit = length_unit(unit_system)
    L = params.L * scale

    fig = go.Figure()

    # Undeformed beam
    fig.add_trace(go.Scatter(
        x=[0, L], y=[0, 0],
        mode='lines',
        line=dict(color='#94a3b8', width=2, dash='dash'),
        name='Undeformed',
        hoverinfo='skip',
    ))

    for r in results:
        if r.is_empty:
            continue
        style = MODEL_STYLES[r.model]
        xy = r.as_array() * scale
        hover = (
            f"{style.label}<br>tip x: {r.tip_x * scale:.4f} {unit}"
            f"<br>tip y: {r.tip_y * scale:.4f} {unit}"
            f"<br>angle: {np.degrees(r.tip_angle):.2f}°"
        )
        fig.add_trace(go.Scatter(
            x=xy[:, 0],
            y=xy[:, 1],
            # rigid links: straight segments with joint markers
            mode='lines+markers' if style.rigid_links else 'lines',
            line=dict(color=style.color, width=3, shape='linear' if style.rigid_links else 'spline'),
            marker=dict(size=8, color=style.color),
            name=style.label,
            hovertext=hover,
            hoverinfo='text',
        ))

    # Tip load arrow on the first drawn result
    drawn = [r for r in results if not r.is_empty]
    magnitude = np.hypot(params.P, params.nP)
    if drawn and magnitude > NO_LOAD_EPS:
        tip = drawn[0]
        arrow_len = 0.15 * L
        fig.add_annotation(
            x=tip.tip_x * scale + params.nP / magnitude * arrow_len,
            y=tip.tip_y * scale + params.P / magnitude * arrow_len,
            ax=tip.tip_x * scale,
            ay=tip.tip_y * scale,
            xref='x', yref='y', axref='x', ayref='y',
            showarrow=True, arrowhead=3, arrowwidth=2, arrowcolor='#0f172a',
        )

    fig.update_layout(
        height=height,
        margin=dict(l=0, r=0, t=30, b=0),
        xaxis=dict(title=f"x ({unit})", zeroline=False),
        yaxis=dict(title=f"y ({unit})", scaleanchor='x', scaleratio=1, zeroline=False),
        legend=dict(orientation='h', yanchor='bottom', y=1.02, xanchor='left', x=0),
        plot_bgcolor='#FAFAFA',
    )

    return fig


def render_tip_bars(results: List[ModelResult], unit_system: UnitSystem, height: int = 350) -> go.Figure:
    """Grouped bars of tip X / tip Y per model."""
    scale = length_scale(unit_system)
    unit = length_unit(unit_system)
    shown = [r for r in results if not r.is_empty]
    labels = [r.label for r in shown]

    fig = go.Figure()
    fig.add_trace(go.Bar(x=labels, y=[r.tip_x * scale for r in shown],
                         name=f"X ({unit})", marker_color='#3b82f6'))
    fig.add_trace(go.Bar(x=labels, y=[r.tip_y * scale for r in shown],
                         name=f"Y ({unit})", marker_color='#10b981'))
    fig.update_layout(
        barmode='group',
        height=height,
        margin=dict(l=0, r=0, t=30, b=0),
        plot_bgcolor='#FAFAFA',
    )
    return fig
