# app/components - Reusable UI components
from .beam_viewer import render_beam_chart, render_tip_bars
from .metrics_panel import (
    render_section_metrics,
    render_results_table,
    render_prb_diagnostics,
    format_prb_diagnostics,
)

__all__ = [
    'render_beam_chart',
    'render_tip_bars',
    'render_section_metrics',
    'render_results_table',
    'render_prb_diagnostics',
    'format_prb_diagnostics',
]
