# Multi-model comparison against the nonlinear reference
"""
COMPARE: RUN SEVERAL MODELS AND TABULATE THEM
==============================================

The point of having four models is to see how far the cheap ones drift from
the large-deflection reference. This module:

1. Runs a selection of models on one BeamParameters (optionally in parallel,
   since the solvers share nothing)
2. Measures each tip against the Nonlinear tip
3. Returns a pandas DataFrame ready for display or CSV export

ERROR DEFINITION:
-----------------
    error     = |tip - tip_nonlinear|           (Euclidean, in display units)
    error_pct = error / |tip_nonlinear| * 100

The reference itself gets 0. Without a Nonlinear result in the selection,
the error columns are NaN.
"""

import logging
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd
from joblib import Parallel, delayed

from .catalog import DEFAULT_MODELS
from .model import BeamParameters, ModelResult, ModelType
from .solve import solve_model
from .units import UnitSystem, length_scale

logger = logging.getLogger(__name__)

TABLE_COLUMNS = [
    'model', 'label', 'tip_x', 'tip_y', 'tip_angle_deg',
    'max_stress', 'error', 'error_pct',
]


def run_models(
    params: BeamParameters,
    models: Iterable[ModelType] = DEFAULT_MODELS,
    parallel: bool = False,
) -> List[ModelResult]:
    """
    Solve each selected model independently.

    Results come back in selection order whether or not parallel is set.
    """
    models = list(models)
    logger.debug("Running %d models (parallel=%s)", len(models), parallel)

    if parallel and len(models) > 1:
        runner = Parallel(n_jobs=len(models), prefer="threads")
        return runner(delayed(solve_model)(m, params) for m in models)
    return [solve_model(m, params) for m in models]


def find_reference(results: Iterable[ModelResult]) -> Optional[ModelResult]:
    """First Nonlinear result in the list, if any."""
    for r in results:
        if r.model is ModelType.NONLINEAR:
            return r
    return None


def tip_error(result: ModelResult, reference: ModelResult) -> float:
    """Euclidean distance between two tips (m)."""
    return float(np.hypot(result.tip_x - reference.tip_x, result.tip_y - reference.tip_y))


def comparison_table(
    results: List[ModelResult],
    unit_system: UnitSystem = UnitSystem.METRIC,
) -> pd.DataFrame:
    """
    Tabulate tip state and error vs. the Nonlinear model.

    Parameters:
    -----------
    results : List[ModelResult]
        Output of run_models (any order, any subset)
    unit_system : UnitSystem
        Lengths (tip_x, tip_y, error) are converted to m or in. Stress stays
        in Pa and angles are in degrees.

    Returns:
    --------
    pd.DataFrame
        One row per result with TABLE_COLUMNS
    """
    scale = length_scale(unit_system)
    reference = find_reference(results)
    ref_norm = np.hypot(reference.tip_x, reference.tip_y) if reference is not None else 0.0

    rows = []
    for r in results:
        if reference is None:
            error = np.nan
            error_pct = np.nan
        elif r is reference:
            error = 0.0
            error_pct = 0.0
        else:
            error = tip_error(r, reference)
            error_pct = error / ref_norm * 100 if ref_norm > 0 else np.nan

        rows.append({
            'model': r.model.value,
            'label': r.label,
            'tip_x': r.tip_x * scale,
            'tip_y': r.tip_y * scale,
            'tip_angle_deg': np.degrees(r.tip_angle),
            'max_stress': r.max_stress,
            'error': error * scale,
            'error_pct': error_pct,
        })

    return pd.DataFrame(rows, columns=TABLE_COLUMNS)
