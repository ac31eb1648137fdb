# model selector -> solver dispatch

from .catalog import PRB1R_MODELS
from .kernel import solve_linear_beam, solve_nonlinear_beam, solve_prb1r, solve_prb3r
from .model import BeamParameters, ModelResult, ModelType


def solve_model(model: ModelType, params: BeamParameters) -> ModelResult:
    """
    Run one model by selector.
    Raises ValueError for anything that is not a ModelType.
    """
    if model is ModelType.LINEAR:
        return solve_linear_beam(params)
    if model is ModelType.NONLINEAR:
        return solve_nonlinear_beam(params)
    if model in PRB1R_MODELS:
        return solve_prb1r(params, PRB1R_MODELS[model])
    if model is ModelType.PRB_3R:
        return solve_prb3r(params)
    raise ValueError(f"Unknown model selector: {model!r}")
