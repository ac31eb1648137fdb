# api/main.py
"""
FastAPI backend for the PRBM Beam Explorer - exposes the prbm solvers as REST API.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from dataclasses import asdict
import logging
import sys
from pathlib import Path

import numpy as np

# Add project root to path to import prbm
sys.path.insert(0, str(Path(__file__).parent.parent))

from prbm.catalog import DEFAULT_MODELS, MODEL_STYLES
from prbm.compare import comparison_table, run_models
from prbm.logging_config import setup_logging
from prbm.model import BeamParameterError, BeamParameters, ModelResult, ModelType
from prbm.units import UnitSystem

setup_logging()
logger = logging.getLogger("prbm.api")

app = FastAPI(
    title="PRBM Beam Explorer API",
    description="Cantilever deflection: Linear, Nonlinear, PRB 1R and PRB 3R models",
    version="0.1.0"
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class BeamInput(BaseModel):
    """Beam inputs, SI units."""
    E: float = Field(206.8e9, description="Elastic modulus (Pa)")
    I: float = Field(5.09e-12, description="Second moment of area (m^4)")
    L: float = Field(0.508, description="Length (m)")
    P: float = Field(2.224, description="Vertical tip force (N)")
    nP: float = Field(0.0, description="Horizontal tip force (N)")
    M0: float = Field(0.0, description="Tip moment (N·m)")
    c: float = Field(3.97e-4, description="Distance to extreme fiber (m)")
    A: float = Field(2.52e-5, description="Cross-section area (m^2)")


class SolveRequest(BaseModel):
    """Beam plus the models to run."""
    beam: BeamInput
    models: List[ModelType] = Field(default_factory=lambda: list(DEFAULT_MODELS))
    unit_system: UnitSystem = UnitSystem.METRIC


class PointData(BaseModel):
    x: float
    y: float


class ConvergenceData(BaseModel):
    iterations: int
    residual: float
    converged: bool


class ResultData(BaseModel):
    """One model's output (SI)."""
    model: ModelType
    label: str
    color: str
    points: List[PointData]
    tip_x: float
    tip_y: float
    tip_angle: float
    max_stress: float
    prb_params: Optional[Dict[str, Any]] = None
    convergence: Optional[ConvergenceData] = None


class TableRow(BaseModel):
    model: str
    label: str
    tip_x: float
    tip_y: float
    tip_angle_deg: float
    max_stress: float
    error: Optional[float] = None
    error_pct: Optional[float] = None


class SolveResponse(BaseModel):
    results: List[ResultData]
    table: List[TableRow]


class ModelInfo(BaseModel):
    model: ModelType
    label: str
    description: str
    color: str
    rigid_links: bool


# =============================================================================
# Conversion
# =============================================================================

def result_to_data(result: ModelResult) -> ResultData:
    """Flatten a ModelResult into the response schema."""
    prb = None
    if result.prb_params is not None:
        prb = asdict(result.prb_params)
    conv = None
    if result.convergence is not None:
        conv = ConvergenceData(**asdict(result.convergence))

    return ResultData(
        model=result.model,
        label=result.label,
        color=result.color,
        points=[PointData(x=p.x, y=p.y) for p in result.points],
        tip_x=result.tip_x,
        tip_y=result.tip_y,
        tip_angle=result.tip_angle,
        max_stress=result.max_stress,
        prb_params=prb,
        convergence=conv,
    )


def _finite_or_none(value: float) -> Optional[float]:
    return float(value) if np.isfinite(value) else None


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "PRBM Beam Explorer API"}


@app.get("/api/models", response_model=List[ModelInfo])
async def list_models():
    """Available model selectors and their display metadata."""
    return [
        ModelInfo(
            model=model,
            label=style.label,
            description=style.description,
            color=style.color,
            rigid_links=style.rigid_links,
        )
        for model, style in MODEL_STYLES.items()
    ]


@app.post("/api/solve", response_model=SolveResponse)
async def solve(request: SolveRequest):
    """Run the selected models on one beam."""
    try:
        params = BeamParameters(**request.beam.model_dump())
    except BeamParameterError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("Solving %d models", len(request.models))
    results = run_models(params, request.models)
    df = comparison_table(results, request.unit_system)

    table = [
        TableRow(
            model=row['model'],
            label=row['label'],
            tip_x=row['tip_x'],
            tip_y=row['tip_y'],
            tip_angle_deg=row['tip_angle_deg'],
            max_stress=row['max_stress'],
            error=_finite_or_none(row['error']),
            error_pct=_finite_or_none(row['error_pct']),
        )
        for row in df.to_dict(orient='records')
    ]

    return SolveResponse(results=[result_to_data(r) for r in results], table=table)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
