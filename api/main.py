# api/main.py
"""
FastAPI backend for TetraPair - exposes the structure evaluator as a REST API.
"""

import dataclasses
import math
from typing import Any, Dict, List, Optional, Tuple

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from tetra_pair import (
    InputParameters,
    UnitCosts,
    OutputParameters,
    TetraPairError,
    evaluate_structure,
    wind_force_sweep,
)
from tetra_pair.config import CONFIG
from tetra_pair.kernel.vecmath import deg_to_rad, rad_to_deg
from tetra_pair.logger_config import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="TetraPair API",
    description="Mirrored tetrahedron frame evaluator",
    version=CONFIG.version,
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

class UnitCostData(BaseModel):
    """Per-unit prices."""
    frame_metal: float = Field(4.4, ge=0.0, description="Tube stock ($/ft)")
    mirror: float = Field(220.0 / 32.0, ge=0.0, description="Mirror sheet ($/ft²)")
    mirror_bolt: float = Field(0.367, ge=0.0, description="Mirror bolt ($ each)")
    frame_through_hole_drill: float = Field(695.0 / 160.0, ge=0.0, description="Drilled hole ($ each)")
    frame_through_hole_tap: float = Field(480.0 / 320.0, ge=0.0, description="Tapped hole side ($ each)")


class StructureParams(BaseModel):
    """Input parameters; the ground-plane angle is given in degrees."""
    square_side_length: float = Field(16.0, gt=0.0, description="Starting square side (ft)")
    base_cut_back_length: float = Field(2.0, ge=0.0, description="Cut back on square base (ft)")
    angle_ABC_deg: float = Field(110.0, gt=0.0, lt=180.0, description="Ground-plane angle at B (deg)")
    frame_cross_section: Tuple[float, float] = Field((0.75, 1.5), description="Tube outer dims (in)")
    frame_wall_thickness: float = Field(1.0 / 16.0, ge=0.0, description="Tube wall (in)")
    metal_density: float = Field(0.289, ge=0.0, description="Metal density (lb/in³)")
    shoulder_height: float = Field(5.0, ge=0.0, description="Shoulder height (ft)")
    mirror_bolt_spacing: float = Field(2.0, gt=0.0, description="Bolt spacing (ft)")
    unit_cost: UnitCostData = Field(default_factory=UnitCostData)

    def to_input_parameters(self) -> InputParameters:
        return InputParameters(
            square_side_length=self.square_side_length,
            base_cut_back_length=self.base_cut_back_length,
            angle_ABC=deg_to_rad(self.angle_ABC_deg),
            frame_cross_section=tuple(self.frame_cross_section),
            frame_wall_thickness=self.frame_wall_thickness,
            metal_density=self.metal_density,
            shoulder_height=self.shoulder_height,
            mirror_bolt_spacing=self.mirror_bolt_spacing,
            unit_cost=UnitCosts(**self.unit_cost.model_dump()),
        )

    @classmethod
    def from_input_parameters(cls, params: InputParameters) -> "StructureParams":
        return cls(
            square_side_length=params.square_side_length,
            base_cut_back_length=params.base_cut_back_length,
            angle_ABC_deg=rad_to_deg(params.angle_ABC),
            frame_cross_section=params.frame_cross_section,
            frame_wall_thickness=params.frame_wall_thickness,
            metal_density=params.metal_density,
            shoulder_height=params.shoulder_height,
            mirror_bolt_spacing=params.mirror_bolt_spacing,
            unit_cost=UnitCostData(**dataclasses.asdict(params.unit_cost)),
        )


class EvaluationResult(BaseModel):
    """Complete evaluation result."""
    success: bool
    error: Optional[str] = None
    params: Optional[Dict[str, Any]] = None
    output: Optional[Dict[str, Any]] = None


class WindSample(BaseModel):
    speed_mph: float
    speed_ft_s: float
    pressure_psf: float
    force_xy_lbf: float
    force_yz_lbf: float


class WindResult(BaseModel):
    total_surface_area_XY: float
    total_surface_area_YZ: float
    samples: List[WindSample]


# =============================================================================
# Evaluation
# =============================================================================

def _json_safe(value):
    """Replace non-finite floats (e.g. an infinite aspect ratio) with None."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return value


def output_to_dict(output: OutputParameters) -> Dict[str, Any]:
    return _json_safe(dataclasses.asdict(output))


def evaluate_or_422(params: StructureParams) -> OutputParameters:
    """Evaluate, turning input and geometry failures into HTTP 422."""
    try:
        return evaluate_structure(params.to_input_parameters())
    except TetraPairError as e:
        logger.info("Evaluation rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e))


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "TetraPair API"}


@app.get("/api/defaults", response_model=StructureParams)
async def defaults():
    """Default input parameters."""
    return StructureParams.from_input_parameters(InputParameters())


@app.post("/api/evaluate", response_model=EvaluationResult)
async def evaluate(params: StructureParams):
    """Evaluate the structure and return every output field."""
    output = evaluate_or_422(params)
    return EvaluationResult(
        success=True,
        params=params.model_dump(),
        output=output_to_dict(output),
    )


@app.post("/api/wind", response_model=WindResult)
async def wind(params: StructureParams):
    """Wind force sweep over the default speed range."""
    output = evaluate_or_422(params)
    sweep = wind_force_sweep(output.wind)
    return WindResult(
        total_surface_area_XY=output.wind.total_surface_area_XY,
        total_surface_area_YZ=output.wind.total_surface_area_YZ,
        samples=[WindSample(**row) for row in sweep.to_dict(orient='records')],
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
