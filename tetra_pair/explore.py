# tetra_pair/explore.py
"""
EXPLORE: One-Parameter Design Sweeps
====================================

PURPOSE:
--------
Evaluate the structure over a range of values of one input parameter and
collect the results in a DataFrame, one row per value. Useful for seeing
how cost, mass and walkway clearance trade against size and opening angle.

WORKFLOW:
---------
1. Start from a base InputParameters (defaults if none given)
2. For each value, replace the named field and evaluate
3. Flatten the key outputs into a row; failed evaluations keep their
   inputs with ok=False and the reason

EXAMPLE:
--------
    df = sweep_parameter('square_side_length', np.linspace(12, 20, 9))
    df[['square_side_length', 'total_cost', 'height']]
"""

import dataclasses
from typing import Any, Dict, Iterable, Optional

import pandas as pd
from tqdm import tqdm

from .errors import TetraPairError
from .evaluate import OutputParameters, evaluate_structure
from .logger_config import get_logger
from .model import InputParameters, get_default_input_parameters

logger = get_logger(__name__)

# Scalar inputs that may be swept
SWEEPABLE = (
    'square_side_length',
    'base_cut_back_length',
    'angle_ABC',
    'frame_wall_thickness',
    'metal_density',
    'shoulder_height',
    'mirror_bolt_spacing',
)


def flatten_output(output: OutputParameters) -> Dict[str, float]:
    """Pick the headline scalars of an evaluation for tabulation."""
    return {
        'length_OB': output.edge_length.OB,
        'length_BA': output.edge_length.BA,
        'length_OA': output.edge_length.OA,
        'length_AC': output.edge_length.AC,
        'height': output.overall_structure.height,
        'footprint_x': output.overall_structure.footprint[0],
        'footprint_z': output.overall_structure.footprint[1],
        'footprint_area': output.overall_structure.footprint_area,
        'walkway_base_width': output.overall_structure.walkway_base_width,
        'walkway_shoulder_width': output.overall_structure.walkway_shoulder_width,
        'angle_BOA_BOC': output.dihedral_angle.angle_BOA_BOC,
        'angle_BOA_ABC': output.dihedral_angle.angle_BOA_ABC,
        'frame_total_length': output.frame.total_length,
        'frame_metal_cost': output.frame.metal_cost,
        'mirror_surface_area': output.mirror.surface_area,
        'mirror_cost': output.mirror.cost,
        'wind_area_xy': output.wind.total_surface_area_XY,
        'wind_area_yz': output.wind.total_surface_area_YZ,
        'total_mass': output.total.mass,
        'total_cost': output.total.cost,
    }


def sweep_parameter(
    name: str,
    values: Iterable[float],
    base: Optional[InputParameters] = None,
    show_progress: bool = False,
) -> pd.DataFrame:
    """
    Evaluate the structure for each value of one scalar input.

    Parameters:
    -----------
    name : str
        Field of InputParameters to vary (one of SWEEPABLE)
    values : Iterable[float]
        Values to try
    base : Optional[InputParameters]
        Inputs for every other field; defaults if None
    show_progress : bool
        Whether to show a progress bar

    Returns:
    --------
    pd.DataFrame
        One row per value: the swept value, 'ok', 'reason' and the
        columns of flatten_output() (NaN where evaluation failed)

    Raises:
    -------
    ValueError
        If ``name`` is not a sweepable field
    """
    if name not in SWEEPABLE:
        raise ValueError(f"Cannot sweep {name!r}; choose one of {', '.join(SWEEPABLE)}")

    if base is None:
        base = get_default_input_parameters()

    values = list(values)
    iterator = tqdm(values, desc=f"Sweeping {name}") if show_progress else values

    rows = []
    for value in iterator:
        params = dataclasses.replace(base, **{name: float(value)})
        row: Dict[str, Any] = {name: float(value)}
        try:
            output = evaluate_structure(params)
        except TetraPairError as e:
            logger.info("Sweep point %s=%s failed: %s", name, value, e)
            row.update({'ok': False, 'reason': str(e)})
        else:
            row.update({'ok': True, 'reason': ''})
            row.update(flatten_output(output))
        rows.append(row)

    return pd.DataFrame(rows)
