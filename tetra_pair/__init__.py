# tetra_pair - Mirrored Tetrahedron Frame Evaluator
"""
TETRA_PAIR: Geometry, Frame and Cost Model of a Mirrored Tetrahedron Pair
=========================================================================

This package provides:
- Closed-form solving of the tetrahedron from square/cut-back/angle inputs
- 3D vertex placement of both tetrahedra (mirrored across the walkway)
- Frame, mirror, wind and cost roll-ups
- A memoizing model, a text report, parameter sweeps, plots and a CLI

ARCHITECTURE:
-------------
    kernel/         Stateless math helpers (sq, unit conversions, vectors)
    model.py        InputParameters, UnitCosts, defaults, input validation
    geometry/       Edge/angle solver, law-of-sines check, vertex placement
    metrics.py      Shape, dihedral, frame, mirror, wind and total metrics
    evaluate.py     The pure evaluation pipeline -> OutputParameters
    structure.py    StructureModel: memoized evaluation
    wind.py         Wind pressure/force and the speed sweep
    report.py       Text report
    explore.py      One-parameter sweeps into DataFrames
    viz.py          Matplotlib plots
    cli.py          Command-line entry point
"""

from .errors import TetraPairError, InvalidInputError, GeometryInconsistencyError
from .model import InputParameters, UnitCosts, get_default_input_parameters, validate_input_parameters
from .evaluate import OutputParameters, evaluate_structure
from .structure import StructureModel
from .report import format_output_parameters, print_output_parameters
from .wind import wind_force_sweep

__version__ = "0.1.0"

__all__ = [
    'TetraPairError', 'InvalidInputError', 'GeometryInconsistencyError',
    'InputParameters', 'UnitCosts', 'get_default_input_parameters', 'validate_input_parameters',
    'OutputParameters', 'evaluate_structure', 'StructureModel',
    'format_output_parameters', 'print_output_parameters', 'wind_force_sweep',
]
