# File: tests/test_explore.py
"""
Test one-parameter sweeps.
"""

import math

import numpy as np
import pandas as pd
import pytest

from tetra_pair.evaluate import evaluate_structure
from tetra_pair.explore import flatten_output, sweep_parameter
from tetra_pair.model import get_default_input_parameters


def test_flatten_output_matches_evaluation():
    out = evaluate_structure(get_default_input_parameters())
    row = flatten_output(out)

    assert row['total_cost'] == out.total.cost
    assert row['height'] == out.overall_structure.height
    assert row['wind_area_xy'] == out.wind.total_surface_area_XY


def test_sweep_square_side():
    df = sweep_parameter('square_side_length', [12.0, 16.0, 20.0])

    assert isinstance(df, pd.DataFrame)
    assert len(df) == 3
    assert df['ok'].all()
    assert list(df['square_side_length']) == [12.0, 16.0, 20.0]
    assert df['total_cost'].is_monotonic_increasing


def test_sweep_default_point_matches_direct_evaluation():
    df = sweep_parameter('square_side_length', [16.0])
    out = evaluate_structure(get_default_input_parameters())

    assert df['total_cost'].iloc[0] == out.total.cost


def test_sweep_keeps_failed_points():
    angles = np.radians([90.0, 175.0])
    df = sweep_parameter('angle_ABC', angles)

    assert list(df['ok']) == [True, False]
    assert 'Invalid tetrahedron' in df['reason'].iloc[1]
    assert math.isnan(df['total_cost'].iloc[1])


def test_sweep_rejects_unknown_field():
    with pytest.raises(ValueError, match="Cannot sweep"):
        sweep_parameter('unit_cost', [1.0])
