# File: tests/test_wind.py
"""
Test the wind pressure model and the speed sweep.
"""

import numpy as np
import pandas as pd
import pytest

from tetra_pair.evaluate import evaluate_structure
from tetra_pair.metrics import WindSurfaces
from tetra_pair.model import get_default_input_parameters
from tetra_pair.wind import (
    mph_to_ft_per_sec,
    wind_pressure,
    wind_force,
    wind_speeds,
    wind_force_sweep,
)


def test_mph_conversion():
    assert mph_to_ft_per_sec(60.0) == pytest.approx(88.0, abs=1e-3)


def test_pressure_at_20_mph():
    """q = (20 * 1.46667)^2 * 0.00256."""
    expected = (20.0 * 1.46667) ** 2 * 0.00256

    assert wind_pressure(20.0) == pytest.approx(expected, rel=1e-12)
    assert wind_pressure(20.0) == pytest.approx(2.2027, abs=1e-4)


def test_force_scales_with_area_and_drag():
    q = wind_pressure(20.0)

    assert wind_force(100.0, 20.0) == pytest.approx(100.0 * q)
    assert wind_force(100.0, 20.0, drag_coefficient=1.5) == pytest.approx(150.0 * q)


def test_pressure_grows_with_square_of_speed():
    assert wind_pressure(40.0) == pytest.approx(4.0 * wind_pressure(20.0))


def test_speed_range():
    speeds = wind_speeds()

    assert len(speeds) == 20
    assert speeds[0] == 5.0
    assert speeds[-1] == 100.0
    assert np.allclose(np.diff(speeds), 5.0)


class TestSweep:

    def test_columns_and_rows(self):
        sweep = wind_force_sweep(WindSurfaces(total_surface_area_XY=100.0, total_surface_area_YZ=50.0))

        assert isinstance(sweep, pd.DataFrame)
        assert list(sweep.columns) == ['speed_mph', 'speed_ft_s', 'pressure_psf',
                                       'force_xy_lbf', 'force_yz_lbf']
        assert len(sweep) == 20

    def test_sample_at_20_mph(self):
        wind = evaluate_structure(get_default_input_parameters()).wind
        sweep = wind_force_sweep(wind)

        row = sweep[sweep['speed_mph'] == 20.0].iloc[0]
        pressure = (20.0 * 1.46667) ** 2 * 0.00256

        assert row['speed_ft_s'] == pytest.approx(29.3334)
        assert row['pressure_psf'] == pytest.approx(pressure)
        assert row['force_xy_lbf'] == pytest.approx(wind.total_surface_area_XY * pressure)
        assert row['force_yz_lbf'] == pytest.approx(wind.total_surface_area_YZ * pressure)

    def test_custom_speeds(self):
        sweep = wind_force_sweep(WindSurfaces(10.0, 10.0), speeds=[0.0, 10.0])

        assert list(sweep['speed_mph']) == [0.0, 10.0]
        assert sweep['force_xy_lbf'].iloc[0] == 0.0

    def test_forces_increase_with_speed(self):
        wind = evaluate_structure(get_default_input_parameters()).wind
        sweep = wind_force_sweep(wind)

        assert sweep['force_xy_lbf'].is_monotonic_increasing
        assert sweep['force_yz_lbf'].is_monotonic_increasing
