# tetra_pair/wind.py
"""
WIND: Quasi-Static Side Force Sweep
===================================

PURPOSE:
--------
Estimate the wind force on the projected areas of the structure over a
range of wind speeds. This is a reporting tool, not a structural check.

MODEL:
------
    v  = mph x 1.46667                (ft/s)
    q  = 0.00256 x v²                 (lb/ft²)
    F  = q x Cd x A                   (lbf), Cd = 1.0

The sweep runs from 5 to 100 mph in 5 mph steps (20 samples).
"""

from typing import Optional, Sequence

import numpy as np
import pandas as pd

from .config import CONFIG
from .kernel.vecmath import sq
from .metrics import WindSurfaces


def mph_to_ft_per_sec(mph: float) -> float:
    return mph * CONFIG.mph_to_ft_per_sec


def wind_pressure(mph: float) -> float:
    """Dynamic wind pressure (lb/ft^2) at a wind speed in mph."""
    return sq(mph_to_ft_per_sec(mph)) * CONFIG.dynamic_pressure_coeff


def wind_force(surface_area: float, mph: float,
               drag_coefficient: float = CONFIG.drag_coefficient) -> float:
    """Force (lbf) on a projected area (ft^2) at a wind speed in mph."""
    return surface_area * wind_pressure(mph) * drag_coefficient


def wind_speeds() -> np.ndarray:
    """Sweep speeds in mph, both ends inclusive."""
    lo, hi = CONFIG.wind_speed_range_mph
    step = CONFIG.wind_speed_step_mph
    n = int(round((hi - lo) / step)) + 1
    return lo + step * np.arange(n, dtype=float)


def wind_force_sweep(
    wind: WindSurfaces,
    speeds: Optional[Sequence[float]] = None,
    drag_coefficient: float = CONFIG.drag_coefficient,
) -> pd.DataFrame:
    """
    Tabulate wind force on both projected areas over a speed sweep.

    Parameters:
    -----------
    wind : WindSurfaces
        Projected areas from the evaluation
    speeds : Optional[Sequence[float]]
        Wind speeds in mph; defaults to wind_speeds()
    drag_coefficient : float
        Cd applied to both planes

    Returns:
    --------
    pd.DataFrame
        Columns: speed_mph, speed_ft_s, pressure_psf, force_xy_lbf, force_yz_lbf
    """
    if speeds is None:
        speeds = wind_speeds()

    rows = []
    for mph in speeds:
        mph = float(mph)
        rows.append({
            'speed_mph': mph,
            'speed_ft_s': mph_to_ft_per_sec(mph),
            'pressure_psf': wind_pressure(mph),
            'force_xy_lbf': wind_force(wind.total_surface_area_XY, mph, drag_coefficient),
            'force_yz_lbf': wind_force(wind.total_surface_area_YZ, mph, drag_coefficient),
        })

    return pd.DataFrame(rows, columns=['speed_mph', 'speed_ft_s', 'pressure_psf',
                                       'force_xy_lbf', 'force_yz_lbf'])
