# tetra_pair/config.py
"""
Analysis configuration and constants.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class AnalysisConfig:
    """Global analysis configuration."""

    # Package metadata
    app_name: str = "TetraPair"
    app_subtitle: str = "Mirrored Tetrahedron Frame Evaluator"
    version: str = "0.1.0"

    # Geometry validation
    law_of_sines_tolerance: float = 1e-3  # absolute, on sine products

    # Frame estimate: ~3 braces per triangle, expressed as a multiple of BA
    reinforce_factor: float = 1.6

    # Wind model
    wind_speed_range_mph: Tuple[float, float] = (5.0, 100.0)
    wind_speed_step_mph: float = 5.0
    mph_to_ft_per_sec: float = 1.46667
    dynamic_pressure_coeff: float = 0.00256  # lb/ft^2 per (ft/s)^2
    drag_coefficient: float = 1.0

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Global config instance
CONFIG = AnalysisConfig()
