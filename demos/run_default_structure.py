#!/usr/bin/env python3
"""
RUN_DEFAULT_STRUCTURE: Evaluate the Reference Design
====================================================

This demo walks through one evaluation:
1. Build the default inputs (16 ft square, 2 ft cut back, 110 degrees)
2. Evaluate through the memoizing StructureModel
3. Print the full report
4. Save the wind sweep and plots

Run with:
    python demos/run_default_structure.py

Outputs:
    artifacts/wind_sweep.csv      - Wind force at 5..100 mph
    artifacts/structure.png       - 3D line drawing of both tetrahedra
    artifacts/wind_forces.png     - Wind force vs speed
"""

import os
import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tetra_pair import StructureModel, print_output_parameters, wind_force_sweep
from tetra_pair.viz import plot_structure, plot_wind_forces


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {text}")
    print("=" * 70)


def main():
    print_header("MIRRORED TETRAHEDRON PAIR: REFERENCE DESIGN")

    model = StructureModel()
    if model.evaluate():
        print(f"ERROR: {model.last_error}")
        return 1

    output = model.get_output_parameters()
    print_output_parameters(output)

    print_header("ARTIFACTS")
    os.makedirs('artifacts', exist_ok=True)

    sweep = wind_force_sweep(output.wind)
    sweep.to_csv('artifacts/wind_sweep.csv', index=False)
    print("Wind sweep saved to: artifacts/wind_sweep.csv")

    plot_structure(output, save_path='artifacts/structure.png')
    plt.close('all')
    print("Structure plot saved to: artifacts/structure.png")

    plot_wind_forces(sweep, save_path='artifacts/wind_forces.png')
    plt.close('all')
    print("Wind plot saved to: artifacts/wind_forces.png")

    return 0


if __name__ == "__main__":
    sys.exit(main())
