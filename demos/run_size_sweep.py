#!/usr/bin/env python3
"""
RUN_SIZE_SWEEP: How Size and Opening Angle Drive Cost
=====================================================

Sweeps the starting square side and the ground-plane angle at B one at a
time, holding every other input at its default, and prints the headline
numbers of each variant.

Run with:
    python demos/run_size_sweep.py
    python demos/run_size_sweep.py --out artifacts/sweeps.csv
"""

import argparse
import math
import os
import sys
from pathlib import Path

import numpy as np
import pandas as pd

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tetra_pair.explore import sweep_parameter


def main():
    parser = argparse.ArgumentParser(
        description='Sweep square size and opening angle of the tetrahedron pair',
    )
    parser.add_argument(
        '--out',
        default=None,
        help='Optional CSV path for the combined sweep results'
    )
    args = parser.parse_args()

    columns = ['ok', 'height', 'walkway_base_width', 'frame_total_length',
               'total_mass', 'total_cost']

    sizes = sweep_parameter('square_side_length', np.arange(12.0, 20.5, 1.0), show_progress=True)
    print("\nSquare side sweep (ft):")
    print(sizes[['square_side_length'] + columns].to_string(index=False, float_format='%.2f'))

    angles_deg = np.arange(60.0, 171.0, 10.0)
    angles = sweep_parameter('angle_ABC', np.radians(angles_deg), show_progress=True)
    angles.insert(0, 'angle_ABC_deg', angles['angle_ABC'] * 180.0 / math.pi)
    print("\nGround-plane angle sweep (deg):")
    print(angles[['angle_ABC_deg'] + columns].to_string(index=False, float_format='%.2f'))

    if args.out:
        os.makedirs(os.path.dirname(args.out) if os.path.dirname(args.out) else '.', exist_ok=True)
        combined = pd.concat([sizes.assign(sweep='square_side_length'),
                              angles.assign(sweep='angle_ABC')], ignore_index=True)
        combined.to_csv(args.out, index=False)
        print(f"\nResults saved to: {args.out}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
