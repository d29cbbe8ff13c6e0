# tetra_pair/cli.py
"""
Command-line entry point: evaluate the structure and print the report.

Run with:
    python -m tetra_pair
    python -m tetra_pair --square-side 18 --angle 100 --csv artifacts/wind.csv
"""

import argparse
import dataclasses
import sys
from typing import List, Optional

from .errors import TetraPairError
from .kernel.vecmath import deg_to_rad
from .logger_config import get_logger, set_log_level
from .model import InputParameters, get_default_input_parameters
from .report import print_output_parameters
from .structure import StructureModel
from .wind import wind_force_sweep

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tetra-pair',
        description='Evaluate a mirrored tetrahedron-pair frame and print its report',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m tetra_pair
  python -m tetra_pair --square-side 18 --cut-back 1.5 --angle 100
  python -m tetra_pair --csv artifacts/wind.csv --plot artifacts/structure.png

With no options the reference design (16 ft square, 2 ft cut back,
110 degrees at B) is evaluated.
        """
    )
    parser.add_argument('--square-side', type=float, default=None,
                        help='Side of the starting square in ft (default: 16)')
    parser.add_argument('--cut-back', type=float, default=None,
                        help='Cut back on the square base in ft (default: 2)')
    parser.add_argument('--angle', type=float, default=None,
                        help='Ground-plane angle ABC in degrees (default: 110)')
    parser.add_argument('--shoulder-height', type=float, default=None,
                        help='Height for the walkway shoulder width in ft (default: 5)')
    parser.add_argument('--bolt-spacing', type=float, default=None,
                        help='Mirror bolt spacing along the frame in ft (default: 2)')
    parser.add_argument('--csv', default=None, metavar='PATH',
                        help='Write the wind force sweep to this CSV file')
    parser.add_argument('--plot', default=None, metavar='PATH',
                        help='Save structure and wind force plots to this image file')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: WARNING)')
    return parser


def params_from_args(args: argparse.Namespace) -> InputParameters:
    overrides = {}
    if args.square_side is not None:
        overrides['square_side_length'] = args.square_side
    if args.cut_back is not None:
        overrides['base_cut_back_length'] = args.cut_back
    if args.angle is not None:
        overrides['angle_ABC'] = deg_to_rad(args.angle)
    if args.shoulder_height is not None:
        overrides['shoulder_height'] = args.shoulder_height
    if args.bolt_spacing is not None:
        overrides['mirror_bolt_spacing'] = args.bolt_spacing
    return dataclasses.replace(get_default_input_parameters(), **overrides)


def _save_plots(output, path: str) -> None:
    # Imported here so a plain report never needs a plotting backend
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt

    from .viz import plot_structure, plot_wind_forces

    fig = plt.figure(figsize=(14, 6))
    plot_structure(output, ax=fig.add_subplot(1, 2, 1, projection='3d'))
    plot_wind_forces(wind_force_sweep(output.wind), ax=fig.add_subplot(1, 2, 2), save_path=path)
    plt.close(fig)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    set_log_level(args.log_level)

    model = StructureModel(params_from_args(args))
    if model.evaluate():
        print(f"ERROR: {model.last_error}")
        print("ERROR: Model evaluation error")
        return 1

    output = model.get_output_parameters()
    print_output_parameters(output)

    if args.csv:
        wind_force_sweep(output.wind).to_csv(args.csv, index=False)
        logger.info("Wind sweep written to %s", args.csv)

    if args.plot:
        _save_plots(output, args.plot)
        logger.info("Plots saved to %s", args.plot)

    return 0


if __name__ == '__main__':
    sys.exit(main())
