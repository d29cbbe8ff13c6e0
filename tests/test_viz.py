# File: tests/test_viz.py
"""
Smoke tests for the plots (Agg backend, no display needed).
"""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from tetra_pair import evaluate_structure, get_default_input_parameters, wind_force_sweep
from tetra_pair.viz import plot_structure, plot_wind_forces


def test_plot_structure_draws_both_tetrahedra(tmp_path):
    out = evaluate_structure(get_default_input_parameters())
    path = tmp_path / "plots" / "structure.png"

    ax = plot_structure(out, save_path=str(path))

    # 6 edges per tetrahedron + walkway
    assert len(ax.lines) == 13
    assert path.exists()
    plt.close('all')


def test_plot_wind_forces(tmp_path):
    sweep = wind_force_sweep(evaluate_structure(get_default_input_parameters()).wind)
    path = tmp_path / "wind.png"

    ax = plot_wind_forces(sweep, save_path=str(path))

    assert len(ax.lines) == 2
    assert path.exists()
    plt.close('all')


def test_plots_share_a_figure():
    out = evaluate_structure(get_default_input_parameters())
    fig = plt.figure()

    ax3d = plot_structure(out, ax=fig.add_subplot(1, 2, 1, projection='3d'))
    ax2d = plot_wind_forces(wind_force_sweep(out.wind), ax=fig.add_subplot(1, 2, 2))

    assert ax3d.figure is fig
    assert ax2d.figure is fig
    plt.close(fig)


def test_cli_plot_export(tmp_path):
    from tetra_pair.cli import main

    path = tmp_path / "report.png"
    assert main(['--plot', str(path)]) == 0
    assert path.exists()
