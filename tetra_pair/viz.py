# tetra_pair/viz.py
"""
VISUALIZATION: Structure and Wind Plots
=======================================

PURPOSE:
--------
Two figures that make a report readable at a glance:

- plot_structure(): 3D line drawing of both tetrahedra, the shared apex
  and the walkway between B0 and B1
- plot_wind_forces(): wind force on both projected areas vs wind speed

Both take an optional Axes so they can be combined into one figure, and
an optional save path (directories are created as needed).
"""

import os
from typing import Optional

import matplotlib.pyplot as plt
import pandas as pd

from .evaluate import OutputParameters

COLORS = {
    'first': '#2C3E50',       # Dark blue-gray (tetrahedron 0)
    'second': '#3498DB',      # Sky blue (mirrored tetrahedron 1)
    'walkway': '#E67E22',     # Orange
    'apex': '#E74C3C',        # Coral red
    'wind_xy': '#9B59B6',     # Purple
    'wind_yz': '#27AE60',     # Green
    'grid': '#E0E0E0',
}

# Edges of one tetrahedron, as names of VertexCoords fields
_EDGES = (('O', 'A'), ('O', 'B'), ('O', 'C'), ('A', 'B'), ('B', 'C'), ('A', 'C'))


def _save(fig, save_path: Optional[str]) -> None:
    if save_path is None:
        return
    directory = os.path.dirname(save_path)
    os.makedirs(directory if directory else '.', exist_ok=True)
    fig.tight_layout()
    fig.savefig(save_path, dpi=150, bbox_inches='tight')


def plot_structure(
    output: OutputParameters,
    ax=None,
    title: str = "Mirrored Tetrahedron Pair",
    save_path: Optional[str] = None,
):
    """
    Draw both tetrahedra in 3D.

    The plot maps model axes to matplotlib axes as (x, z, y) so that the
    model's up direction (y) is drawn vertically.

    Parameters:
    -----------
    output : OutputParameters
        Evaluated structure
    ax : Optional[Axes3D]
        Axes with projection='3d'; a new figure is created if None
    title : str
        Plot title
    save_path : Optional[str]
        If given, the figure is saved there

    Returns:
    --------
    Axes3D
        The axes drawn on
    """
    if ax is None:
        fig = plt.figure(figsize=(8, 6))
        ax = fig.add_subplot(111, projection='3d')
    else:
        fig = ax.figure

    coords = output.vertex_coord

    def vertex(name: str, suffix: str):
        return coords.O if name == 'O' else getattr(coords, f"{name}{suffix}")

    for suffix, color, label in (('0', COLORS['first'], 'Tetrahedron 0'),
                                 ('1', COLORS['second'], 'Tetrahedron 1')):
        for i, (p, q) in enumerate(_EDGES):
            v0, v1 = vertex(p, suffix), vertex(q, suffix)
            ax.plot([v0.x, v1.x], [v0.z, v1.z], [v0.y, v1.y],
                    color=color, linewidth=2, label=label if i == 0 else None)

    ax.plot([coords.B0.x, coords.B1.x], [coords.B0.z, coords.B1.z], [coords.B0.y, coords.B1.y],
            color=COLORS['walkway'], linewidth=2, linestyle='--', label='Walkway')
    ax.scatter([coords.O.x], [coords.O.z], [coords.O.y], color=COLORS['apex'], s=40, label='Apex O')

    ax.set_xlabel('x (ft)')
    ax.set_ylabel('z (ft)')
    ax.set_zlabel('height (ft)')
    ax.set_title(title)
    ax.legend(loc='upper left', fontsize=8)

    _save(fig, save_path)
    return ax


def plot_wind_forces(
    sweep: pd.DataFrame,
    ax=None,
    title: str = "Wind Force vs Speed",
    save_path: Optional[str] = None,
):
    """
    Plot wind force on both projected areas against wind speed.

    Parameters:
    -----------
    sweep : pd.DataFrame
        Output of wind.wind_force_sweep()
    ax : Optional[Axes]
        Axes to draw on; a new figure is created if None
    save_path : Optional[str]
        If given, the figure is saved there

    Returns:
    --------
    Axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))
    else:
        fig = ax.figure

    ax.plot(sweep['speed_mph'], sweep['force_xy_lbf'], marker='o', markersize=4,
            color=COLORS['wind_xy'], label='XY plane (wind along z)')
    ax.plot(sweep['speed_mph'], sweep['force_yz_lbf'], marker='s', markersize=4,
            color=COLORS['wind_yz'], label='YZ plane (wind along x)')

    ax.set_xlabel('Wind speed (mph)')
    ax.set_ylabel('Force (lbf)')
    ax.set_title(title)
    ax.grid(True, color=COLORS['grid'])
    ax.legend()

    _save(fig, save_path)
    return ax
