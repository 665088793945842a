"""Optional matplotlib front end for plot commands.

Matplotlib is an optional dependency; the functions here raise
``RuntimeError`` when it is missing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence

import numpy as np

from .commands import CommentCommand, MatrixPlotCommand, MatrixPlotType, PlotCommand
from .sequence import PlotSequence

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

try:
    from matplotlib import pyplot as plt
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False


def _require_matplotlib() -> None:
    if not HAS_MATPLOTLIB:
        raise RuntimeError(
            "matplotlib required for plotting; install with pip install matplotlib"
        )


def create_matrix_figure(grid: tuple[int, int] = (1, 1), size: float = 4.0) -> "Figure":
    """
    Create a figure with ``grid[0] x grid[1]`` axes for matrix plots.

    Raises
    ------
    RuntimeError
        If matplotlib is not installed.
    """
    _require_matplotlib()
    rows, cols = grid
    fig, _ = plt.subplots(rows, cols, figsize=(size * cols, size * rows), squeeze=False)
    return fig


def _draw_matrix(ax: "Axes", command: MatrixPlotCommand) -> None:
    if command.plot_type is MatrixPlotType.STRUCTURE:
        ax.imshow(
            command.data.astype(float),
            cmap="Greys",
            vmin=0.0,
            vmax=1.0,
            interpolation="nearest",
        )
    else:
        # NaN marks log cells without magnitude; masked cells stay blank.
        image = ax.imshow(
            np.ma.masked_invalid(command.data),
            cmap="viridis",
            interpolation="nearest",
        )
        if command.colorbar:
            ax.figure.colorbar(image, ax=ax)
    ax.set_xticks(range(command.shape[1]))
    ax.set_yticks(range(command.shape[0]))


def draw_commands(
    commands: Iterable[PlotCommand],
    axes: Optional[Sequence["Axes"]] = None,
) -> List["Axes"]:
    """
    Draw commands in order; each comment titles the next matrix plot.

    Parameters
    ----------
    commands:
        Commands from :func:`~solvercore.viz.render.render_matrix` or a
        :class:`~solvercore.viz.sequence.PlotSequence`.
    axes:
        Axes to draw into, one per matrix plot. If None, a single-row figure
        is created.

    Returns
    -------
    List[Axes]
        Axes that received a plot, in command order.

    Raises
    ------
    RuntimeError
        If matplotlib is not installed.
    ValueError
        If fewer axes than matrix plots are given.
    """
    _require_matplotlib()
    commands = list(commands)
    n_plots = sum(isinstance(c, MatrixPlotCommand) for c in commands)
    if axes is None:
        fig = create_matrix_figure((1, max(n_plots, 1)))
        axes = list(fig.axes)
    else:
        axes = list(np.ravel(axes))
    if len(axes) < n_plots:
        raise ValueError(f"{n_plots} matrix plots but only {len(axes)} axes")

    used: List["Axes"] = []
    title: Optional[str] = None
    for command in commands:
        if isinstance(command, CommentCommand):
            title = command.text
            continue
        ax = axes[len(used)]
        _draw_matrix(ax, command)
        if title is not None:
            ax.set_title(title, fontsize=11)
            title = None
        used.append(ax)
    return used


def draw_sequence(sequence: PlotSequence, size: float = 4.0) -> "Figure":
    """Draw a :class:`PlotSequence` on a new figure laid out on its grid."""
    fig = create_matrix_figure(sequence.grid, size=size)
    draw_commands(sequence, axes=fig.axes)
    plt.tight_layout()
    return fig


__all__ = [
    "HAS_MATPLOTLIB",
    "create_matrix_figure",
    "draw_commands",
    "draw_sequence",
]
