"""Matrix rendering into plot commands.

Three interpretations are available:

- ``VALUE``: raw values, unstored cells are 0.
- ``LOG``: ``log10(|v|)``; cells equal to 0 (stored or not) become ``NaN``.
- ``STRUCTURE``: ``True`` for stored cells, ``False`` elsewhere. A stored 0
  is ``True``, an unstored cell is ``False``.
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

import numpy as np

from .commands import CommentCommand, MatrixPlotCommand, MatrixPlotType, PlotCommand
from .matrix import as_matrix_view

NO_MAGNITUDE = np.nan


def log_magnitude(values: np.ndarray) -> np.ndarray:
    """``log10(|values|)`` with ``NaN`` where a value is exactly zero."""
    out = np.full(values.shape, NO_MAGNITUDE, dtype=float)
    nonzero = values != 0
    out[nonzero] = np.log10(np.abs(values[nonzero]))
    return out


def render_matrix(
    matrix: Any,
    mode: Union[MatrixPlotType, str] = MatrixPlotType.VALUE,
    title: Optional[str] = None,
) -> List[PlotCommand]:
    """
    Render ``matrix`` into commands: an optional comment, then one plot.

    Parameters
    ----------
    matrix:
        A matrix view or anything :func:`~solvercore.viz.matrix.as_matrix_view`
        accepts.
    mode:
        Interpretation, as a :class:`MatrixPlotType` or its value string.
    title:
        Optional label emitted as a comment before the plot.

    Raises
    ------
    DimensionMismatchError
        If the matrix does not have a consistent 2-D shape.
    """
    mode = MatrixPlotType(mode)
    view = as_matrix_view(matrix)

    if mode is MatrixPlotType.STRUCTURE:
        command = MatrixPlotCommand(view.structure(), mode, colorbar=False)
    elif mode is MatrixPlotType.LOG:
        command = MatrixPlotCommand(log_magnitude(view.values()), mode, colorbar=True)
    else:
        command = MatrixPlotCommand(view.values(), mode, colorbar=True)

    commands: List[PlotCommand] = []
    if title is not None:
        commands.append(CommentCommand(title))
    commands.append(command)
    return commands


__all__ = ["NO_MAGNITUDE", "log_magnitude", "render_matrix"]
