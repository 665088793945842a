"""Matrix visualization.

This module provides:
- Dense and sparse matrix views (explicit sparse zeros stay stored)
- Rendering of a matrix into plot commands in value, log or structure mode
- Plot sequences laid out on a subplot grid
- An optional matplotlib front end for the commands
"""

from .commands import CommentCommand, MatrixPlotCommand, MatrixPlotType, PlotCommand
from .matrix import (
    DenseMatrixView,
    MatrixView,
    SparseMatrixView,
    as_matrix_view,
    jacobian_matrix,
)
from .render import NO_MAGNITUDE, log_magnitude, render_matrix
from .sequence import PlotSequence

__all__ = [
    "CommentCommand",
    "DenseMatrixView",
    "MatrixPlotCommand",
    "MatrixPlotType",
    "MatrixView",
    "NO_MAGNITUDE",
    "PlotCommand",
    "PlotSequence",
    "SparseMatrixView",
    "as_matrix_view",
    "jacobian_matrix",
    "log_magnitude",
    "render_matrix",
]
