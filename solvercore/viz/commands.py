"""Plot commands produced by the matrix renderer.

Commands are tool-agnostic: a front end (see
:mod:`solvercore.viz.matplotlib_backends`) turns them into actual drawing
calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

import numpy as np


class MatrixPlotType(Enum):
    """How matrix cells are interpreted."""

    VALUE = "value"
    LOG = "log"
    STRUCTURE = "structure"


@dataclass(frozen=True)
class CommentCommand:
    """Label attached to the plot that follows it."""

    text: str


@dataclass(frozen=True, eq=False)
class MatrixPlotCommand:
    """
    Matrix image.

    Attributes:
        data: Float grid for VALUE and LOG plots (``NaN`` marks cells without
            magnitude in LOG plots), boolean presence grid for STRUCTURE.
        plot_type: Interpretation used to build ``data``.
        colorbar: Whether the front end should draw a color scale.
    """

    data: np.ndarray
    plot_type: MatrixPlotType
    colorbar: bool

    def __post_init__(self) -> None:
        data = np.array(self.data)
        data.setflags(write=False)
        object.__setattr__(self, "data", data)

    @property
    def shape(self) -> Tuple[int, int]:
        rows, cols = self.data.shape
        return rows, cols


PlotCommand = Union[CommentCommand, MatrixPlotCommand]

__all__ = ["MatrixPlotType", "CommentCommand", "MatrixPlotCommand", "PlotCommand"]
