"""Ordered plot command sequences laid out on a subplot grid."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Tuple, Union

from .commands import CommentCommand, MatrixPlotCommand, MatrixPlotType, PlotCommand
from .render import render_matrix


class PlotSequence:
    """
    Commands destined for one figure with ``grid[0] x grid[1]`` subplots.

    Example
    -------
    >>> seq = PlotSequence(grid=(1, 2))
    >>> _ = seq.comment("Dense").plot_matrix([[1.0, 0.0], [0.0, 2.0]])
    >>> len(seq), seq.n_plots
    (2, 1)
    """

    def __init__(self, grid: Tuple[int, int] = (1, 1)) -> None:
        rows, cols = grid
        if rows < 1 or cols < 1:
            raise ValueError("grid must have at least one row and one column")
        self.grid = (int(rows), int(cols))
        self._commands: List[PlotCommand] = []

    @property
    def capacity(self) -> int:
        return self.grid[0] * self.grid[1]

    @property
    def n_plots(self) -> int:
        return sum(isinstance(c, MatrixPlotCommand) for c in self._commands)

    def append(self, command: PlotCommand) -> "PlotSequence":
        if isinstance(command, MatrixPlotCommand):
            if self.n_plots >= self.capacity:
                raise ValueError(f"grid {self.grid} holds at most {self.capacity} plots")
        elif not isinstance(command, CommentCommand):
            raise TypeError(f"not a plot command: {type(command).__name__}")
        self._commands.append(command)
        return self

    def extend(self, commands: Iterable[PlotCommand]) -> "PlotSequence":
        for command in commands:
            self.append(command)
        return self

    def comment(self, text: str) -> "PlotSequence":
        return self.append(CommentCommand(text))

    def plot_matrix(
        self,
        matrix: Any,
        mode: Union[MatrixPlotType, str] = MatrixPlotType.VALUE,
    ) -> "PlotSequence":
        return self.extend(render_matrix(matrix, mode))

    def __lshift__(self, other: Union[PlotCommand, Iterable[PlotCommand]]) -> "PlotSequence":
        if isinstance(other, (CommentCommand, MatrixPlotCommand)):
            return self.append(other)
        return self.extend(other)

    def __iter__(self) -> Iterator[PlotCommand]:
        return iter(list(self._commands))

    def __len__(self) -> int:
        return len(self._commands)

    def __getitem__(self, index: int) -> PlotCommand:
        return self._commands[index]


__all__ = ["PlotSequence"]
