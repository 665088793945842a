"""Dense and sparse matrix views consumed by the renderer.

A view answers two questions for every cell: which value it holds
(unstored sparse cells hold an implicit zero) and whether it is stored at
all. A sparse view keeps explicitly inserted zeros as stored cells.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Optional, Tuple, Union

import numpy as np
import torch

from ..backends.utils import approx_jacobian
from ..errors import DimensionMismatchError
from ..solver.problem import Problem


class DenseMatrixView:
    """Matrix where every cell is stored.

    ``data`` is only checked when values are requested, so a ragged nested
    sequence is reported by the renderer rather than at construction.
    """

    def __init__(self, data: Any) -> None:
        self.data = data

    def values(self) -> np.ndarray:
        # An object array keeps ragged rows apart instead of failing the float cast.
        cells = np.array(self.data, dtype=object)
        if cells.ndim != 2:
            raise DimensionMismatchError(
                f"expected a 2-D matrix with rows of equal length, got {cells.ndim} dimension(s)"
            )
        if any(isinstance(cell, (str, bytes)) for cell in cells.flat):
            raise TypeError("dense matrix cells must be numbers, not strings")
        try:
            return cells.astype(float)
        except (TypeError, ValueError) as exc:
            raise TypeError(f"dense matrix cells must be real numbers: {exc}") from exc

    def structure(self) -> np.ndarray:
        return np.ones(self.shape, dtype=bool)

    @property
    def shape(self) -> Tuple[int, int]:
        rows, cols = self.values().shape
        return rows, cols


class SparseMatrixView:
    """
    Matrix where only inserted cells are stored.

    Example
    -------
    >>> m = SparseMatrixView(2, 2)
    >>> m.insert(0, 0, 0.0)
    >>> m.stored(0, 0), m.stored(1, 1)
    (True, False)
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        entries: Optional[Dict[Tuple[int, int], float]] = None,
    ) -> None:
        if rows < 0 or cols < 0:
            raise DimensionMismatchError(f"invalid sparse matrix shape ({rows}, {cols})")
        self.rows = int(rows)
        self.cols = int(cols)
        self._entries: Dict[Tuple[int, int], float] = {}
        for (r, c), value in (entries or {}).items():
            self.insert(r, c, value)

    def _check(self, r: int, c: int) -> Tuple[int, int]:
        r, c = int(r), int(c)
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise DimensionMismatchError(
                f"cell ({r}, {c}) outside a {self.rows}x{self.cols} matrix"
            )
        return r, c

    def insert(self, r: int, c: int, value: float) -> None:
        """Store ``value`` at ``(r, c)``, replacing any stored value."""
        self._entries[self._check(r, c)] = float(value)

    def add(self, r: int, c: int, value: float) -> None:
        """Add ``value`` to the cell, storing it if it was not stored."""
        key = self._check(r, c)
        self._entries[key] = self._entries.get(key, 0.0) + float(value)

    def stored(self, r: int, c: int) -> bool:
        return (int(r), int(c)) in self._entries

    def entries(self) -> Iterator[Tuple[Tuple[int, int], float]]:
        """Yield ``((row, col), value)`` for stored cells in insertion order."""
        yield from self._entries.items()

    @property
    def nnz(self) -> int:
        """Number of stored cells, explicit zeros included."""
        return len(self._entries)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def _validated(self) -> None:
        for r, c in self._entries:
            self._check(r, c)

    def values(self) -> np.ndarray:
        self._validated()
        arr = np.zeros(self.shape, dtype=float)
        for (r, c), value in self._entries.items():
            arr[r, c] = value
        return arr

    def structure(self) -> np.ndarray:
        self._validated()
        mask = np.zeros(self.shape, dtype=bool)
        for r, c in self._entries:
            mask[r, c] = True
        return mask


MatrixView = Union[DenseMatrixView, SparseMatrixView]


def _from_torch(tensor: torch.Tensor) -> MatrixView:
    if tensor.dim() != 2:
        raise DimensionMismatchError(f"expected a 2-D tensor, got {tensor.dim()} dimension(s)")
    if tensor.layout == torch.strided:
        return DenseMatrixView(tensor.detach().cpu().numpy())
    if not tensor.is_sparse:
        raise TypeError(f"unsupported tensor layout {tensor.layout}; convert to COO first")
    coo = tensor.detach().coalesce()
    indices = coo.indices().cpu().numpy()
    values = coo.values().cpu().numpy()
    view = SparseMatrixView(*coo.shape)
    for (r, c), value in zip(indices.T, values):
        view.insert(r, c, value)
    return view


def as_matrix_view(matrix: Any) -> MatrixView:
    """
    Wrap ``matrix`` in a view.

    Accepts views, NumPy arrays, nested sequences, torch tensors (strided or
    sparse COO) and objects with a ``tocoo()`` method such as SciPy sparse
    matrices. Stored zeros of sparse inputs stay stored.
    """
    if isinstance(matrix, (DenseMatrixView, SparseMatrixView)):
        return matrix
    if isinstance(matrix, torch.Tensor):
        return _from_torch(matrix)
    if hasattr(matrix, "tocoo"):
        coo = matrix.tocoo()
        view = SparseMatrixView(*coo.shape)
        for r, c, value in zip(coo.row, coo.col, coo.data):
            view.add(r, c, value)
        return view
    return DenseMatrixView(matrix)


def jacobian_matrix(problem: Problem, x: Any) -> DenseMatrixView:
    """Jacobian of ``problem`` at ``x``, finite differences if none is given."""
    x = np.asarray(x, dtype=float).reshape(-1)
    if problem.jacobian is not None:
        jac = np.asarray(problem.jacobian(x), dtype=float)
    else:
        jac = approx_jacobian(problem.evaluate, x)
    expected = (problem.output_size, problem.input_size)
    if jac.shape != expected:
        raise DimensionMismatchError(f"jacobian has shape {jac.shape}, expected {expected}")
    return DenseMatrixView(jac)


__all__ = [
    "DenseMatrixView",
    "SparseMatrixView",
    "MatrixView",
    "as_matrix_view",
    "jacobian_matrix",
]
