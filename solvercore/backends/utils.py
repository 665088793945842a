"""Finite-difference derivatives for problems that provide none."""

from __future__ import annotations

from typing import Callable

import numpy as np

from ..errors import DimensionMismatchError

Array = np.ndarray

# Gradient norms below this count as converged whatever tolerance is set.
ATOL = 1e-10


def converged(grad_norm: float, tol: float) -> bool:
    return grad_norm <= max(tol, ATOL)


def approx_jacobian(fun: Callable[[Array], Array], x: Array, eps: float = 1e-6) -> Array:
    """Central-difference Jacobian of a vector function, shape ``(m, n)``."""
    if eps <= 0:
        raise ValueError("eps must be positive")
    x = np.asarray(x, dtype=float).reshape(-1)
    columns = []
    for j in range(x.size):
        shift = np.zeros_like(x)
        shift[j] = eps
        ahead = np.atleast_1d(np.asarray(fun(x + shift), dtype=float))
        behind = np.atleast_1d(np.asarray(fun(x - shift), dtype=float))
        columns.append((ahead - behind) / (2.0 * eps))
    if not columns:
        rows = np.atleast_1d(np.asarray(fun(x), dtype=float)).size
        return np.zeros((rows, 0))
    return np.stack(columns, axis=1)


def approx_grad(fun: Callable[[Array], float], x: Array, eps: float = 1e-6) -> Array:
    """Central-difference gradient of a scalar function."""
    jac = approx_jacobian(fun, x, eps)
    if jac.shape[0] != 1:
        raise DimensionMismatchError(f"expected a scalar function, got {jac.shape[0]} outputs")
    return jac[0]


__all__ = ["ATOL", "converged", "approx_grad", "approx_jacobian"]
