"""Armijo backtracking line search (Nocedal & Wright, Algorithm 3.1)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

Array = np.ndarray


@dataclass(frozen=True)
class LineSearchResult:
    """Step accepted by the line search.

    ``success`` is False when the direction is not a descent direction or no
    trial step met the sufficient decrease condition; ``step`` is then the
    last (smallest) trial step.
    """

    step: float
    f_new: float
    nfev: int
    success: bool


def backtracking_armijo(
    f: Callable[[Array], float],
    x: Array,
    fx: float,
    direction: Array,
    slope: float,
    step0: float = 1.0,
    shrink: float = 0.5,
    c: float = 1e-4,
    max_backtracks: int = 50,
) -> LineSearchResult:
    """
    Shrink ``step0`` until ``f(x + step * direction)`` decreases enough.

    Parameters
    ----------
    fx:
        ``f(x)``, already known to the caller.
    slope:
        Directional derivative ``grad(x) . direction``; must be negative.
    """
    if not (0 < c < 1):
        raise ValueError("Armijo constant c must lie in (0, 1)")
    if not (0 < shrink < 1):
        raise ValueError("shrink factor must lie in (0, 1)")
    step = float(step0)
    if slope >= 0:
        return LineSearchResult(step, fx, 0, False)
    nfev = 0
    f_new = fx
    for _ in range(max_backtracks):
        f_new = float(f(x + step * direction))
        nfev += 1
        if f_new <= fx + c * step * slope:
            return LineSearchResult(step, f_new, nfev, True)
        step *= shrink
    return LineSearchResult(step, f_new, nfev, False)


__all__ = ["LineSearchResult", "backtracking_armijo"]
