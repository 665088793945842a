"""Problem description shared by all solvers.

A problem is never modified by a solver; copies of a solver share the same
problem object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

import numpy as np

from ..errors import DimensionMismatchError

Array = np.ndarray
Function = Callable[[Array], Array]
Gradient = Callable[[Array], Array]
Jacobian = Callable[[Array], Array]


@dataclass(frozen=True)
class Constraint:
    """Constraint ``lower <= g(x) <= upper`` on a scalar-valued ``g``."""

    function: Callable[[Array], float]
    lower: float = -np.inf
    upper: float = np.inf
    name: str = ""

    def violation(self, x: Array) -> float:
        """Distance of ``g(x)`` to the feasible interval (0 when satisfied)."""
        g = float(self.function(x))
        return max(self.lower - g, g - self.upper, 0.0)


@dataclass(frozen=True, eq=False)
class Problem:
    """
    Container describing an optimization problem.

    Attributes:
        function: Maps an argument of size ``input_size`` to a vector of size
            ``output_size``.
        input_size: Dimension of the argument.
        output_size: Dimension of the function value.
        gradient: Optional gradient of a scalar function.
        jacobian: Optional Jacobian, shape ``(output_size, input_size)``.
        starting_point: Optional initial argument.
        constraints: Constraints the argument should satisfy.
        name: Label used in reports.
    """

    function: Function
    input_size: int
    output_size: int = 1
    gradient: Optional[Gradient] = None
    jacobian: Optional[Jacobian] = None
    starting_point: Optional[Array] = None
    constraints: Tuple[Constraint, ...] = field(default_factory=tuple)
    name: str = ""

    def __post_init__(self) -> None:
        if self.input_size < 0 or self.output_size < 0:
            raise ValueError("problem sizes must be non-negative")
        object.__setattr__(self, "constraints", tuple(self.constraints))
        if self.starting_point is not None:
            x0 = np.array(self.starting_point, dtype=float).reshape(-1)
            if x0.size != self.input_size:
                raise DimensionMismatchError(
                    f"starting point has size {x0.size}, expected {self.input_size}"
                )
            x0.setflags(write=False)
            object.__setattr__(self, "starting_point", x0)

    @classmethod
    def scalar(
        cls,
        fun: Callable[[Array], float],
        dim: int,
        grad: Optional[Gradient] = None,
        **kwargs,
    ) -> "Problem":
        """Problem with a single scalar objective."""
        return cls(
            function=lambda x: np.atleast_1d(fun(x)),
            input_size=dim,
            output_size=1,
            gradient=grad,
            **kwargs,
        )

    def _check_argument(self, x: Array) -> Array:
        x = np.asarray(x, dtype=float).reshape(-1)
        if x.size != self.input_size:
            raise DimensionMismatchError(
                f"argument has size {x.size}, expected {self.input_size}"
            )
        return x

    def evaluate(self, x: Array) -> Array:
        """Evaluate the function, checking argument and result sizes."""
        x = self._check_argument(x)
        value = np.atleast_1d(np.asarray(self.function(x), dtype=float)).reshape(-1)
        if value.size != self.output_size:
            raise DimensionMismatchError(
                f"function returned {value.size} values, expected {self.output_size}"
            )
        return value

    def evaluate_constraints(self, x: Array) -> Array:
        x = self._check_argument(x)
        return np.array([float(c.function(x)) for c in self.constraints], dtype=float)

    def constraint_violation(self, x: Array) -> float:
        """Largest violation over all constraints (0 when feasible)."""
        x = self._check_argument(x)
        return max((c.violation(x) for c in self.constraints), default=0.0)


__all__ = ["Array", "Function", "Gradient", "Jacobian", "Constraint", "Problem"]
