"""Reference solver backends built on the :class:`~solvercore.solver.Solver` contract."""

from .gradient import GradientDescentSolver
from .line_search import LineSearchResult, backtracking_armijo
from .utils import approx_grad, approx_jacobian

__all__ = [
    "GradientDescentSolver",
    "LineSearchResult",
    "approx_grad",
    "approx_jacobian",
    "backtracking_armijo",
]
