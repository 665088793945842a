"""Gradient descent backend with optional Armijo backtracking."""

from __future__ import annotations

import numpy as np

from ..logging import get_logger
from ..solver.base import Solver
from ..solver.outcome import Outcome, Result, SolverError
from ..solver.problem import Problem
from ..solver.state import IterationState
from .line_search import backtracking_armijo
from .utils import approx_grad, converged

logger = get_logger(__name__)

MAX_ITERATIONS = "gradient.max_iterations"
TOLERANCE = "gradient.tolerance"
STEP_SIZE = "gradient.step_size"
LINE_SEARCH = "gradient.line_search"


class GradientDescentSolver(Solver):
    """
    Minimize a scalar problem by steepest descent.

    Tuning values live in the parameter registry under ``gradient.*`` and are
    read at every ``solve()``. The backend calls the iteration callback once
    per iteration. Constraints are reported in the result but not enforced.
    """

    supports_iteration_callback = True

    def __init__(self, problem: Problem) -> None:
        super().__init__(problem)
        self.parameters.set(MAX_ITERATIONS, 1000, "maximum number of iterations")
        self.parameters.set(TOLERANCE, 1e-8, "gradient norm at which to stop (floored at 1e-10)")
        self.parameters.set(STEP_SIZE, 1.0, "initial step length")
        self.parameters.set(LINE_SEARCH, True, "use Armijo backtracking")

    def _objective(self, x: np.ndarray) -> float:
        return float(self.problem.evaluate(x)[0])

    def _gradient(self, x: np.ndarray) -> np.ndarray:
        problem = self.problem
        if problem.gradient is not None:
            return np.asarray(problem.gradient(x), dtype=float).reshape(-1)
        if problem.jacobian is not None:
            return np.asarray(problem.jacobian(x), dtype=float).reshape(-1)
        return approx_grad(self._objective, x)

    def _result(self, x: np.ndarray, fx: float) -> Result:
        return Result(
            x=x.copy(),
            value=[fx],
            constraints=self.problem.evaluate_constraints(x),
        )

    def impl_solve(self) -> Outcome:
        problem = self.problem
        if problem.output_size != 1:
            return SolverError(
                f"gradient descent needs a scalar objective, got {problem.output_size} outputs"
            )

        maxiter = int(self.parameters.value(MAX_ITERATIONS))
        tol = float(self.parameters.value(TOLERANCE))
        lr = float(self.parameters.value(STEP_SIZE))
        use_line_search = bool(self.parameters.value(LINE_SEARCH))
        if maxiter < 0 or tol < 0 or lr <= 0:
            return SolverError("invalid gradient descent parameters")

        if problem.starting_point is not None:
            x = np.array(problem.starting_point, dtype=float)
        else:
            x = np.zeros(problem.input_size)
        fx = self._objective(x)

        for nit in range(maxiter):
            grad = self._gradient(x)
            grad_norm = float(np.linalg.norm(grad))
            if converged(grad_norm, tol):
                logger.info("converged after %d iterations (|g|=%.3e)", nit, grad_norm)
                return self._result(x, fx)

            if use_line_search:
                search = backtracking_armijo(
                    self._objective, x, fx, -grad, -grad_norm**2, step0=lr
                )
                if not search.success:
                    logger.info("line search failed at iteration %d (|g|=%.3e)", nit, grad_norm)
                    return SolverError(
                        f"line search found no decrease at iteration {nit}",
                        last_state=self._result(x, fx),
                    )
                step = search.step
            else:
                step = lr
            x_new = x - step * grad
            if np.array_equal(x_new, x):
                logger.info("iterate stalled at iteration %d (|g|=%.3e)", nit, grad_norm)
                return SolverError(
                    f"iterate stopped changing at iteration {nit}",
                    last_state=self._result(x, fx),
                )
            x = x_new
            fx = self._objective(x)
            if not np.isfinite(fx):
                return SolverError(
                    f"objective became non-finite at iteration {nit}",
                    last_state=self._result(x, fx),
                )

            self._notify_iteration(
                IterationState(
                    iteration=nit,
                    x=x.copy(),
                    cost=fx,
                    constraint_violation=problem.constraint_violation(x),
                    parameters={"step": step, "gradient_norm": grad_norm},
                )
            )

        grad_norm = float(np.linalg.norm(self._gradient(x)))
        if converged(grad_norm, tol):
            return self._result(x, fx)
        logger.info("no convergence after %d iterations (|g|=%.3e)", maxiter, grad_norm)
        return SolverError(
            f"maximum number of iterations ({maxiter}) reached",
            last_state=self._result(x, fx),
        )


__all__ = ["GradientDescentSolver", "MAX_ITERATIONS", "TOLERANCE", "STEP_SIZE", "LINE_SEARCH"]
