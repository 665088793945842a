"""
Example: solver lifecycle with a backend that always fails.

Shows the outcome moving from NoSolution to SolverError, typed extraction,
copying a solver and resetting it.
"""

import numpy as np

from solvercore import (
    NoSolution,
    Problem,
    Result,
    Solver,
    SolverError,
    TypeMismatchError,
    UnsupportedFeatureError,
)


class NullSolver(Solver):
    """Backend that always fails."""

    def impl_solve(self):
        return SolverError("the null solver always fails.", last_state=Result.zeros(1, 1))


def main():
    problem = Problem(
        function=lambda x: np.array([x[0]]),
        input_size=1,
        starting_point=np.zeros(1),
        name="x",
    )
    solver = NullSolver(problem)
    solver.parameters.set("data.string", "dummy data", "dummy string")
    solver.parameters.set("data.int", 10, "dummy integer")
    solver.parameters.set("data.value_type", 42.0, "dummy value_type")
    print(solver)
    print()

    solver.solve()
    print(solver)
    print()

    error = solver.get_minimum(SolverError)
    print(f"Failure message: {error.message}")

    clone = solver.copy()
    clone.reset()
    print(f"Copy after reset holds NoSolution: {isinstance(clone.minimum, NoSolution)}")
    print(f"Original still failed: {isinstance(solver.minimum, SolverError)}")

    try:
        solver.get_minimum(Result)
    except TypeMismatchError as exc:
        print(f"Typed extraction refused: {exc}")

    try:
        solver.set_iteration_callback(None)
    except UnsupportedFeatureError as exc:
        print(f"Callback refused: {exc}")


if __name__ == "__main__":
    main()
