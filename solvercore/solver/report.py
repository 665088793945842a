"""Human-readable reports for solvers, parameters and outcomes.

Formatting functions return strings; :func:`print_solver` writes them to a
stream. The layout is indentation-based and stable between runs.
"""

from __future__ import annotations

import sys
from typing import IO, TYPE_CHECKING, List, Optional

import numpy as np

from .outcome import (
    NoSolution,
    Outcome,
    OutcomeVisitor,
    Result,
    ResultWithWarnings,
    SolverError,
    apply_visitor,
)
from .parameters import ParameterRegistry

if TYPE_CHECKING:
    from .base import Solver

INDENT = "  "


def _vector(values: np.ndarray) -> str:
    return np.array2string(values, precision=6, separator=", ")


def _indent(lines: List[str], depth: int = 1) -> List[str]:
    return [INDENT * depth + line for line in lines]


class _OutcomeFormatter(OutcomeVisitor):
    """Turns an outcome into report lines."""

    def visit_no_solution(self, outcome: NoSolution) -> List[str]:
        return ["No solution"]

    def visit_result(self, outcome: Result) -> List[str]:
        lines = [
            "Result:",
            f"{INDENT}Argument: {_vector(outcome.x)}",
            f"{INDENT}Value: {_vector(outcome.value)}",
        ]
        if outcome.constraints.size:
            lines.append(f"{INDENT}Constraints: {_vector(outcome.constraints)}")
        if outcome.multipliers is not None:
            lines.append(f"{INDENT}Lagrange multipliers: {_vector(outcome.multipliers)}")
        return lines

    def visit_result_with_warnings(self, outcome: ResultWithWarnings) -> List[str]:
        lines = self.visit_result(outcome)
        lines[0] = "Result with warnings:"
        lines.append(f"{INDENT}Warnings:")
        lines.extend(_indent([f"- {w}" for w in outcome.warnings], 2))
        return lines

    def visit_solver_error(self, outcome: SolverError) -> List[str]:
        lines = ["Solver error:", f"{INDENT}Message: {outcome.message}"]
        if outcome.last_state is not None:
            lines.append(f"{INDENT}Last state:")
            lines.extend(_indent(apply_visitor(self, outcome.last_state)[1:]))
        return lines


def format_outcome(outcome: Outcome) -> str:
    """Multi-line description of an outcome and its payload."""
    return "\n".join(apply_visitor(_OutcomeFormatter(), outcome))


def format_parameters(registry: ParameterRegistry) -> str:
    """One line per parameter: ``key (kind): value [description]``."""
    lines = []
    for key, param in registry.items():
        line = f"{key} ({param.kind.value}): {param.value!r}"
        if param.description:
            line += f" [{param.description}]"
        lines.append(line)
    return "\n".join(lines)


def format_solver(solver: "Solver") -> str:
    problem = solver.problem
    label = problem.name or "unnamed"
    lines = [
        f"{type(solver).__name__}:",
        f"{INDENT}Problem: {label} (n={problem.input_size}, m={problem.output_size})",
    ]
    if len(solver.parameters):
        lines.append(f"{INDENT}Parameters:")
        lines.extend(_indent(format_parameters(solver.parameters).splitlines(), 2))
    else:
        lines.append(f"{INDENT}Parameters: none")
    lines.extend(_indent(format_outcome(solver.minimum).splitlines()))
    return "\n".join(lines)


def print_solver(solver: "Solver", file: Optional[IO[str]] = None) -> None:
    """
    Print a solver report to stdout or a file.

    This is a utility function for human-readable output, so it uses print()
    intentionally. For programmatic access, use format_solver() instead.
    """
    if file is None:
        file = sys.stdout
    print(format_solver(solver), file=file)


__all__ = ["format_outcome", "format_parameters", "format_solver", "print_solver"]
