"""Solver lifecycle: problems, outcomes, parameters and the abstract solver."""

from .base import Solver
from .outcome import (
    NoSolution,
    Outcome,
    OutcomeVisitor,
    Result,
    ResultWithWarnings,
    SolverError,
    apply_visitor,
    extract_as,
    is_outcome,
    outcome_name,
)
from .parameters import Parameter, ParameterKind, ParameterRegistry, ParameterValue
from .problem import Constraint, Problem
from .report import format_outcome, format_parameters, format_solver, print_solver
from .state import IterationCallback, IterationState

__all__ = [
    "Constraint",
    "IterationCallback",
    "IterationState",
    "NoSolution",
    "Outcome",
    "OutcomeVisitor",
    "Parameter",
    "ParameterKind",
    "ParameterRegistry",
    "ParameterValue",
    "Problem",
    "Result",
    "ResultWithWarnings",
    "Solver",
    "SolverError",
    "apply_visitor",
    "extract_as",
    "format_outcome",
    "format_parameters",
    "format_solver",
    "is_outcome",
    "outcome_name",
    "print_solver",
]
