"""solvercore - solver outcomes, parameters and lifecycle, plus matrix plots."""

__version__ = "0.1.0"

from .debug_mode import debug_context, is_debug_enabled, set_debug_enabled
from .errors import (
    DimensionMismatchError,
    KeyNotFoundError,
    SolverCoreError,
    TypeMismatchError,
    UnsupportedFeatureError,
)
from .logging import configure_logging, get_logger, set_log_level
from .solver import (
    Constraint,
    IterationCallback,
    IterationState,
    NoSolution,
    Outcome,
    OutcomeVisitor,
    Parameter,
    ParameterKind,
    ParameterRegistry,
    Problem,
    Result,
    ResultWithWarnings,
    Solver,
    SolverError,
    apply_visitor,
    extract_as,
    format_outcome,
    format_solver,
    outcome_name,
    print_solver,
)
from .backends import GradientDescentSolver
from .viz import (
    DenseMatrixView,
    MatrixPlotType,
    PlotSequence,
    SparseMatrixView,
    render_matrix,
)

__all__ = [
    "__version__",
    "Constraint",
    "DenseMatrixView",
    "DimensionMismatchError",
    "GradientDescentSolver",
    "IterationCallback",
    "IterationState",
    "KeyNotFoundError",
    "MatrixPlotType",
    "NoSolution",
    "Outcome",
    "OutcomeVisitor",
    "Parameter",
    "ParameterKind",
    "ParameterRegistry",
    "PlotSequence",
    "Problem",
    "Result",
    "ResultWithWarnings",
    "Solver",
    "SolverCoreError",
    "SolverError",
    "SparseMatrixView",
    "TypeMismatchError",
    "UnsupportedFeatureError",
    "apply_visitor",
    "configure_logging",
    "debug_context",
    "extract_as",
    "format_outcome",
    "format_solver",
    "get_logger",
    "is_debug_enabled",
    "outcome_name",
    "print_solver",
    "render_matrix",
    "set_debug_enabled",
    "set_log_level",
]
