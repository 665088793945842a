"""Outcome variants produced by solvers.

A solver always holds exactly one of four outcomes:

- :class:`NoSolution` before the first ``solve()`` (and after ``reset()``),
- :class:`Result` when the backend converged,
- :class:`ResultWithWarnings` when it converged but reported warnings
  (deprecated, kept for backends that still emit it),
- :class:`SolverError` when the backend failed, optionally carrying the last
  state it reached.

Consumers either extract a specific variant with :func:`extract_as` or
dispatch over all of them with an :class:`OutcomeVisitor`.
"""

from __future__ import annotations

import warnings
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from typing import Any, Optional, Tuple, Type, TypeVar, Union

import numpy as np

from ..errors import DimensionMismatchError, TypeMismatchError


def _frozen_vector(values: Any, name: str) -> np.ndarray:
    """Copy ``values`` into a read-only 1-D float array."""
    arr = np.array(values, dtype=float)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    if arr.ndim != 1:
        raise DimensionMismatchError(f"{name} must be one-dimensional, got shape {arr.shape}")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class NoSolution:
    """No solve has happened yet."""


@dataclass(frozen=True, eq=False)
class Result:
    """
    Converged solver result.

    Attributes:
        x: Optimal argument.
        value: Objective value(s) at ``x``.
        constraints: Constraint values at ``x`` (empty when unconstrained).
        multipliers: Lagrange multipliers, if the backend computes them.
    """

    x: np.ndarray
    value: np.ndarray
    constraints: np.ndarray = field(default_factory=lambda: np.zeros(0))
    multipliers: Optional[np.ndarray] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _frozen_vector(self.x, "x"))
        object.__setattr__(self, "value", _frozen_vector(self.value, "value"))
        object.__setattr__(
            self, "constraints", _frozen_vector(self.constraints, "constraints")
        )
        if self.multipliers is not None:
            object.__setattr__(
                self, "multipliers", _frozen_vector(self.multipliers, "multipliers")
            )

    @classmethod
    def zeros(cls, input_size: int, output_size: int) -> "Result":
        """Zero-filled result with the given argument and value sizes."""
        if input_size < 0 or output_size < 0:
            raise ValueError("sizes must be non-negative")
        return cls(x=np.zeros(input_size), value=np.zeros(output_size))

    @property
    def input_size(self) -> int:
        return int(self.x.size)

    @property
    def output_size(self) -> int:
        return int(self.value.size)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        for f in fields(self):
            mine, theirs = getattr(self, f.name), getattr(other, f.name)
            if isinstance(mine, np.ndarray) or isinstance(theirs, np.ndarray):
                if mine is None or theirs is None or not np.array_equal(mine, theirs):
                    return False
            elif mine != theirs:
                return False
        return True

    __hash__ = None

    def __deepcopy__(self, memo: dict) -> "Result":
        # Bypass __init__ so copying a deprecated variant does not warn again.
        new = object.__new__(type(self))
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, np.ndarray):
                value = value.copy()
                value.setflags(write=False)
            object.__setattr__(new, f.name, value)
        memo[id(self)] = new
        return new


@dataclass(frozen=True, eq=False)
class ResultWithWarnings(Result):
    """
    Converged result accompanied by backend warnings.

    Deprecated: backends should log warnings instead. Still a valid outcome.
    """

    warnings: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "warnings", tuple(str(w) for w in self.warnings))
        warnings.warn(
            "ResultWithWarnings is deprecated; log warnings and return Result",
            DeprecationWarning,
            stacklevel=3,
        )


@dataclass(frozen=True)
class SolverError:
    """
    Backend failure outcome. This is a value, not an exception.

    Attributes:
        message: Human-readable failure description.
        last_state: Last result the backend reached before failing, if any.
    """

    message: str
    last_state: Optional[Result] = None

    def __post_init__(self) -> None:
        if self.last_state is not None and not isinstance(self.last_state, Result):
            raise TypeError("last_state must be a Result or None")


Outcome = Union[NoSolution, Result, ResultWithWarnings, SolverError]
OUTCOME_TYPES: Tuple[type, ...] = (NoSolution, Result, ResultWithWarnings, SolverError)
TERMINAL_OUTCOME_TYPES: Tuple[type, ...] = (Result, ResultWithWarnings, SolverError)

T = TypeVar("T", NoSolution, Result, ResultWithWarnings, SolverError)


def is_outcome(obj: Any) -> bool:
    """Return True if ``obj`` is exactly one of the four outcome variants."""
    return type(obj) in OUTCOME_TYPES


def outcome_name(outcome: Outcome) -> str:
    """Name of the active variant, e.g. ``"SolverError"``."""
    return type(outcome).__name__


def extract_as(outcome: Outcome, cls: Type[T]) -> T:
    """
    Return ``outcome`` if its variant is exactly ``cls``.

    Raises
    ------
    TypeMismatchError
        If a different variant is active. Subclasses do not match: a
        ResultWithWarnings is not returned when Result is requested.
    """
    if type(outcome) is not cls:
        raise TypeMismatchError(cls.__name__, outcome_name(outcome))
    return outcome


class OutcomeVisitor(ABC):
    """
    Exhaustive dispatch over outcome variants.

    Subclasses implement one handler per variant. ``visit_unknown`` is the
    catch-all for objects that are not one of the four variants; override it
    to tolerate variants added later.
    """

    @abstractmethod
    def visit_no_solution(self, outcome: NoSolution) -> Any: ...

    @abstractmethod
    def visit_result(self, outcome: Result) -> Any: ...

    @abstractmethod
    def visit_result_with_warnings(self, outcome: ResultWithWarnings) -> Any: ...

    @abstractmethod
    def visit_solver_error(self, outcome: SolverError) -> Any: ...

    def visit_unknown(self, outcome: Any) -> Any:
        raise TypeMismatchError("an outcome variant", type(outcome).__name__)


_HANDLERS = {
    NoSolution: "visit_no_solution",
    Result: "visit_result",
    ResultWithWarnings: "visit_result_with_warnings",
    SolverError: "visit_solver_error",
}


def apply_visitor(visitor: OutcomeVisitor, outcome: Outcome) -> Any:
    """Call the handler of ``visitor`` matching the exact variant of ``outcome``."""
    handler = _HANDLERS.get(type(outcome), "visit_unknown")
    return getattr(visitor, handler)(outcome)


__all__ = [
    "NoSolution",
    "Result",
    "ResultWithWarnings",
    "SolverError",
    "Outcome",
    "OUTCOME_TYPES",
    "TERMINAL_OUTCOME_TYPES",
    "is_outcome",
    "outcome_name",
    "extract_as",
    "OutcomeVisitor",
    "apply_visitor",
]
