"""Abstract solver bound to a problem.

A solver owns an outcome and a parameter registry and refers to a problem it
does not own. Backends subclass :class:`Solver` and implement
:meth:`Solver.impl_solve`.

Example
-------
>>> import numpy as np
>>> from solvercore import Problem, Result, Solver
>>> class Echo(Solver):
...     def impl_solve(self):
...         x = self.problem.starting_point
...         return Result(x=x, value=self.problem.evaluate(x))
>>> solver = Echo(Problem(function=lambda x: x, input_size=1, starting_point=[0.0]))
>>> solver.solve().value
array([0.])
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import ClassVar, Optional, Type

from ..debug_mode import is_debug_enabled
from ..errors import DimensionMismatchError, UnsupportedFeatureError
from ..logging import get_logger
from .outcome import (
    TERMINAL_OUTCOME_TYPES,
    NoSolution,
    Outcome,
    SolverError,
    T,
    extract_as,
    is_outcome,
    outcome_name,
)
from .parameters import ParameterRegistry
from .problem import Problem
from .state import IterationCallback, IterationState

logger = get_logger(__name__)

_BASE_ATTRIBUTES = ("_problem", "_outcome", "_parameters", "_callback")


class Solver(ABC):
    """
    Base class of every solver backend.

    Subclasses set ``supports_iteration_callback = True`` when their
    ``impl_solve`` calls :meth:`_notify_iteration`.
    """

    supports_iteration_callback: ClassVar[bool] = False

    def __init__(self, problem: Problem) -> None:
        if not isinstance(problem, Problem):
            raise TypeError(f"expected a Problem, got {type(problem).__name__}")
        self._problem = problem
        self._outcome: Outcome = NoSolution()
        self._parameters = ParameterRegistry()
        self._callback: Optional[IterationCallback] = None

    @property
    def problem(self) -> Problem:
        return self._problem

    @property
    def parameters(self) -> ParameterRegistry:
        return self._parameters

    @property
    def minimum(self) -> Outcome:
        """Active outcome."""
        return self._outcome

    @property
    def iteration_callback(self) -> Optional[IterationCallback]:
        return self._callback

    def get_minimum(self, cls: Type[T]) -> T:
        """
        Return the active outcome if it is exactly of variant ``cls``.

        Raises
        ------
        TypeMismatchError
            If another variant is active.
        """
        return extract_as(self._outcome, cls)

    @abstractmethod
    def impl_solve(self) -> Outcome:
        """Run the backend and return a Result, ResultWithWarnings or SolverError."""

    def solve(self) -> Outcome:
        """
        Run the backend and store its outcome, replacing any previous one.

        Raises
        ------
        TypeError
            If the backend returned NoSolution or something that is not an
            outcome. The previous outcome is kept in that case.
        DimensionMismatchError
            In debug mode, if a returned result does not match the problem
            sizes.
        """
        name = type(self).__name__
        logger.debug("%s: solve() starting from %s", name, outcome_name(self._outcome))
        outcome = self.impl_solve()
        if type(outcome) not in TERMINAL_OUTCOME_TYPES:
            raise TypeError(
                f"{name}.impl_solve() must return Result, ResultWithWarnings or "
                f"SolverError, got {type(outcome).__name__}"
            )
        if is_debug_enabled():
            self._check_outcome(outcome)
        self._set_outcome(outcome)
        if isinstance(outcome, SolverError):
            logger.info("%s: solve() failed: %s", name, outcome.message)
        else:
            logger.debug("%s: solve() produced %s", name, outcome_name(outcome))
        return outcome

    def reset(self) -> None:
        """Forget the outcome. Problem, parameters and callback are kept."""
        logger.debug("%s: reset()", type(self).__name__)
        self._set_outcome(NoSolution())

    def _set_outcome(self, outcome: Outcome) -> None:
        if not is_outcome(outcome):
            raise TypeError(f"not an outcome: {type(outcome).__name__}")
        self._outcome = outcome

    def _check_outcome(self, outcome: Outcome) -> None:
        result = outcome.last_state if isinstance(outcome, SolverError) else outcome
        if result is None:
            return
        if result.input_size != self._problem.input_size:
            raise DimensionMismatchError(
                f"result argument has size {result.input_size}, "
                f"problem expects {self._problem.input_size}"
            )
        if result.output_size != self._problem.output_size:
            raise DimensionMismatchError(
                f"result value has size {result.output_size}, "
                f"problem expects {self._problem.output_size}"
            )

    def set_iteration_callback(self, callback: Optional[IterationCallback]) -> None:
        """
        Register a function called after every backend iteration.

        ``None`` clears the callback on backends that support callbacks.

        Raises
        ------
        UnsupportedFeatureError
            If this backend does not call iteration callbacks, whatever the
            value of ``callback``.
        TypeError
            If ``callback`` is neither callable nor None.
        """
        if not self.supports_iteration_callback:
            raise UnsupportedFeatureError(
                f"{type(self).__name__} does not support iteration callbacks"
            )
        if callback is not None and not callable(callback):
            raise TypeError("iteration callback must be callable or None")
        self._callback = callback

    def _notify_iteration(self, state: IterationState) -> None:
        if self._callback is not None:
            self._callback(self._problem, state)

    def copy(self) -> "Solver":
        """
        Independent solver of the same class.

        The outcome and parameters are deep-copied, the problem and the
        callback are shared.
        """
        other = object.__new__(type(self))
        other._problem = self._problem
        other._outcome = copy.deepcopy(self._outcome)
        other._parameters = self._parameters.copy()
        other._callback = self._callback
        self._copy_backend_state(other)
        return other

    def _copy_backend_state(self, other: "Solver") -> None:
        """Copy subclass attributes into ``other``. Deep copy by default."""
        for key, value in self.__dict__.items():
            if key not in _BASE_ATTRIBUTES:
                setattr(other, key, copy.deepcopy(value))

    def __copy__(self) -> "Solver":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Solver":
        return self.copy()

    def __str__(self) -> str:
        from .report import format_solver

        return format_solver(self)


__all__ = ["Solver"]
