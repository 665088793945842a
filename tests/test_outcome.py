"""Tests for outcome variants, typed extraction and visitor dispatch."""

import copy

import numpy as np
import pytest

from solvercore import DimensionMismatchError, TypeMismatchError
from solvercore.solver.outcome import (
    NoSolution,
    OutcomeVisitor,
    Result,
    ResultWithWarnings,
    SolverError,
    apply_visitor,
    extract_as,
    is_outcome,
    outcome_name,
)


class RecordingVisitor(OutcomeVisitor):
    def visit_no_solution(self, outcome):
        return "no-solution"

    def visit_result(self, outcome):
        return "result"

    def visit_result_with_warnings(self, outcome):
        return "result-with-warnings"

    def visit_solver_error(self, outcome):
        return "solver-error"


class TolerantVisitor(RecordingVisitor):
    def visit_unknown(self, outcome):
        return "unknown"


def make_result_with_warnings(**kwargs):
    with pytest.deprecated_call():
        return ResultWithWarnings(**kwargs)


def test_result_arrays_are_copied_and_read_only():
    x = np.array([1.0, 2.0])
    res = Result(x=x, value=[3.0])
    x[0] = 42.0
    assert res.x[0] == 1.0
    assert res.input_size == 2
    assert res.output_size == 1
    with pytest.raises(ValueError):
        res.x[0] = 0.0


def test_result_is_frozen():
    res = Result.zeros(1, 1)
    with pytest.raises(AttributeError):
        res.x = np.ones(1)


def test_result_zeros_sizes():
    res = Result.zeros(3, 2)
    assert np.array_equal(res.x, np.zeros(3))
    assert np.array_equal(res.value, np.zeros(2))
    assert res.constraints.size == 0
    assert res.multipliers is None


def test_result_rejects_matrices():
    with pytest.raises(DimensionMismatchError):
        Result(x=np.zeros((2, 2)), value=[0.0])


def test_result_equality_compares_arrays():
    assert Result(x=[1.0], value=[2.0]) == Result(x=[1.0], value=[2.0])
    assert Result(x=[1.0], value=[2.0]) != Result(x=[1.0], value=[2.5])
    assert Result(x=[1.0], value=[2.0], multipliers=[0.5]) != Result(x=[1.0], value=[2.0])


def test_result_with_warnings_is_deprecated_but_valid():
    res = make_result_with_warnings(x=[0.0], value=[1.0], warnings=["slow", "inexact"])
    assert res.warnings == ("slow", "inexact")
    assert is_outcome(res)
    assert outcome_name(res) == "ResultWithWarnings"


def test_result_and_result_with_warnings_are_never_equal():
    plain = Result(x=[0.0], value=[1.0])
    warned = make_result_with_warnings(x=[0.0], value=[1.0])
    assert plain != warned


def test_deepcopy_of_result_with_warnings_does_not_warn(recwarn):
    res = make_result_with_warnings(x=[0.0], value=[1.0], warnings=["w"])
    clone = copy.deepcopy(res)
    assert clone == res
    assert clone.x is not res.x
    assert not clone.x.flags.writeable
    assert not [w for w in recwarn if issubclass(w.category, DeprecationWarning)]


def test_solver_error_last_state_is_optional():
    assert SolverError("failed").last_state is None
    err = SolverError("failed", last_state=Result.zeros(1, 1))
    assert err.last_state == Result.zeros(1, 1)


def test_solver_error_rejects_non_result_last_state():
    with pytest.raises(TypeError):
        SolverError("failed", last_state=[0.0])


def test_extract_as_returns_matching_variant():
    res = Result.zeros(1, 1)
    assert extract_as(res, Result) is res
    assert isinstance(extract_as(NoSolution(), NoSolution), NoSolution)


@pytest.mark.parametrize(
    "outcome, requested",
    [
        (NoSolution(), Result),
        (Result.zeros(1, 1), SolverError),
        (SolverError("x"), NoSolution),
    ],
)
def test_extract_as_wrong_variant_raises(outcome, requested):
    with pytest.raises(TypeMismatchError) as excinfo:
        extract_as(outcome, requested)
    assert excinfo.value.expected == requested.__name__
    assert excinfo.value.actual == type(outcome).__name__


def test_extract_as_does_not_convert_subclass():
    warned = make_result_with_warnings(x=[0.0], value=[1.0])
    with pytest.raises(TypeMismatchError):
        extract_as(warned, Result)


def test_type_mismatch_is_a_type_error():
    with pytest.raises(TypeError):
        extract_as(NoSolution(), Result)


def test_visitor_dispatches_on_exact_variant():
    visitor = RecordingVisitor()
    assert apply_visitor(visitor, NoSolution()) == "no-solution"
    assert apply_visitor(visitor, Result.zeros(1, 1)) == "result"
    assert apply_visitor(visitor, make_result_with_warnings(x=[0.0], value=[0.0])) == (
        "result-with-warnings"
    )
    assert apply_visitor(visitor, SolverError("x")) == "solver-error"


def test_visitor_unknown_variant_raises_by_default():
    with pytest.raises(TypeMismatchError):
        apply_visitor(RecordingVisitor(), object())


def test_visitor_catch_all_handler():
    assert apply_visitor(TolerantVisitor(), "not an outcome") == "unknown"


def test_incomplete_visitor_cannot_be_instantiated():
    class Partial(OutcomeVisitor):
        def visit_result(self, outcome):
            return None

    with pytest.raises(TypeError):
        Partial()


def test_is_outcome():
    assert is_outcome(NoSolution())
    assert not is_outcome(None)
    assert not is_outcome(Result)
