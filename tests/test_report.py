"""Tests for textual solver reports."""

import io

import numpy as np
import pytest

from solvercore.solver import (
    NoSolution,
    ParameterRegistry,
    Problem,
    Result,
    ResultWithWarnings,
    Solver,
    SolverError,
    format_outcome,
    format_solver,
    print_solver,
)
from solvercore.solver.report import format_parameters


class FailingSolver(Solver):
    def impl_solve(self):
        return SolverError("the null solver always fails.", last_state=Result.zeros(1, 1))


def test_no_solution():
    assert format_outcome(NoSolution()) == "No solution"


def test_result_lines():
    text = format_outcome(
        Result(x=[1.0, 2.0], value=[3.0], constraints=[0.5], multipliers=[0.25])
    )
    lines = text.splitlines()
    assert lines[0] == "Result:"
    assert lines[1] == "  Argument: [1., 2.]"
    assert lines[2] == "  Value: [3.]"
    assert "  Constraints: [0.5]" in lines
    assert "  Lagrange multipliers: [0.25]" in lines


def test_unconstrained_result_omits_constraints():
    text = format_outcome(Result.zeros(1, 1))
    assert "Constraints" not in text
    assert "Lagrange" not in text


def test_result_with_warnings_lists_warnings():
    with pytest.deprecated_call():
        outcome = ResultWithWarnings(x=[0.0], value=[0.0], warnings=["first", "second"])
    lines = format_outcome(outcome).splitlines()
    assert lines[0] == "Result with warnings:"
    assert lines[-3:] == ["  Warnings:", "    - first", "    - second"]


def test_solver_error_with_and_without_last_state():
    bare = format_outcome(SolverError("boom")).splitlines()
    assert bare == ["Solver error:", "  Message: boom"]

    full = format_outcome(SolverError("boom", last_state=Result.zeros(1, 1))).splitlines()
    assert full[:3] == ["Solver error:", "  Message: boom", "  Last state:"]
    assert "    Argument: [0.]" in full
    assert "    Value: [0.]" in full


def test_format_parameters():
    registry = ParameterRegistry()
    registry.set("data.string", "dummy data", "dummy string")
    registry.set("data.int", 10, "dummy integer")
    registry.set("flag", True)
    assert format_parameters(registry).splitlines() == [
        "data.string (string): 'dummy data' [dummy string]",
        "data.int (integer): 10 [dummy integer]",
        "flag (boolean): True",
    ]


def test_format_solver_lifecycle():
    problem = Problem(function=lambda x: np.array([x[0]]), input_size=1, name="x")
    solver = FailingSolver(problem)
    before = format_solver(solver).splitlines()
    assert before == [
        "FailingSolver:",
        "  Problem: x (n=1, m=1)",
        "  Parameters: none",
        "  No solution",
    ]

    solver.parameters.set("data.value_type", 42.0, "dummy value_type")
    solver.solve()
    after = str(solver).splitlines()
    assert after[2] == "  Parameters:"
    assert after[3] == "    data.value_type (float): 42.0 [dummy value_type]"
    assert after[4] == "  Solver error:"
    assert "    Message: the null solver always fails." in after


def test_unnamed_problem_label():
    problem = Problem(function=lambda x: x, input_size=2, output_size=2)
    assert "Problem: unnamed (n=2, m=2)" in format_solver(FailingSolver(problem))


def test_print_solver_writes_to_file():
    problem = Problem(function=lambda x: x, input_size=1)
    buf = io.StringIO()
    print_solver(FailingSolver(problem), file=buf)
    assert buf.getvalue().startswith("FailingSolver:\n")
    assert buf.getvalue().endswith("No solution\n")


def test_header_names_the_concrete_backend():
    class RetryingSolver(FailingSolver):
        pass

    problem = Problem(function=lambda x: x, input_size=1)
    assert format_solver(RetryingSolver(problem)).splitlines()[0] == "RetryingSolver:"
    assert format_solver(FailingSolver(problem)).splitlines()[0] == "FailingSolver:"
