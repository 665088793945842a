"""Pytest configuration and shared fixtures for solvercore tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Isolation of the global debug-mode flag between tests
- Small problems reused across solver tests
"""

import os

import numpy as np
import pytest
import torch

from solvercore import Problem, set_debug_enabled
from solvercore.debug_mode import is_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Set global numpy and torch seeds for every test."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    np.random.seed(seed)
    torch.manual_seed(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Run each test with debug mode off and restore the previous value."""
    previous = is_debug_enabled()
    set_debug_enabled(False)
    yield
    set_debug_enabled(previous)


@pytest.fixture
def identity_problem() -> Problem:
    """One input, one output, f(x) = x, starting at 0."""
    return Problem(
        function=lambda x: np.array([x[0]]),
        input_size=1,
        output_size=1,
        starting_point=np.zeros(1),
        name="identity",
    )


@pytest.fixture
def quadratic_problem() -> Problem:
    """f(x) = 0.5 x^T A x - b^T x with its exact gradient."""
    A = np.array([[3.0, 0.5], [0.5, 2.0]])
    b = np.array([1.0, -1.0])
    return Problem.scalar(
        lambda x: 0.5 * x @ (A @ x) - b @ x,
        dim=2,
        grad=lambda x: A @ x - b,
        starting_point=np.array([2.0, 2.0]),
        name="quadratic",
    )
