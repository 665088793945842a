"""Per-iteration snapshot passed to iteration callbacks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict

import numpy as np

from .parameters import ParameterValue
from .problem import Problem


@dataclass
class IterationState:
    """
    State of a backend at the end of one iteration.

    Attributes:
        iteration: Zero-based iteration index.
        x: Current argument (a copy; callbacks may keep it).
        cost: Objective value at ``x``.
        constraint_violation: Largest constraint violation at ``x``.
        parameters: Backend-specific values (step size, gradient norm, ...).
    """

    iteration: int
    x: np.ndarray
    cost: float
    constraint_violation: float = 0.0
    parameters: Dict[str, ParameterValue] = field(default_factory=dict)


IterationCallback = Callable[[Problem, IterationState], None]

__all__ = ["IterationState", "IterationCallback"]
