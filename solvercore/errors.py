"""Exception types raised by solvercore.

Each operational failure has its own class so callers can tell them apart,
and each also derives from the built-in exception a caller would expect
(``except KeyError`` still catches a missing parameter).
"""

from __future__ import annotations


class SolverCoreError(Exception):
    """Base class for all solvercore operational errors."""


class TypeMismatchError(SolverCoreError, TypeError):
    """Typed extraction requested a variant other than the active one."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"requested outcome {expected}, but active outcome is {actual}")


class KeyNotFoundError(SolverCoreError, KeyError):
    """A parameter key is not present in the registry."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"no parameter named {self.key!r}"


class UnsupportedFeatureError(SolverCoreError, RuntimeError):
    """The solver backend does not provide the requested capability."""


class DimensionMismatchError(SolverCoreError, ValueError):
    """A matrix or vector does not have the shape it claims to have."""


__all__ = [
    "SolverCoreError",
    "TypeMismatchError",
    "KeyNotFoundError",
    "UnsupportedFeatureError",
    "DimensionMismatchError",
]
