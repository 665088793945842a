"""Process-wide switch for extra solver consistency checks.

While it is on, :meth:`solvercore.solver.base.Solver.solve` compares every
result a backend returns with the sizes of the problem. The switch starts
from the ``SOLVERCORE_DEBUG`` environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

from .logging import get_logger

logger = get_logger(__name__)

ENV_VAR = "SOLVERCORE_DEBUG"
_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})


def debug_from_environment(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Read the debug switch from ``environ`` (``os.environ`` by default)."""
    if environ is None:
        environ = os.environ
    return environ.get(ENV_VAR, "").strip().lower() in _TRUE_WORDS


_checks = {"enabled": debug_from_environment()}


def is_debug_enabled() -> bool:
    return _checks["enabled"]


def set_debug_enabled(enabled: bool) -> bool:
    """Turn the checks on or off and return the previous setting."""
    previous = _checks["enabled"]
    _checks["enabled"] = bool(enabled)
    if previous != _checks["enabled"]:
        logger.debug("solver debug checks %s", "on" if enabled else "off")
    return previous


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Run a block with the checks switched to ``enabled``.

    Example
    -------
    >>> with debug_context(True):
    ...     assert is_debug_enabled()
    """
    previous = set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)


__all__ = [
    "ENV_VAR",
    "debug_from_environment",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
