"""Named, described solver parameters.

Values are restricted to four kinds (string, integer, float, boolean). The
registry keeps insertion order so that printing and iteration are
deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Tuple, Union

import numpy as np

from ..errors import KeyNotFoundError

ParameterValue = Union[str, int, float, bool]


class ParameterKind(Enum):
    """Kind of value stored in a :class:`Parameter`."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"


def _classify(value: object) -> Tuple[ParameterValue, ParameterKind]:
    # bool before int: bool is an int subclass.
    if isinstance(value, (bool, np.bool_)):
        return bool(value), ParameterKind.BOOLEAN
    if isinstance(value, (int, np.integer)):
        return int(value), ParameterKind.INTEGER
    if isinstance(value, (float, np.floating)):
        return float(value), ParameterKind.FLOAT
    if isinstance(value, str):
        return value, ParameterKind.STRING
    raise TypeError(
        f"unsupported parameter value of type {type(value).__name__}; "
        "expected str, int, float or bool"
    )


@dataclass(frozen=True, eq=False)
class Parameter:
    """A parameter value together with its description.

    The kind is part of the value: ``Parameter(1)``, ``Parameter(1.0)`` and
    ``Parameter(True)`` are three different parameters.
    """

    value: ParameterValue
    description: str = ""

    def __post_init__(self) -> None:
        value, _ = _classify(self.value)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "description", str(self.description))

    @property
    def kind(self) -> ParameterKind:
        return _classify(self.value)[1]

    def _key(self) -> Tuple[ParameterKind, ParameterValue, str]:
        return self.kind, self.value, self.description

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parameter):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


class ParameterRegistry:
    """
    Mapping from parameter name to :class:`Parameter`.

    Lookups of unknown names raise :class:`~solvercore.errors.KeyNotFoundError`
    instead of returning a default.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Parameter] = {}

    def set(self, key: str, value: ParameterValue, description: str = "") -> Parameter:
        """Insert or replace the parameter stored under ``key``."""
        if not isinstance(key, str) or not key:
            raise ValueError("parameter key must be a non-empty string")
        # A rejected value leaves the previous entry in place.
        entry = Parameter(value, description)
        self._entries[key] = entry
        return entry

    def get(self, key: str) -> Parameter:
        try:
            return self._entries[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def value(self, key: str) -> ParameterValue:
        """Shortcut for ``registry.get(key).value``."""
        return self.get(key).value

    def remove(self, key: str) -> None:
        if key not in self._entries:
            raise KeyNotFoundError(key)
        del self._entries[key]

    def items(self) -> Iterator[Tuple[str, Parameter]]:
        """Yield ``(key, parameter)`` pairs in insertion order."""
        for key, entry in self._entries.items():
            yield key, entry

    def keys(self) -> Iterator[str]:
        return iter(list(self._entries))

    def copy(self) -> "ParameterRegistry":
        """Independent registry holding the same entries."""
        other = ParameterRegistry()
        # Parameters are frozen and their values are immutable scalars.
        other._entries = dict(self._entries)
        return other

    def __deepcopy__(self, memo: dict) -> "ParameterRegistry":
        return self.copy()

    def __getitem__(self, key: str) -> Parameter:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return self.keys()

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterRegistry):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    __hash__ = None

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {p.value!r}" for k, p in self._entries.items())
        return f"ParameterRegistry({{{body}}})"


__all__ = ["ParameterValue", "ParameterKind", "Parameter", "ParameterRegistry"]
