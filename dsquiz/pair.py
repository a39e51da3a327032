"""Two-field pair ordered lexicographically by ``>=``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T1 = TypeVar("T1")
T2 = TypeVar("T2")


@dataclass(eq=False)
class Pair(Generic[T1, T2]):
    """A pair of values compared first by ``first`` and then by ``second``."""

    first: T1
    second: T2

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        if other.first == self.first:
            return self.second >= other.second
        return self.first >= other.first