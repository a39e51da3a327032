"""A growable array that tracks its own capacity the way a dynamic array does."""

from __future__ import annotations

from collections import defaultdict
from typing import Generic, Iterable, Iterator, TypeVar, overload

T = TypeVar("T")


class Vector(Generic[T]):
    """Dynamic array with explicit capacity growth and a set of bulk edits."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._data: list[T] = []
        self._cap = 1
        for item in items:
            self.append(item)

    # ---------------------------------------------------------------- helpers
    def _ensure_capacity(self, needed: int) -> None:
        if needed > self._cap:
            self._cap = max(needed, 2 * self._cap)

    def _normalise(self, index: int) -> int:
        if index < 0:
            index += len(self._data)
        if not 0 <= index < len(self._data):
            raise IndexError("index out of range")
        return index

    # ------------------------------------------------------- container protocol
    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._data[index]
        return self._data[self._normalise(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._data[self._normalise(index)] = value

    def __contains__(self, value: object) -> bool:
        return value in self._data

    def __repr__(self) -> str:
        return f"Vector({self._data!r})"

    # ----------------------------------------------------------------- access
    def capacity(self) -> int:
        """Number of slots reserved, which is never less than the length."""
        return self._cap

    def at(self, index: int) -> T:
        """Element at a non-negative index; raise IndexError outside the range."""
        if not 0 <= index < len(self._data):
            raise IndexError("index out of range")
        return self._data[index]

    # --------------------------------------------------------------- modifiers
    def resize(self, n: int) -> None:
        """Grow or shrink to ``n`` elements; new slots hold None."""
        if n < 0:
            raise ValueError("size must not be negative")
        if n > self._cap:
            self._cap = n
        if n > len(self._data):
            self._data.extend([None] * (n - len(self._data)))  # type: ignore[list-item]
        else:
            del self._data[n:]

    def append(self, value: T) -> None:
        self.insert(len(self._data), value)

    def pop(self) -> T:
        """Remove and return the last element."""
        if not self._data:
            raise IndexError("pop from empty vector")
        return self._data.pop()

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` before ``index`` (0 to len inclusive)."""
        if not 0 <= index <= len(self._data):
            raise IndexError("insert position out of range")
        self._ensure_capacity(len(self._data) + 1)
        self._data.insert(index, value)

    def erase(self, index: int) -> None:
        """Remove the element at ``index``, shifting the rest left."""
        if not 0 <= index < len(self._data):
            raise IndexError("index out of range")
        del self._data[index]

    def clear(self) -> None:
        """Drop every element; the capacity stays as it is."""
        self._data.clear()

    def index_of(self, value: T) -> int:
        """Position of the first element equal to ``value``; ValueError if absent."""
        try:
            return self._data.index(value)
        except ValueError:
            raise ValueError(f"{value!r} is not in the vector") from None

    def remove_value(self, value: T) -> None:
        """Remove the first element equal to ``value``, if there is one."""
        if value in self._data:
            self._data.remove(value)

    # ------------------------------------------------------------- bulk edits
    def erase_many(self, positions: Iterable[int]) -> None:
        """Erase the elements at ascending original ``positions``."""
        for removed, pos in enumerate(positions):
            self.erase(pos - removed)

    def insert_many(self, data: Iterable[tuple[int, T]]) -> None:
        """Insert each ``(position, value)`` before the original element at position.

        Positions refer to the vector as it was before the call; several values
        at one position go in ascending order. Capacity shrinks to the new size.
        """
        entries = sorted(data)
        size = len(self._data)
        pending: defaultdict[int, list[T]] = defaultdict(list)
        for pos, value in entries:
            if not 0 <= pos <= size:
                raise IndexError("insert position out of range")
            pending[pos].append(value)
        result: list[T] = []
        for i, item in enumerate(self._data):
            result.extend(pending.get(i, ()))
            result.append(item)
        result.extend(pending.get(size, ()))
        self._data = result
        self._cap = len(result)

    def insert_range(self, position: int, values: Iterable[T]) -> None:
        """Insert all ``values`` before ``position`` in one step."""
        if not 0 <= position <= len(self._data):
            raise IndexError("insert position out of range")
        block = list(values)
        self._ensure_capacity(len(self._data) + len(block))
        self._data[position:position] = block

    def uniq(self) -> None:
        """Keep only the first occurrence of each value; capacity shrinks to fit."""
        seen: set[T] = set()
        kept: list[T] = []
        for item in self._data:
            if item not in seen:
                seen.add(item)
                kept.append(item)
        self._data = kept
        self._cap = len(kept)

    def compress(self) -> None:
        """Shrink the capacity to the current length."""
        self._cap = len(self._data)

    def block_swap(self, a: int, b: int, m: int) -> bool:
        """Swap the blocks of ``m`` elements starting at ``a`` and ``b``.

        Returns False and leaves the vector untouched when ``m`` is not
        positive, either block runs past the end, the starts coincide, or
        the blocks overlap.
        """
        size = len(self._data)
        if m <= 0:
            return False
        if not (0 <= a < size and 0 <= b < size):
            return False
        if a + m > size or b + m > size:
            return False
        if a == b:
            return False
        low, high = sorted((a, b))
        if low + m > high:
            return False
        self._data[a:a + m], self._data[b:b + m] = (
            self._data[b:b + m],
            self._data[a:a + m],
        )
        return True