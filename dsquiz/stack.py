"""A last-in first-out stack with a couple of positional edits."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """LIFO stack; iteration runs from the bottom to the top."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._data: list[T] = list(items)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"Stack({self._data!r})"

    def top(self) -> T:
        """The element on top of the stack."""
        if not self._data:
            raise IndexError("stack is empty")
        return self._data[-1]

    def push(self, value: T) -> None:
        """Put ``value`` on top."""
        self._data.append(value)

    def pop(self) -> T:
        """Remove and return the top element."""
        if not self._data:
            raise IndexError("stack is empty")
        return self._data.pop()

    def deep_push(self, pos: int, value: T) -> None:
        """Insert ``value`` so that exactly ``pos`` elements lie above it."""
        if not 0 <= pos <= len(self._data):
            raise IndexError("push depth out of range")
        self._data.insert(len(self._data) - pos, value)

    def mitosis(self, a: int, b: int) -> None:
        """Duplicate every element whose depth from the top lies in ``a..b``.

        Depth 0 is the top. Each copy sits directly above its original.
        """
        if b >= len(self._data):
            raise IndexError("depth out of range")
        if b < 0:
            return
        split = len(self._data) - (b + 1)
        upper = self._data[split:]
        rebuilt: list[T] = []
        for offset, item in enumerate(upper):
            depth = b - offset
            rebuilt.append(item)
            if depth >= a:
                rebuilt.append(item)
        self._data[split:] = rebuilt