"""A first-in first-out queue kept in a circular buffer."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class CircularQueue(Generic[T]):
    """FIFO queue over a ring buffer whose capacity doubles when it fills."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._data: list[Optional[T]] = [None]
        self._front = 0
        self._size = 0
        for item in items:
            self.push(item)

    # ---------------------------------------------------------------- helpers
    def _slot(self, offset: int) -> int:
        return (self._front + offset) % len(self._data)

    def _ensure_capacity(self, needed: int) -> None:
        cap = len(self._data)
        if needed <= cap:
            return
        new_cap = max(needed, 2 * cap)
        items = list(self)
        self._data = items + [None] * (new_cap - len(items))
        self._front = 0

    def _require_items(self) -> None:
        if self._size == 0:
            raise IndexError("queue is empty")

    # ------------------------------------------------------- container protocol
    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for offset in range(self._size):
            yield self._data[self._slot(offset)]  # type: ignore[misc]

    def __getitem__(self, index: int) -> T:
        """Element ``index`` places from the front; negative counts from the back."""
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("queue index out of range")
        return self._data[self._slot(index)]  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r})"

    # ----------------------------------------------------------------- access
    def capacity(self) -> int:
        """Number of slots in the ring buffer."""
        return len(self._data)

    def front(self) -> T:
        """The element that would be popped next."""
        self._require_items()
        return self._data[self._front]  # type: ignore[return-value]

    def back(self) -> T:
        """The element pushed most recently."""
        self._require_items()
        return self._data[self._slot(self._size - 1)]  # type: ignore[return-value]

    # --------------------------------------------------------------- modifiers
    def push(self, value: T) -> None:
        """Add ``value`` at the back."""
        self._ensure_capacity(self._size + 1)
        self._data[self._slot(self._size)] = value
        self._size += 1

    def pop(self) -> T:
        """Remove and return the front element."""
        self._require_items()
        value = self._data[self._front]
        self._data[self._front] = None
        self._front = (self._front + 1) % len(self._data)
        self._size -= 1
        return value  # type: ignore[return-value]

    def move_to_back(self, pos: int) -> None:
        """Move the element at ``pos`` to the back; out-of-range positions are ignored."""
        if not 0 <= pos < self._size - 1:
            return
        value = self._data[self._slot(pos)]
        for offset in range(pos, self._size - 1):
            self._data[self._slot(offset)] = self._data[self._slot(offset + 1)]
        self._data[self._slot(self._size - 1)] = value

    def move_to_front(self, pos: int) -> None:
        """Move the element at ``pos`` to the front; out-of-range positions are ignored."""
        if not 0 < pos < self._size:
            return
        value = self._data[self._slot(pos)]
        for offset in range(pos, 0, -1):
            self._data[self._slot(offset)] = self._data[self._slot(offset - 1)]
        self._data[self._front] = value

    def reverse_range(self, a: int = 0, b: Optional[int] = None) -> None:
        """Reverse the elements from position ``a`` to ``b`` inclusive.

        With no arguments the whole queue is reversed. An empty range
        (``b < a``) changes nothing.
        """
        if b is None:
            b = self._size - 1
        if b < a:
            return
        if a < 0 or b >= self._size:
            raise IndexError("range out of queue bounds")
        left, right = a, b
        while left < right:
            i, j = self._slot(left), self._slot(right)
            self._data[i], self._data[j] = self._data[j], self._data[i]
            left += 1
            right -= 1