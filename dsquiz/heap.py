"""Binary max-heap priority queue with a pluggable ordering."""

from __future__ import annotations

import operator
from functools import cmp_to_key
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

Less = Callable[[T, T], bool]

# Only the top three levels of a heap (seven slots) can hold its three largest values.
_KTH_WINDOW = 7


class PriorityQueue(Generic[T]):
    """Priority queue whose top is the greatest element under ``less``.

    ``less(a, b)`` must return True when ``a`` orders before ``b``; the
    default is ``<``, giving a max-heap.
    """

    def __init__(self, items: Iterable[T] = (), less: Optional[Less] = None) -> None:
        self._less: Less = less if less is not None else operator.lt
        self._data: list[T] = []
        for item in items:
            self.push(item)

    # ---------------------------------------------------------------- helpers
    def _sift_up(self, idx: int) -> None:
        data, less = self._data, self._less
        item = data[idx]
        while idx > 0:
            parent = (idx - 1) // 2
            if less(item, data[parent]):
                break
            data[idx] = data[parent]
            idx = parent
        data[idx] = item

    def _sift_down(self, idx: int) -> None:
        data, less = self._data, self._less
        size = len(data)
        item = data[idx]
        while (child := 2 * idx + 1) < size:
            if child + 1 < size and less(data[child], data[child + 1]):
                child += 1
            if less(data[child], item):
                break
            data[idx] = data[child]
            idx = child
        data[idx] = item

    def _require_items(self) -> None:
        if not self._data:
            raise IndexError("priority queue is empty")

    # ------------------------------------------------------- container protocol
    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"PriorityQueue({self._data!r})"

    # ----------------------------------------------------------------- access
    def top(self) -> T:
        """The greatest element."""
        self._require_items()
        return self._data[0]

    # --------------------------------------------------------------- modifiers
    def push(self, value: T) -> None:
        """Add ``value`` to the heap."""
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def pop(self) -> T:
        """Remove and return the greatest element."""
        self._require_items()
        top = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return top

    def erase(self, value: T) -> None:
        """Remove the first stored element equal to ``value``, if any."""
        try:
            idx = self._data.index(value)
        except ValueError:
            return
        last = self._data.pop()
        if idx < len(self._data):
            self._data[idx] = last
            self._sift_up(idx)
            self._sift_down(idx)

    # ---------------------------------------------------------------- queries
    def get_kth(self, k: int) -> T:
        """The ``k``-th greatest element, for ``k`` from 1 to 3.

        Only the first seven heap slots are examined, which is exact for the
        three greatest elements.
        """
        window = self._data[:_KTH_WINDOW]
        if not 1 <= k <= len(window):
            raise IndexError("k out of range")
        less = self._less

        def compare(a: T, b: T) -> int:
            if less(a, b):
                return -1
            if less(b, a):
                return 1
            return 0

        window.sort(key=cmp_to_key(compare))
        return window[len(window) - k]

    def get_rank(self, pos: int) -> int:
        """Number of stored elements strictly greater than the one at slot ``pos``."""
        if not 0 <= pos < len(self._data):
            raise IndexError("heap position out of range")
        value = self._data[pos]
        return sum(1 for item in self._data if self._less(value, item))

    def is_heap(self) -> bool:
        """True when no parent orders before one of its children."""
        data, less = self._data, self._less
        return not any(less(data[(i - 1) // 2], data[i]) for i in range(1, len(data)))

    def drain(self) -> Iterator[T]:
        """Pop and yield every element, greatest first."""
        while self._data:
            yield self.pop()