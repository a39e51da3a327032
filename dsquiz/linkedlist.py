"""Doubly linked circular list with a sentinel node and splice-based edits."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Optional[T] = None) -> None:
        self.data = data
        self.prev: _Node[T] = self
        self.next: _Node[T] = self


class LinkedList(Generic[T]):
    """Doubly linked list; nodes are relinked rather than copied where possible."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._header: _Node[T] = _Node()
        self._size = 0
        for item in items:
            self.push_back(item)

    # ---------------------------------------------------------------- helpers
    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._header.next
        while node is not self._header:
            following = node.next
            yield node
            node = following

    def _insert_before(self, anchor: _Node[T], value: T) -> _Node[T]:
        node = _Node(value)
        node.prev = anchor.prev
        node.next = anchor
        anchor.prev.next = node
        anchor.prev = node
        self._size += 1
        return node

    @staticmethod
    def _unlink(node: _Node[T]) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = node

    @staticmethod
    def _splice_chain_before(anchor: _Node[T], first: _Node[T], last: _Node[T]) -> None:
        """Link the detached chain ``first..last`` in front of ``anchor``."""
        before = anchor.prev
        before.next = first
        first.prev = before
        last.next = anchor
        anchor.prev = last

    def _reset(self) -> None:
        self._header.next = self._header
        self._header.prev = self._header
        self._size = 0

    def _require_items(self) -> None:
        if self._size == 0:
            raise IndexError("list is empty")

    # ------------------------------------------------------- container protocol
    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.data  # type: ignore[misc]

    def __reversed__(self) -> Iterator[T]:
        node = self._header.prev
        while node is not self._header:
            yield node.data  # type: ignore[misc]
            node = node.prev

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    # ----------------------------------------------------------------- access
    def front(self) -> T:
        """The first element."""
        self._require_items()
        return self._header.next.data  # type: ignore[return-value]

    def back(self) -> T:
        """The last element."""
        self._require_items()
        return self._header.prev.data  # type: ignore[return-value]

    # --------------------------------------------------------------- modifiers
    def push_back(self, value: T) -> None:
        self._insert_before(self._header, value)

    def push_front(self, value: T) -> None:
        self._insert_before(self._header.next, value)

    def pop_back(self) -> T:
        """Remove and return the last element."""
        self._require_items()
        node = self._header.prev
        self._unlink(node)
        self._size -= 1
        return node.data  # type: ignore[return-value]

    def pop_front(self) -> T:
        """Remove and return the first element."""
        self._require_items()
        node = self._header.next
        self._unlink(node)
        self._size -= 1
        return node.data  # type: ignore[return-value]

    def clear(self) -> None:
        for node in self._nodes():
            node.prev = node.next = node
        self._reset()

    def check(self) -> bool:
        """True when walking forward or backward size+1 steps returns to the sentinel
        and every link is mirrored by its neighbour."""
        node = self._header
        for _ in range(self._size + 1):
            if node.next.prev is not node:
                return False
            node = node.next
        if node is not self._header:
            return False
        node = self._header
        for _ in range(self._size + 1):
            node = node.prev
        return node is self._header

    # ------------------------------------------------------------- bulk edits
    def reorder(self, pos: int, selected: Iterable[int]) -> None:
        """Move the elements at the ``selected`` indices, in index order, so they
        stand together where original position ``pos`` was.

        Indices outside the list are ignored.
        """
        wanted = set(selected)
        taken: list[_Node[T]] = []
        before_pos = 0
        for index, node in enumerate(self._nodes()):
            if index in wanted:
                taken.append(node)
                if index < pos:
                    before_pos += 1
        for node in taken:
            self._unlink(node)
            self._size -= 1
        target = pos - before_pos
        anchor = self._header
        if target < self._size:
            anchor = self._header.next
            for _ in range(max(target, 0)):
                anchor = anchor.next
        for node in taken:
            self._splice_chain_before(anchor, node, node)
            self._size += 1

    def replace(self, x: T, other: Iterable[T]) -> None:
        """Replace every element equal to ``x`` by a copy of the values of ``other``."""
        replacement = list(other)
        for node in list(self._nodes()):
            if node.data == x:
                for value in replacement:
                    self._insert_before(node, value)
                self._unlink(node)
                self._size -= 1

    def merge(self, lists: Iterable[LinkedList[T]]) -> None:
        """Move all nodes of each list in ``lists`` onto the end; those lists end empty."""
        for sub in lists:
            if sub is self:
                raise ValueError("cannot merge a list into itself")
            if sub._size == 0:
                continue
            self._splice_chain_before(self._header, sub._header.next, sub._header.prev)
            self._size += sub._size
            sub._reset()

    def shift(self, k: int) -> None:
        """Rotate left by ``k`` places, so the element at index ``k`` becomes first.

        Negative ``k`` rotates right.
        """
        n = self._size
        if n <= 1:
            return
        k %= n
        if k == 0:
            return
        new_first = self._header.next
        for _ in range(k):
            new_first = new_first.next
        new_last = new_first.prev
        old_first = self._header.next
        old_last = self._header.prev
        old_last.next = old_first
        old_first.prev = old_last
        self._header.next = new_first
        new_first.prev = self._header
        self._header.prev = new_last
        new_last.next = self._header

    def split_list(self, first: LinkedList[T], second: LinkedList[T]) -> None:
        """Append the first half (the larger on odd length) to ``first`` and the rest
        to ``second``; this list ends empty."""
        if first is self or second is self:
            raise ValueError("cannot split a list into itself")
        if self._size == 0:
            return
        mid = (self._size + 1) // 2
        head = self._header.next
        tail = self._header.prev
        mid_node = head
        for _ in range(mid - 1):
            mid_node = mid_node.next
        rest = mid_node.next
        rest_count = self._size - mid
        self._reset()
        self._splice_chain_before(first._header, head, mid_node)
        first._size += mid
        if rest_count:
            self._splice_chain_before(second._header, rest, tail)
            second._size += rest_count