"""Command-line drivers that read a problem's input on stdin and print its answer."""

from __future__ import annotations

import argparse
import operator
import sys
from typing import Callable, Iterable, Iterator, TextIO

from dsquiz.heap import PriorityQueue
from dsquiz.linkedlist import LinkedList
from dsquiz.pair import Pair
from dsquiz.queue import CircularQueue
from dsquiz.stack import Stack
from dsquiz.vector import Vector


class _Tokens:
    """Whitespace-separated tokens of an input stream."""

    def __init__(self, text: str) -> None:
        self._iter: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._iter)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def maybe_word(self) -> str | None:
        return next(self._iter, None)

    def integer(self) -> int:
        return int(self.word())

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]


def _spaced(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


def _flag(value: bool) -> int:
    return 1 if value else 0


def _commands(tokens: _Tokens) -> Iterator[str]:
    """Yield single-letter commands until 'q' or the end of input."""
    while (cmd := tokens.maybe_word()) is not None and cmd != "q":
        yield cmd


# ------------------------------------------------------------------ vectors
def _erase_many(tokens: _Tokens, out: TextIO) -> None:
    vec: Vector[int] = Vector()
    for cmd in _commands(tokens):
        if cmd == "a":
            for value in tokens.integers(tokens.integer()):
                vec.append(value)
        elif cmd == "e":
            vec.erase_many(tokens.integers(tokens.integer()))
        elif cmd == "p":
            out.write(_spaced(vec) + "\n")


def _insert_many(tokens: _Tokens, out: TextIO) -> None:
    vec = Vector(tokens.integers(tokens.integer()))
    m = tokens.integer()
    data = [(tokens.integer(), tokens.integer()) for _ in range(m)]
    vec.insert_many(data)
    out.write(_spaced(vec) + "\n")


def _pair_gte(tokens: _Tokens, out: TextIO) -> None:
    out.write("Enter pair<int,string> A: ")
    a = Pair(tokens.integer(), tokens.word())
    out.write("Enter pair<int,string> B: ")
    b = Pair(tokens.integer(), tokens.word())
    out.write(f"Result of a >= b is {_flag(a >= b)}\n")
    out.write(f"Result of b >= a is {_flag(b >= a)}\n")


def _range_insert(tokens: _Tokens, out: TextIO) -> None:
    v1 = Vector(tokens.integers(tokens.integer()))
    v2 = Vector(tokens.integers(tokens.integer()))
    position, first, last = tokens.integers(3)
    if not 0 <= first <= last <= len(v2):
        raise IndexError("source range out of bounds")
    v1.insert_range(position, v2[first:last])
    out.write("Result\n" + _spaced(v1) + "\n")


def _uniq(tokens: _Tokens, out: TextIO) -> None:
    vec = Vector(tokens.integers(tokens.integer()))
    vec.uniq()
    out.write("Result\n" + _spaced(vec) + "\n")


def _compress(tokens: _Tokens, out: TextIO) -> None:
    vec = Vector(tokens.integers(tokens.integer()))
    vec.compress()
    out.write(f"mSize of v is {len(vec)}\n")
    out.write(f"mCap  of v is {vec.capacity()}\n")
    out.write(_spaced(vec))


def _block_swap(tokens: _Tokens, out: TextIO) -> None:
    vec = Vector(tokens.integers(tokens.integer()))
    a, b, m = tokens.integers(3)
    result = vec.block_swap(a, b, m)
    out.write(f"result is {_flag(result)}\n")
    out.write(f"Size of v is {len(vec)}\n")
    out.write("v: " + _spaced(vec) + "\n")


# ------------------------------------------------------------------- stacks
def _deep_push(tokens: _Tokens, out: TextIO) -> None:
    stack: Stack[int] = Stack()
    for cmd in _commands(tokens):
        if cmd == "u":
            stack.push(tokens.integer())
        elif cmd == "o":
            stack.pop()
        elif cmd == "p":
            data = "".join(f" {x}" for x in stack)
            out.write(f"Stack size = {len(stack)} Data ={data}\n")
        elif cmd == "d":
            pos, value = tokens.integers(2)
            stack.deep_push(pos, value)


def _mitosis(tokens: _Tokens, out: TextIO) -> None:
    n, t = tokens.integers(2)
    stack = Stack(tokens.integers(n))
    for _ in range(t):
        a, b = tokens.integers(2)
        stack.mitosis(a, b)
    out.write(_spaced(stack) + "\n")


# ------------------------------------------------------------------- queues
def _queue_move(tokens: _Tokens, out: TextIO, to_back: bool) -> None:
    queue: CircularQueue[int] = CircularQueue()
    for cmd in _commands(tokens):
        if cmd == "u":
            queue.push(tokens.integer())
        elif cmd == "o":
            queue.pop()
        elif cmd == "p":
            out.write(f"Size {len(queue)}: " + _spaced(queue) + "\n")
        elif cmd == "m":
            pos = tokens.integer()
            if to_back:
                queue.move_to_back(pos)
            else:
                queue.move_to_front(pos)


def _queue_m2b(tokens: _Tokens, out: TextIO) -> None:
    _queue_move(tokens, out, to_back=True)


def _queue_m2f(tokens: _Tokens, out: TextIO) -> None:
    _queue_move(tokens, out, to_back=False)


def _queue_reverse(tokens: _Tokens, out: TextIO) -> None:
    n, a, b = tokens.integers(3)
    queue = CircularQueue(tokens.integers(n))
    queue.reverse_range(a, b)
    out.write(f"size of q = {len(queue)}\n")
    out.write(_spaced(queue.pop() for _ in range(len(queue))))


def _queue_total_reverse(tokens: _Tokens, out: TextIO) -> None:
    queue = CircularQueue(tokens.integers(tokens.integer()))
    queue.reverse_range()
    out.write(_spaced(queue.pop() for _ in range(len(queue))) + "\n")


def _queue_at(tokens: _Tokens, out: TextIO) -> None:
    queue: CircularQueue[int] = CircularQueue()
    while True:
        cmd = tokens.word()
        if cmd == "q":
            break
        if cmd == "a":
            queue.push(tokens.integer())
        elif cmd == "d":
            queue.pop()
        elif cmd == "k":
            idx = tokens.integer()
            out.write(f"Data at {idx} is {queue[idx]}\n")
        elif cmd == "p":
            out.write(f"Queue size = {len(queue)} Data = " + _spaced(queue) + "\n")
        else:
            out.write("WRONG COMMAND\n")
    out.write("Exit\n")


# ------------------------------------------------------------------- heaps
def _heap_kth(tokens: _Tokens, out: TextIO) -> None:
    kind = tokens.integer()
    if kind in (1, 2, 3):
        parse: Callable[[str], object] = str if kind == 2 else int
        less = operator.gt if kind == 3 else None
        rounds, max_k = tokens.integers(2)
        for _ in range(rounds):
            n = tokens.integer()
            heap = PriorityQueue((parse(tokens.word()) for _ in range(n)), less=less)
            if len(heap) < max_k:
                raise ValueError("heap holds fewer elements than requested")
            for k in range(1, max_k + 1):
                out.write(f"{heap.get_kth(k)}\n")
    elif kind in (4, 5):
        _repeat, n = tokens.integers(2)
        less = operator.gt if kind == 5 else None
        heap = PriorityQueue(range(n), less=less)
        if len(heap) < 3:
            raise ValueError("heap holds fewer than three elements")
        out.write(f"{heap.get_kth(1)} {heap.get_kth(2)} {heap.get_kth(3)}\n")
    else:
        raise ValueError(f"unknown test type {kind}")


def _heap_rank(tokens: _Tokens, out: TextIO) -> None:
    n, m = tokens.integers(2)
    heap = PriorityQueue(tokens.integers(n))
    for pos in tokens.integers(m):
        out.write(f"{heap.get_rank(pos)}\n")


# -------------------------------------------------------------------- lists
def _list_merge(tokens: _Tokens, out: TextIO) -> None:
    n, m = tokens.integers(2)
    target = LinkedList(tokens.integers(n))
    others = [LinkedList(tokens.integers(tokens.integer())) for _ in range(m)]
    target.merge(others)
    out.write(f"Size = {len(target)}\n")
    out.write("From FRONT to BACK: " + _spaced(target) + "\n")
    out.write("From BACK to FRONT: " + _spaced(reversed(target)) + "\n")


def _write_link_check(lst: LinkedList[int], out: TextIO) -> None:
    if not lst.check():
        out.write("POINTER ERROR\n")
    out.write(_spaced(lst) + "\n")
    out.write(_spaced(reversed(lst)) + "\n")


def _shift(tokens: _Tokens, out: TextIO) -> None:
    lst = LinkedList(tokens.integers(tokens.integer()))
    lst.shift(tokens.integer())
    _write_link_check(lst, out)


def _split_list(tokens: _Tokens, out: TextIO) -> None:
    source = LinkedList([1, 7, 9, 10, 2, 6, 3])
    first = LinkedList([1, 2])
    second = LinkedList([3, 4, 5])
    source.split_list(first, second)
    for name, lst in (("x", source), ("a", first), ("b", second)):
        out.write(f"{name} is\n")
        for i, value in enumerate(lst):
            out.write(f"Node {i}: {value}\n")


_DRIVERS: dict[str, Callable[[_Tokens, TextIO], None]] = {
    "erase-many": _erase_many,
    "insert-many": _insert_many,
    "pair-gte": _pair_gte,
    "range-insert": _range_insert,
    "uniq": _uniq,
    "compress": _compress,
    "block-swap": _block_swap,
    "deep-push": _deep_push,
    "mitosis": _mitosis,
    "queue-m2b": _queue_m2b,
    "queue-m2f": _queue_m2f,
    "queue-reverse": _queue_reverse,
    "queue-total-reverse": _queue_total_reverse,
    "queue-at": _queue_at,
    "heap-kth": _heap_kth,
    "heap-rank": _heap_rank,
    "list-merge": _list_merge,
    "shift": _shift,
    "split-list": _split_list,
}


def main(argv: list[str] | None = None) -> int:
    """Run the named problem on standard input; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="dsquiz", description="Run a data-structure exercise on standard input."
    )
    parser.add_argument("problem", choices=sorted(_DRIVERS))
    args = parser.parse_args(argv)
    tokens = _Tokens(sys.stdin.read())
    try:
        _DRIVERS[args.problem](tokens, sys.stdout)
    except (IndexError, ValueError) as exc:
        sys.stdout.flush()
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())