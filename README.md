# dsquiz

Classic data structures with extra operations, a set of small algorithmic
problems built on sorted containers, maps and heaps, and a `dsquiz` command
that runs exercise drivers over standard input.

## Install

```
pip install .
pip install ".[test]"   # with pytest for the test suite
```

The package has no runtime dependencies.

## Library

- `dsquiz.vector.Vector`: a dynamic array that tracks its own capacity
  (`capacity()`), doubling it as it grows. It supports `len`, iteration,
  indexing and slicing, `in`, and `at`, `resize` (new slots hold `None`),
  `append`, `pop`, `insert`, `erase`, `clear`, `index_of`, `remove_value`.
  Bulk edits: `erase_many`, `insert_many`, `insert_range`, `uniq`, `compress`
  and `block_swap` (returns `False` and changes nothing for invalid or
  overlapping blocks).
- `dsquiz.pair.Pair`: a dataclass with `first` and `second` that supports `>=`
  in lexicographic order.
- `dsquiz.queue.CircularQueue`: a ring-buffer FIFO queue with `push`, `pop`,
  `front`, `back`, `capacity`, indexed access (negative indices count from
  the back), `move_to_back`, `move_to_front` and `reverse_range` (the whole
  queue when called with no arguments).
- `dsquiz.stack.Stack`: a stack, iterated bottom to top, with `push`, `pop`,
  `top`, `deep_push` (insert with a given number of elements above) and
  `mitosis` (duplicate the elements at depths `a..b`).
- `dsquiz.heap.PriorityQueue`: a binary heap whose top is the greatest element
  under a `less` function (default `<`). It offers `push`, `pop`, `top`,
  `erase`, `get_kth` (exact for `k` from 1 to 3), `get_rank`, `is_heap` and
  `drain`, a generator that pops every element greatest first.
- `dsquiz.songs`: the `Song` dataclass, the heap orderings
  `by_artist_title_count` and `by_count_artist_title`, and `order_songs`,
  which returns the songs listed in both orders.
- `dsquiz.linkedlist.LinkedList`: a doubly linked list with a sentinel node,
  supporting iteration both ways, `front`, `back`, `push_back`, `push_front`,
  `pop_back`, `pop_front`, `clear`, `check` (link consistency as a `bool`),
  and node-relinking edits `reorder`, `replace`, `merge`, `shift` and
  `split_list`.
- `dsquiz.problems`: `is_permutation`, `same_grandfather`,
  `count_in_intervals`, `reverse_range`, `hiatus`, `ice_cream`,
  `heap_descendants`, `min_of_top_counts`, `zuma`, `ordered_union` and
  `ordered_intersect`.

Operations on empty containers and positions out of range raise
`IndexError`; invalid arguments raise `ValueError`.

## Example

```python
from dsquiz.vector import Vector
from dsquiz.heap import PriorityQueue

v = Vector([1, 2, 2, 3, 1])
v.uniq()
print(list(v))            # [1, 2, 3]

pq = PriorityQueue([5, 1, 9, 3])
print(pq.top())           # 9
print(list(pq.drain()))   # [9, 5, 3, 1]
```

## Command line

```
dsquiz --help
dsquiz PROBLEM < input.txt
```

`PROBLEM` is one of: `block-swap`, `compress`, `deep-push`, `erase-many`,
`heap-kth`, `heap-rank`, `insert-many`, `list-merge`, `mitosis`, `pair-gte`,
`queue-at`, `queue-m2b`, `queue-m2f`, `queue-reverse`, `queue-total-reverse`,
`range-insert`, `shift`, `split-list`, `uniq`. Each reads whitespace-separated
tokens from standard input and writes its result to standard output. For
example:

```
$ echo "5 1 2 2 3 1" | dsquiz uniq
Result
1 2 3
```

The command-driven problems (`erase-many`, `deep-push`, `queue-m2b`,
`queue-m2f`, `queue-at`) read single-letter commands until `q`. `split-list`
ignores its input and works on fixed sample lists. If the input leads to an
`IndexError` or `ValueError`, the message is printed to standard error as
`error: ...` and the exit status is 1.

## Limits

The functions in `dsquiz.problems` and `dsquiz.songs` are library calls only:
no `dsquiz` subcommand reads their input from standard input.