"""Small problems over maps, sorted sequences, queues and lists."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter, deque
from itertools import accumulate
from typing import Hashable, Iterable, Sequence, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

# Number of days covered by the ice-cream consumption table.
_DAYS = 100010


def is_permutation(values: Iterable[int]) -> bool:
    """True when the ``n`` values contain every integer from 1 to ``n``."""
    values = list(values)
    present = set(values)
    return all(i in present for i in range(1, len(values) + 1))


def same_grandfather(
    pairs: Iterable[tuple[int, int]], queries: Iterable[tuple[int, int]]
) -> list[bool]:
    """Answer, for each ``(x, y)`` query, whether two different people share a grandfather.

    Each pair ``(a, b)`` says that ``a`` is the father of ``b``; a later pair
    for the same child replaces an earlier one.
    """
    father = {child: parent for parent, child in pairs}

    def grandfather(person: int) -> int | None:
        parent = father.get(person)
        if parent is None:
            return None
        return father.get(parent)

    answers = []
    for x, y in queries:
        gx, gy = grandfather(x), grandfather(y)
        answers.append(x != y and gx is not None and gx == gy)
    return answers


def count_in_intervals(values: Iterable[int], queries: Iterable[int], k: int) -> list[int]:
    """For each query ``t``, count the values lying in ``[t - k, t + k]``."""
    ordered = sorted(values)
    return [bisect_right(ordered, t + k) - bisect_left(ordered, t - k) for t in queries]


def reverse_range(values: Sequence[T], a: int, b: int) -> list[T]:
    """Return a copy of ``values`` with positions ``a`` to ``b`` inclusive reversed."""
    result = list(values)
    if not (0 <= a <= len(result) and -1 <= b < len(result)):
        raise IndexError("range out of bounds")
    if a < b:
        result[a:b + 1] = result[a:b + 1][::-1]
    return result


def hiatus(
    records: Iterable[tuple[int, int]], queries: Iterable[tuple[int, int]]
) -> list[tuple[int, int]]:
    """Find, for each ``(year, month)`` query, the latest record strictly before it.

    The answer is ``(-1, -1)`` when no record comes before the query, ``(0, 0)``
    when the query date itself is a record, and otherwise the record's date.
    """
    by_year: dict[int, set[int]] = {}
    for year, month in records:
        by_year.setdefault(year, set()).add(month)
    if not by_year:
        raise ValueError("at least one record is required")
    years = sorted(by_year)
    months = {year: sorted(ms) for year, ms in by_year.items()}

    min_year, max_year = years[0], years[-1]
    min_month, max_month = months[min_year][0], months[max_year][-1]

    answers: list[tuple[int, int]] = []
    for x, y in queries:
        if (x, y) < (min_year, min_month):
            answers.append((-1, -1))
            continue
        if x > max_year or (x == max_year and y > max_month):
            answers.append((max_year, max_month))
            continue
        idx = bisect_right(years, x) - 1
        year = years[idx]
        if year != x:
            answers.append((year, months[year][-1]))
            continue
        ms = months[year]
        pos = bisect_right(ms, y)
        if pos == 0:
            if idx == 0:
                answers.append((-1, -1))
            else:
                earlier = years[idx - 1]
                answers.append((earlier, months[earlier][-1]))
        elif ms[pos - 1] == y:
            answers.append((0, 0))
        else:
            answers.append((year, ms[pos - 1]))
    return answers


def ice_cream(
    changes: Iterable[tuple[int, int]], start: int, queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer ``(amount, day)`` queries against a daily eating rate.

    The rate begins at ``start`` and becomes ``rate`` on each ``(day, rate)``
    change. A query asks on which day the running total first reaches
    ``amount``; if that lies after ``day``, the total eaten up to ``day`` is
    added to the amount and the search continues after ``day``.
    """
    pending = iter(sorted(changes))
    upcoming = next(pending, None)
    rate = start
    daily = [start]
    for day in range(1, _DAYS):
        if upcoming is not None and day == upcoming[0]:
            rate = upcoming[1]
            upcoming = next(pending, None)
        daily.append(rate)
    totals = list(accumulate(daily))

    answers = []
    for amount, day in queries:
        first = bisect_left(totals, amount)
        if first <= day:
            answers.append(first)
            continue
        answers.append(bisect_left(totals, amount + totals[day], day + 1))
    return answers


def heap_descendants(n: int, a: int) -> list[int]:
    """Slot ``a`` and all its descendants in an ``n``-slot heap, in level order."""
    order = []
    pending = deque([a])
    while pending:
        k = pending.popleft()
        order.append(k)
        pending.extend(child for child in (2 * k + 1, 2 * k + 2) if child < n)
    return order


def min_of_top_counts(words: Iterable[str], m: int) -> int:
    """Smallest among the ``m`` highest occurrence counts of the words.

    A negative ``m`` takes every count. Raises ValueError when nothing is taken.
    """
    counts = sorted(Counter(words).values(), reverse=True)
    top = counts if m < 0 else counts[:m]
    if not top:
        raise ValueError("no counts selected")
    return min(top)


def zuma(beads: Iterable[int], k: int, v: int) -> list[int]:
    """Insert bead ``v`` before position ``k`` and clear runs of three or more.

    After a run is cleared, the beads on either side meet; if they share a
    colour the run they form is checked again. Clearing stops when a removed
    run touched either end of the row.
    """
    row = list(beads)
    if not 0 <= k <= len(row):
        raise IndexError("insert position out of range")
    row.insert(k, v)
    cur = k
    while row:
        st = cur
        while st > 0 and row[st] == row[st - 1]:
            st -= 1
        en = cur
        while en + 1 < len(row) and row[en] == row[en + 1]:
            en += 1
        if en - st + 1 < 3:
            break
        at_start = st == 0
        at_end = en == len(row) - 1
        del row[st:en + 1]
        if not row or at_start or at_end:
            break
        if row[st] != row[st - 1]:
            break
        cur = st
    return row


def ordered_union(a: Iterable[H], b: Iterable[H]) -> list[H]:
    """Distinct values of ``a`` then ``b``, each at its first appearance."""
    return list(dict.fromkeys([*a, *b]))


def ordered_intersect(a: Iterable[H], b: Iterable[H]) -> list[H]:
    """Values of ``a`` that also occur in ``b``, in the order of ``a``."""
    in_b = set(b)
    return [x for x in a if x in in_b]