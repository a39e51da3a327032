import operator

import pytest

from dsquiz.heap import PriorityQueue

VALUES = [5, 3, 8, 1, 9, 2, 7, 4, 6, 0]


def test_drain_yields_descending_order():
    pq = PriorityQueue(VALUES)
    assert list(pq.drain()) == sorted(VALUES, reverse=True)
    assert len(pq) == 0


def test_custom_less_gives_min_heap():
    pq = PriorityQueue(VALUES, less=operator.gt)
    assert pq.top() == min(VALUES)
    assert list(pq.drain()) == sorted(VALUES)


def test_push_and_pop_keep_heap_property():
    pq = PriorityQueue()
    for v in VALUES:
        pq.push(v)
        assert pq.is_heap()
    assert len(pq) == len(VALUES)
    assert pq.pop() == max(VALUES)
    assert pq.is_heap()
    assert len(pq) == len(VALUES) - 1


def test_empty_top_and_pop_raise():
    pq = PriorityQueue()
    with pytest.raises(IndexError):
        pq.top()
    with pytest.raises(IndexError):
        pq.pop()


def test_erase_removes_value():
    pq = PriorityQueue([5, 3, 8, 1])
    pq.erase(3)
    assert pq.is_heap()
    assert list(pq.drain()) == [8, 5, 1]


def test_erase_missing_value_is_noop():
    pq = PriorityQueue(VALUES)
    pq.erase(42)
    assert len(pq) == len(VALUES)
    assert list(pq.drain()) == sorted(VALUES, reverse=True)


def test_erase_every_value_in_turn():
    pq = PriorityQueue(VALUES)
    remaining = list(VALUES)
    for v in VALUES[::2]:
        pq.erase(v)
        remaining.remove(v)
        assert pq.is_heap()
    assert list(pq.drain()) == sorted(remaining, reverse=True)


def test_get_kth_matches_three_greatest():
    pq = PriorityQueue(VALUES)
    expected = sorted(VALUES, reverse=True)
    assert [pq.get_kth(k) for k in (1, 2, 3)] == expected[:3]


def test_get_kth_with_greater_ordering():
    pq = PriorityQueue(VALUES, less=operator.gt)
    expected = sorted(VALUES)
    assert [pq.get_kth(k) for k in (1, 2, 3)] == expected[:3]


def test_get_kth_strings():
    words = ["pear", "apple", "fig", "kiwi", "banana"]
    pq = PriorityQueue(words)
    assert pq.get_kth(1) == max(words)
    assert pq.get_kth(2) == sorted(words)[-2]


def test_get_kth_out_of_range():
    pq = PriorityQueue([1, 2])
    with pytest.raises(IndexError):
        pq.get_kth(3)
    with pytest.raises(IndexError):
        pq.get_kth(0)


def test_get_rank_of_top_is_zero():
    pq = PriorityQueue(VALUES)
    assert pq.get_rank(0) == 0


def test_get_ranks_cover_all_positions_for_distinct_values():
    pq = PriorityQueue(VALUES)
    ranks = sorted(pq.get_rank(i) for i in range(len(pq)))
    assert ranks == list(range(len(VALUES)))


def test_get_rank_out_of_range():
    pq = PriorityQueue([1])
    with pytest.raises(IndexError):
        pq.get_rank(1)