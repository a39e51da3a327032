import io

import pytest

from dsquiz.cli import main


def run(monkeypatch, capsys, problem, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([problem])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_erase_many(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "erase-many", "a 5 10 20 30 40 50 e 2 1 3 p q")
    assert code == 0
    assert out == "10 30 50 \n"


def test_erase_many_stops_at_end_of_input(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "erase-many", "a 2 4 5 p")
    assert code == 0
    assert out == "4 5 \n"


def test_insert_many(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "insert-many", "3\n1 2 3\n2\n3 8\n0 9\n")
    assert code == 0
    assert out == "9 1 2 3 8 \n"


def test_pair_gte(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "pair-gte", "1 b 1 a")
    assert code == 0
    assert "Result of a >= b is 1\n" in out
    assert "Result of b >= a is 0\n" in out


def test_pair_gte_equal_pairs(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "pair-gte", "3 x 3 x")
    assert "Result of a >= b is 1\n" in out
    assert "Result of b >= a is 1\n" in out


def test_range_insert(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "range-insert", "3 1 2 3 3 7 8 9 1 0 2")
    assert code == 0
    assert out == "Result\n1 7 8 2 3 \n"


def test_range_insert_bad_range(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, "range-insert", "1 1 2 7 8 0 2 1")
    assert code == 1
    assert "error" in err


def test_uniq(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "uniq", "5 3 1 3 2 1")
    assert code == 0
    assert out == "Result\n3 1 2 \n"


def test_compress(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "compress", "3 4 5 6")
    assert out == "mSize of v is 3\nmCap  of v is 3\n4 5 6 "


def test_block_swap_success(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "block-swap", "6 1 2 3 4 5 6 0 3 2")
    assert out == "result is 1\nSize of v is 6\nv: 4 5 3 1 2 6 \n"


def test_block_swap_overlap(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "block-swap", "4 1 2 3 4 0 1 2")
    assert out == "result is 0\nSize of v is 4\nv: 1 2 3 4 \n"


def test_deep_push(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "deep-push", "u 1 u 2 u 3 d 1 9 p q")
    assert out == "Stack size = 4 Data = 1 2 9 3\n"


def test_deep_push_pop_empty_is_error(monkeypatch, capsys):
    code, out, err = run(monkeypatch, capsys, "deep-push", "o q")
    assert code == 1
    assert out == ""
    assert "empty" in err


def test_mitosis_top_only(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "mitosis", "3 1 1 2 3 0 0")
    assert out == "1 2 3 3 \n"


def test_queue_move_to_back(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "queue-m2b", "u 1 u 2 u 3 m 0 p q")
    assert out == "Size 3: 2 3 1 \n"


def test_queue_move_to_front(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "queue-m2f", "u 1 u 2 u 3 m 2 p q")
    assert out == "Size 3: 3 1 2 \n"


def test_queue_move_ignores_out_of_range(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "queue-m2f", "u 1 u 2 m 5 p q")
    assert out == "Size 2: 1 2 \n"


def test_queue_reverse(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "queue-reverse", "5 1 3 1 2 3 4 5")
    assert out == "size of q = 5\n1 4 3 2 5 "


def test_queue_total_reverse(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "queue-total-reverse", "3 1 2 3")
    assert out == "3 2 1 \n"


def test_queue_at(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "queue-at", "a 5 a 6 a 7 k 1 k -1 x p q")
    assert out == (
        "Data at 1 is 6\nData at -1 is 7\nWRONG COMMAND\n"
        "Queue size = 3 Data = 5 6 7 \nExit\n"
    )


def test_heap_kth_ints(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "heap-kth", "1\n1 3\n5 4 9 1 7 3\n")
    assert out == "9\n7\n4\n"


def test_heap_kth_strings(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "heap-kth", "2 1 2 3 b c a")
    assert out == "c\nb\n"


def test_heap_kth_random_max(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "heap-kth", "4 2 10")
    assert out == "9 8 7\n"


def test_heap_kth_random_min(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "heap-kth", "5 1 10")
    assert out == "0 1 2\n"


def test_heap_rank_of_top_is_zero(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "heap-rank", "3 1 5 1 3 0")
    assert out == "0\n"


def test_list_merge(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "list-merge", "2 2 1 2 1 3 2 4 5")
    assert out == (
        "Size = 5\nFrom FRONT to BACK: 1 2 3 4 5 \nFrom BACK to FRONT: 5 4 3 2 1 \n"
    )


def test_shift(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "shift", "4 1 2 3 4 1")
    assert out == "2 3 4 1 \n1 4 3 2 \n"


def test_split_list(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "split-list", "")
    lines = out.splitlines()
    a_start, b_start = lines.index("a is"), lines.index("b is")
    assert lines[0] == "x is"
    assert a_start == 1
    assert [line.split(": ")[1] for line in lines[a_start + 1:b_start]] == [
        "1", "2", "1", "7", "9", "10",
    ]
    assert [line.split(": ")[1] for line in lines[b_start + 1:]] == [
        "3", "4", "5", "2", "6", "3",
    ]


def test_truncated_input_is_error(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, "uniq", "4 1 2")
    assert code == 1
    assert "end of input" in err


def test_unknown_problem_exits():
    with pytest.raises(SystemExit):
        main(["no-such-problem"])