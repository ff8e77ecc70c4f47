import io

import pytest

from algokit.segment_tree import SegmentTree, main, run_queries

VALUES = [4, -2, 9, 7, 1]


def test_full_range_max():
    tree = SegmentTree(VALUES)
    assert tree.max(1, len(VALUES)) == max(VALUES)


def test_single_positions():
    tree = SegmentTree(VALUES)
    assert [tree.max(i, i) for i in range(1, len(VALUES) + 1)] == VALUES


def test_length():
    assert len(SegmentTree(VALUES)) == len(VALUES)


def test_add_on_zeros():
    tree = SegmentTree([0] * 6)
    tree.add(2, 4, 7)
    assert tree.max(2, 4) == 7
    assert tree.max(1, 1) == 0
    assert tree.max(5, 6) == 0
    assert tree.max(1, 6) == 7


def test_overlapping_adds():
    tree = SegmentTree([0] * 5)
    tree.add(1, 4, 2)
    tree.add(3, 5, 3)
    assert tree.max(1, 2) == 2
    assert tree.max(5, 5) == 3
    assert tree.max(3, 4) == 5


def test_add_whole_range_shifts_max():
    tree = SegmentTree(VALUES)
    tree.add(1, len(VALUES), -10)
    assert tree.max(1, len(VALUES)) == max(VALUES) - 10
    assert [tree.max(i, i) for i in range(1, len(VALUES) + 1)] == [v - 10 for v in VALUES]


@pytest.mark.parametrize("left, right", [(0, 1), (3, 2), (1, 6)])
def test_invalid_range(left, right):
    tree = SegmentTree(VALUES)
    with pytest.raises(IndexError):
        tree.max(left, right)
    with pytest.raises(IndexError):
        tree.add(left, right, 1)


def test_run_queries_max_only():
    text = "5\n1 3 2 5 4\n3\nm 1 3\nm 2 5\nm 4 4\n"
    assert run_queries(text) == [3, 5, 5]


def test_run_queries_with_updates():
    text = "3\n0 0 0\n3\na 1 2 7\nm 1 3\nm 3 3\n"
    assert run_queries(text) == [7, 0]


def test_run_queries_truncated_input():
    with pytest.raises(ValueError):
        run_queries("3\n1 2\n")


def test_main_prints_answers(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0 0 0\n3\na 1 2 7\nm 1 3\nm 3 3\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "7 0 "