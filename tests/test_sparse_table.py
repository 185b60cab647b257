import random

import pytest

from cpkit.sparse_table import SparseTable


def _all_ranges(n):
    return [(l, r) for l in range(n) for r in range(l, n)]


def test_matches_slice_minimum():
    rng = random.Random(11)
    values = [rng.randint(-50, 50) for _ in range(37)]
    table = SparseTable(values)
    for l, r in _all_ranges(len(values)):
        expected = min(values[l : r + 1])
        assert table.query(l, r) == expected
        assert table.query_by_lifting(l, r) == expected


def test_single_element():
    table = SparseTable([42])
    assert table.query(0, 0) == 42
    assert table.query_by_lifting(0, 0) == 42


def test_power_of_two_length():
    values = [8, 6, 7, 5, 3, 0, 9, 2]
    table = SparseTable(values)
    assert table.query(0, len(values) - 1) == min(values)
    assert table.query_by_lifting(0, len(values) - 1) == min(values)


def test_works_with_other_orderable_values():
    words = ["pear", "apple", "kiwi", "fig"]
    table = SparseTable(words)
    assert table.query(0, 3) == "apple"
    assert table.query(2, 3) == "fig"


@pytest.mark.parametrize("left,right", [(-1, 2), (3, 2), (0, 5), (5, 5)])
def test_invalid_ranges_raise(left, right):
    table = SparseTable([1, 2, 3, 4, 5])
    with pytest.raises(IndexError):
        table.query(left, right)
    with pytest.raises(IndexError):
        table.query_by_lifting(left, right)


def test_empty_table_rejects_queries():
    table = SparseTable([])
    assert len(table) == 0
    with pytest.raises(IndexError):
        table.query(0, 0)