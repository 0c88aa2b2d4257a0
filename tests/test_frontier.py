import pytest
from hypothesis import given
from hypothesis import strategies as st

from k2dyn.frontier import Frontier, FrontierError


def build(preorders):
    frontier = Frontier()
    for p in preorders:
        frontier.add(p, f"block{p}")
    return frontier


def test_add_keeps_sorted_and_pairs_children():
    frontier = build([7, 2, 5])
    assert frontier.preorders == (2, 5, 7)
    assert frontier.children == ("block2", "block5", "block7")
    assert len(frontier) == 3
    assert frontier.child(1) == "block5"


def test_constructor_rejects_mismatch():
    with pytest.raises(FrontierError):
        Frontier([1, 2], ["a"])


def test_constructor_rejects_unsorted():
    with pytest.raises(FrontierError):
        Frontier([3, 1], ["a", "b"])


def test_check_finds_and_advances():
    frontier = build([2, 5, 7])
    found, index = frontier.check(5, 0)
    assert found is True
    assert frontier.preorders[index] == 5
    found, index2 = frontier.check(6, index)
    assert found is False
    assert index2 >= index


def test_check_on_empty_frontier():
    assert Frontier().check(0, 0) == (False, 0)


def test_check_past_end():
    frontier = build([2, 5])
    found, index = frontier.check(9, 0)
    assert found is False
    assert index == len(frontier)


def test_insertion_point_after_equal_values():
    frontier = build([2, 5, 7])
    assert frontier.insertion_point(5) == frontier.preorders.index(5) + 1
    assert frontier.insertion_point(100) == len(frontier)


def test_extract_moves_middle_entries():
    frontier = build([2, 5, 7, 9])
    sub = frontier.extract(2, 7)
    assert sub.preorders == (5, 7)
    assert sub.children == ("block5", "block7")
    assert frontier.preorders == (2, 9)


def test_extract_beyond_end_is_empty():
    frontier = build([2, 5])
    sub = frontier.extract(5, 10)
    assert len(sub) == 0
    assert frontier.preorders == (2, 5)


def test_extract_reversed_range_raises():
    frontier = build([2, 5, 7, 9])
    with pytest.raises(FrontierError):
        frontier.extract(7, 2)


def test_fix_indexes_shifts_only_later_entries():
    frontier = build([2, 5, 7])
    frontier.fix_indexes(5, 3)
    assert frontier.preorders == (2, 5 - 3, 7 - 3)


def test_fix_indexes_too_large_delta_raises():
    frontier = build([2, 5])
    with pytest.raises(FrontierError):
        frontier.fix_indexes(2, 3)
    assert frontier.preorders == (2, 5)


def test_collapse_removes_range():
    frontier = build([2, 5, 7, 9])
    frontier.collapse(5, 7)
    assert frontier.preorders == (2, 9)
    assert frontier.children == ("block2", "block9")


def test_collapse_nothing_in_range():
    frontier = build([2, 9])
    frontier.collapse(4, 6)
    assert frontier.preorders == (2, 9)


def test_collapse_empty_frontier():
    frontier = Frontier()
    frontier.collapse(0, 10)
    assert len(frontier) == 0


@given(st.lists(st.integers(min_value=0, max_value=1000), max_size=30))
def test_add_produces_sorted_preorders(values):
    frontier = build(values)
    assert list(frontier.preorders) == sorted(values)


@given(
    st.lists(st.integers(min_value=0, max_value=200), max_size=30),
    st.integers(min_value=0, max_value=200),
    st.integers(min_value=0, max_value=200),
)
def test_extract_partitions_entries(values, a, b):
    low, high = min(a, b), max(a, b)
    frontier = build(values)
    sub = frontier.extract(low, high)
    assert sorted(sub.preorders + frontier.preorders) == sorted(values)
    assert all(low < p <= high for p in sub.preorders)
    assert all(not (low < p <= high) for p in frontier.preorders)


@given(
    st.lists(st.integers(min_value=0, max_value=200), max_size=30),
    st.integers(min_value=0, max_value=200),
    st.integers(min_value=0, max_value=200),
)
def test_collapse_removes_exactly_range(values, a, b):
    low, high = min(a, b), max(a, b)
    frontier = build(values)
    frontier.collapse(low, high)
    assert list(frontier.preorders) == sorted(v for v in values if not low <= v <= high)