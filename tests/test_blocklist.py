from bisect import bisect_left

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortedblocks.blocklist import BlockList
from sortedblocks.bsearch import cmp_2int64, cmp_int


def _cmp(a, b):
    return (a > b) - (a < b)


@pytest.mark.parametrize("limit", [0, 1, 3, 7])
def test_invalid_limit(limit):
    with pytest.raises(ValueError):
        BlockList(limit, _cmp)


def test_empty_list():
    bl = BlockList(4, _cmp)
    assert len(bl) == 0
    assert bl.get_pos(3) == -1
    assert bl.get(3) is None
    assert bl.block_sizes() == []
    with pytest.raises(KeyError):
        bl.remove(3)


def test_full_block_splits_in_half():
    bl = BlockList(4, _cmp)
    for v in (1, 2, 3, 4):
        bl.put(v)
    assert bl.block_sizes() == [2, 2]
    assert list(bl) == [1, 2, 3, 4]


@given(st.lists(st.integers(-200, 200)), st.sampled_from([2, 4, 6, 10]))
def test_put_keeps_sorted_unique_and_bounded(values, limit):
    bl = BlockList(limit, _cmp)
    for v in values:
        bl.put(v)
    expected = sorted(set(values))
    assert list(bl) == expected
    assert len(bl) == len(expected)
    sizes = bl.block_sizes()
    assert sum(sizes) == len(expected)
    assert all(0 < size < limit for size in sizes)


@given(st.lists(st.integers(-100, 100), unique=True), st.integers(-120, 120))
def test_get_pos_matches_sorted_order(values, probe):
    bl = BlockList(4, _cmp)
    for v in values:
        bl.put(v)
    ordered = sorted(values)
    for v in values:
        assert bl.get_pos(v) == ordered.index(v)
        assert bl.get(v) == v
    if probe not in values:
        assert bl.get_pos(probe) == -(bisect_left(ordered, probe) + 1)
        assert bl.get(probe) is None


def test_put_replaces_equal_record():
    bl = BlockList(4, cmp_int)
    bl.put((7, "old"))
    bl.put((7, "new"))
    assert len(bl) == 1
    assert bl.get((7,)) == (7, "new")


def test_records_with_two_fields():
    bl = BlockList(8, cmp_2int64)
    items = [(3, 1), (1, 9), (3, 0), (2, 2), (1, 1)]
    for item in items:
        bl.put(item)
    assert list(bl) == sorted(items)
    assert bl.get_pos((3, 0)) == sorted(items).index((3, 0))


def test_remove_returns_item_and_missing_raises():
    bl = BlockList(4, _cmp)
    for v in range(10):
        bl.put(v)
    assert bl.remove(5) == 5
    assert 5 not in list(bl)
    assert len(bl) == 9
    with pytest.raises(KeyError):
        bl.remove(5)
    with pytest.raises(KeyError):
        bl.remove(100)


@given(st.lists(st.integers(-100, 100), unique=True), st.randoms())
def test_remove_everything(values, rnd):
    bl = BlockList(4, _cmp)
    for v in values:
        bl.put(v)
    order = list(values)
    rnd.shuffle(order)
    remaining = set(values)
    for v in order:
        assert bl.remove(v) == v
        remaining.discard(v)
        assert list(bl) == sorted(remaining)
        assert all(0 < size < 4 for size in bl.block_sizes())
    assert len(bl) == 0
    assert bl.block_sizes() == []


@given(st.lists(st.tuples(st.booleans(), st.integers(-30, 30)), max_size=200))
def test_mixed_operations_match_set_model(ops):
    bl = BlockList(6, _cmp)
    model = set()
    for insert, value in ops:
        if insert:
            bl.put(value)
            model.add(value)
        elif value in model:
            assert bl.remove(value) == value
            model.discard(value)
        else:
            with pytest.raises(KeyError):
                bl.remove(value)
        assert list(bl) == sorted(model)
        assert len(bl) == len(model)