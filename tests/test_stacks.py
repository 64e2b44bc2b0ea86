import pytest
from hypothesis import given, strategies as st

from pushswap.stacks import Node, PushSwap

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=12)


def test_init_with_indexes():
    s = PushSwap([5, 1, 3], [2, 0, 1])
    assert list(s.a) == [Node(5, 2), Node(1, 0), Node(3, 1)]
    assert s.values_b() == []
    assert s.moves == []


def test_init_default_indexes_zero():
    s = PushSwap([4, 2])
    assert [n.index for n in s.a] == [0, 0]


def test_init_length_mismatch():
    with pytest.raises(ValueError):
        PushSwap([1, 2], [0])


def test_sa_swaps_top_two():
    s = PushSwap([1, 2, 3])
    s.sa()
    assert s.values_a() == [2, 1, 3]
    assert s.moves == ["sa"]


def test_sa_single_does_nothing():
    s = PushSwap([7])
    s.sa()
    assert s.values_a() == [7]
    assert s.moves == []


def test_sb_and_ss():
    s = PushSwap([1, 2, 3, 4])
    s.pb()
    s.pb()
    assert s.values_b() == [2, 1]
    s.sb()
    assert s.values_b() == [1, 2]
    s.ss()
    assert s.values_a() == [4, 3]
    assert s.values_b() == [2, 1]
    assert s.moves == ["pb", "pb", "sb", "ss"]


def test_ss_needs_both_stacks():
    s = PushSwap([1, 2, 3])
    s.ss()
    assert s.values_a() == [1, 2, 3]
    assert s.moves == []


def test_pa_pb():
    s = PushSwap([1, 2, 3])
    s.pb()
    assert s.values_a() == [2, 3]
    assert s.values_b() == [1]
    s.pa()
    assert s.values_a() == [1, 2, 3]
    assert s.moves == ["pb", "pa"]


def test_push_from_empty_does_nothing():
    s = PushSwap([])
    s.pa()
    s.pb()
    assert s.moves == []
    assert s.values_a() == []


def test_push_keeps_index():
    s = PushSwap([9, 8], [1, 0])
    s.pb()
    assert s.b[0] == Node(9, 1)


def test_ra_and_rra():
    s = PushSwap([1, 2, 3])
    s.ra()
    assert s.values_a() == [2, 3, 1]
    s.rra()
    assert s.values_a() == [1, 2, 3]
    assert s.moves == ["ra", "rra"]


def test_ra_too_short_raises():
    with pytest.raises(IndexError):
        PushSwap([1]).ra()


def test_rb_rrb():
    s = PushSwap([1, 2, 3])
    s.pb()
    s.pb()
    s.pb()
    assert s.values_b() == [3, 2, 1]
    s.rb()
    assert s.values_b() == [2, 1, 3]
    s.rrb()
    assert s.values_b() == [3, 2, 1]


def test_rb_short_does_nothing():
    s = PushSwap([1, 2])
    s.pb()
    s.rb()
    s.rrb()
    assert s.moves == ["pb"]


def test_rr_and_rrr():
    s = PushSwap([1, 2, 3, 4, 5])
    s.pb()
    s.pb()
    s.rr()
    assert s.values_a() == [4, 5, 3]
    assert s.values_b() == [1, 2]
    s.rrr()
    assert s.values_a() == [3, 4, 5]
    assert s.values_b() == [2, 1]
    assert s.moves[-2:] == ["rr", "rrr"]


def test_rr_short_raises():
    s = PushSwap([1, 2, 3])
    s.pb()
    with pytest.raises(IndexError):
        s.rr()


def test_rrr_short_does_nothing():
    s = PushSwap([1, 2, 3])
    s.pb()
    s.rrr()
    assert s.values_a() == [2, 3]
    assert s.moves == ["pb"]


def test_find_min_position():
    s = PushSwap([5, 2, 3, 4, 1])
    assert s.find_min_position() == 4
    s2 = PushSwap([3, 1, 1])
    assert s2.find_min_position() == 1


def test_find_min_empty_raises():
    with pytest.raises(IndexError):
        PushSwap([]).find_min_position()


def test_search_max():
    s = PushSwap([10, 20, 30], [2, 0, 1])
    assert s.search_max() == 2
    with pytest.raises(IndexError):
        PushSwap([]).search_max()


@given(int_lists)
def test_rotation_round_trip(values):
    s = PushSwap(values)
    if len(values) >= 2:
        s.ra()
        s.rra()
    assert s.values_a() == values


@given(int_lists)
def test_push_all_and_back(values):
    s = PushSwap(values)
    for _ in values:
        s.pb()
    assert s.values_b() == list(reversed(values))
    for _ in values:
        s.pa()
    assert s.values_a() == values
    assert len(s.moves) == 2 * len(values)


@given(int_lists, st.lists(st.sampled_from(
    ["sa", "sb", "ss", "pa", "pb", "rb", "rra", "rrb", "rrr"]), max_size=30))
def test_moves_preserve_multiset(values, ops):
    s = PushSwap(values)
    for op in ops:
        getattr(s, op)()
    assert sorted(s.values_a() + s.values_b()) == sorted(values)