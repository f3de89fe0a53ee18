import io
import random
from itertools import permutations

import pytest

from pushswap.algorithm import (
    LARGE_BANDS,
    SMALL_BANDS,
    all_at_least,
    assign_ranks,
    position_of_rank,
    push_back_all,
    push_chunks,
    sort_five,
    sort_four,
    sort_stacks,
    sort_three,
)
from pushswap.stacks import Element, Stacks


def make(values):
    out = io.StringIO()
    stacks = Stacks(values, out)
    assign_ranks(stacks)
    return stacks, out


def replay(values, script):
    stacks = Stacks(values, io.StringIO())
    for name in script.split():
        getattr(stacks, name)()
    return stacks


def values_of(stack):
    return [element.value for element in stack]


def test_assign_ranks_orders_values():
    values = [40, -3, 17, 0, 99]
    stacks, _ = make(values)
    ranks = [element.rank for element in stacks.a]
    assert sorted(ranks) == list(range(1, len(values) + 1))
    by_rank = sorted(stacks.a, key=lambda element: element.rank)
    assert values_of(by_rank) == sorted(values)
    for element in stacks.a:
        assert element.decile == pytest.approx(element.rank / len(values))


def test_position_of_rank_found_and_missing():
    elements = [Element(9, rank=3), Element(5, rank=2), Element(1, rank=1)]
    assert position_of_rank(elements, 2) == 1
    assert position_of_rank(elements, 7) == len(elements)
    assert position_of_rank([], 1) == 0


def test_all_at_least():
    elements = [Element(1, decile=0.5), Element(2, decile=0.7)]
    assert all_at_least(elements, 0.5) is True
    assert all_at_least(elements, 0.6) is False
    assert all_at_least([], 1.0) is True


def test_sort_three_single_swap():
    stacks, out = make([2, 1, 3])
    sort_three(stacks)
    assert out.getvalue() == "sa\n"
    assert values_of(stacks.a) == [1, 2, 3]


def test_sort_three_single_rotate():
    stacks, out = make([3, 1, 2])
    sort_three(stacks)
    assert out.getvalue() == "ra\n"


@pytest.mark.parametrize("values", list(permutations([1, 2, 3])))
def test_sort_three_all_orders(values):
    stacks, out = make(list(values))
    sort_three(stacks)
    assert values_of(stacks.a) == [1, 2, 3]
    assert len(out.getvalue().split()) <= 2
    assert values_of(replay(list(values), out.getvalue()).a) == [1, 2, 3]


@pytest.mark.parametrize("values", list(permutations([7, -2, 30, 4])))
def test_sort_four_all_orders(values):
    stacks, out = make(list(values))
    sort_four(stacks)
    assert values_of(stacks.a) == sorted(values)
    assert not stacks.b
    assert values_of(replay(list(values), out.getvalue()).a) == sorted(values)


@pytest.mark.parametrize("values", list(permutations([5, 1, 4, 2, 3])))
def test_sort_five_all_orders(values):
    stacks, out = make(list(values))
    sort_five(stacks)
    assert values_of(stacks.a) == [1, 2, 3, 4, 5]
    assert not stacks.b
    assert values_of(replay(list(values), out.getvalue()).a) == [1, 2, 3, 4, 5]


def test_sorted_input_needs_no_moves():
    stacks, out = make([1, 5, 9, 12])
    assert sort_stacks(stacks) == 0
    assert out.getvalue() == ""


@pytest.mark.parametrize("values", [[], [42], [2, 1], [1, 2]])
def test_sort_tiny_inputs(values):
    stacks, out = make(values)
    sort_stacks(stacks)
    assert values_of(stacks.a) == sorted(values)
    assert not stacks.b
    assert values_of(replay(values, out.getvalue()).a) == sorted(values)


@pytest.mark.parametrize("bands", [SMALL_BANDS, LARGE_BANDS])
def test_push_chunks_empties_a(bands):
    values = random.Random(3).sample(range(-1000, 1000), 40)
    stacks, _ = make(values)
    push_chunks(stacks, bands)
    assert not stacks.a
    assert sorted(values_of(stacks.b)) == sorted(values)


def test_push_back_all_restores_sorted_a():
    values = random.Random(5).sample(range(500), 30)
    stacks, _ = make(values)
    push_chunks(stacks, SMALL_BANDS)
    assert push_back_all(stacks) > 0
    assert not stacks.b
    assert [element.rank for element in stacks.a] == list(range(1, 31))
    assert values_of(stacks.a) == sorted(values)


@pytest.mark.parametrize("size,seed", [(6, 1), (10, 2), (100, 3), (149, 4), (150, 5), (300, 6)])
def test_sort_stacks_random(size, seed):
    values = random.Random(seed).sample(range(-100000, 100000), size)
    stacks, out = make(values)
    moves = sort_stacks(stacks)
    assert moves > 0
    assert values_of(stacks.a) == sorted(values)
    assert not stacks.b
    replayed = replay(values, out.getvalue())
    assert values_of(replayed.a) == sorted(values)
    assert not replayed.b