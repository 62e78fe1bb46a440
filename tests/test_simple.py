import random
from itertools import permutations

import pytest

from pushswap.machine import Machine
from pushswap.simple import bubble_sort, is_sorted, sort_five, sort_four, sort_three

LEGAL = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def test_is_sorted():
    assert is_sorted(Machine([1, 2, 3]).a)
    assert is_sorted(Machine([]).a)
    assert not is_sorted(Machine([2, 1, 3]).a)


@pytest.mark.parametrize("values", list(permutations([1, 2, 3])))
def test_sort_three_all_cases(values):
    machine = Machine(values)
    sort_three(machine)
    assert machine.a.values() == [1, 2, 3]
    assert len(machine.operations) <= 2


def test_sort_three_cases_from_source():
    for values, ops in [([2, 1, 3], ["sa"]), ([3, 1, 2], ["ra"]), ([1, 3, 2], ["rra", "sa"])]:
        machine = Machine(values)
        sort_three(machine)
        assert machine.operations == ops


def test_sort_three_sorted_does_nothing():
    machine = Machine([1, 2, 3])
    sort_three(machine)
    assert machine.operations == []


@pytest.mark.parametrize("values", list(permutations([10, 20, 30, 40])))
def test_sort_four_all_cases(values):
    machine = Machine(values)
    sort_four(machine)
    assert machine.a.values() == [10, 20, 30, 40]
    assert machine.b.values() == []
    assert set(machine.operations) <= LEGAL


@pytest.mark.parametrize("values", list(permutations([-2, 0, 5, 7, 9])))
def test_sort_five_all_cases(values):
    machine = Machine(values)
    sort_five(machine)
    assert machine.a.values() == [-2, 0, 5, 7, 9]
    assert machine.b.values() == []
    assert set(machine.operations) <= LEGAL


def test_small_sorts_ignore_short_stacks():
    machine = Machine([3, 2, 1])
    sort_four(machine)
    sort_five(machine)
    assert machine.a.values() == [3, 2, 1]
    assert machine.operations == []


@pytest.mark.parametrize("seed", range(8))
def test_bubble_sort_sorts(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-50, 50), 12)
    machine = Machine(values)
    bubble_sort(machine)
    assert machine.a.values() == sorted(values)
    assert set(machine.operations) <= {"sa", "ra", "rra"}


def test_bubble_sort_replay_matches():
    values = [5, 1, 4, 2, 3]
    machine = Machine(values)
    bubble_sort(machine)
    replay = Machine(values)
    for op in machine.operations:
        getattr(replay, op)()
    assert replay.a.values() == [1, 2, 3, 4, 5]


def test_bubble_sort_sorted_input_does_nothing():
    machine = Machine([1, 2, 3, 4])
    bubble_sort(machine)
    assert machine.operations == []
    assert machine.a.values() == [1, 2, 3, 4]