"""Sorting by swaps and rotations on a alone, and fixed plans for 3 to 5 numbers."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.machine import Element, Machine


def is_sorted(stack: Iterable[Element]) -> bool:
    """True when the values never decrease from top to bottom."""
    values = [element.value for element in stack]
    return all(first <= second for first, second in zip(values, values[1:]))


def _bubble_pass(machine: Machine, length: int) -> bool:
    did_swap = False
    for _ in range(length - 1):
        first, second = machine.a.values()[:2]
        if first > second:
            machine.sa()
            did_swap = True
        machine.ra()
    for _ in range(length - 1):
        machine.rra()
    return did_swap


def bubble_sort(machine: Machine) -> None:
    """Bubble sort stack a using sa, ra and rra."""
    length = len(machine.a)
    if length < 2:
        return
    while not is_sorted(machine.a):
        if not _bubble_pass(machine, length):
            break
        length -= 1


def sort_three(machine: Machine) -> None:
    """Sort the top three elements of a in at most two operations."""
    if len(machine.a) < 3:
        return
    first, second, third = machine.a.values()[:3]
    if first < second < third:
        return
    if first < second and second > third and first < third:
        machine.rra()
        machine.sa()
    elif first > second and second < third and first < third:
        machine.sa()
    elif first < second and second > third and first > third:
        machine.rra()
    elif first > second and second < third and first > third:
        machine.ra()
    elif first > second > third:
        machine.sa()
        machine.rra()


def _smallest_position(values: list[int]) -> int:
    return min(range(len(values)), key=values.__getitem__)


def sort_four(machine: Machine) -> None:
    """Move the smallest of the top four to b, sort three, bring it back."""
    if len(machine.a) < 4:
        return
    position = _smallest_position(machine.a.values()[:4])
    if position == 1:
        machine.ra()
    elif position == 2:
        machine.rra()
        machine.rra()
    elif position == 3:
        machine.rra()
    machine.pb()
    sort_three(machine)
    machine.pa()


def sort_five(machine: Machine) -> None:
    """Move the smallest of the top five to b, sort four, bring it back."""
    if len(machine.a) < 5:
        return
    position = _smallest_position(machine.a.values()[:5])
    if position == 1:
        machine.ra()
    elif position == 2:
        machine.ra()
        machine.ra()
    elif position == 3:
        machine.rra()
        machine.rra()
    elif position == 4:
        machine.rra()
    machine.pb()
    sort_four(machine)
    machine.pa()