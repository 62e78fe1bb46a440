"""Chunk sort: move rank ranges to b, then bring the largest back each time."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

from pushswap.machine import Element, Machine


def assign_indexes(stack: Iterable[Element], values: Sequence[int]) -> None:
    """Give each element its rank among values in ascending order."""
    ranks: dict[int, int] = {}
    for rank, value in enumerate(sorted(values)):
        ranks.setdefault(value, rank)
    for element in stack:
        if element.value in ranks:
            element.index = ranks[element.value]


def move_to_top(machine: Machine, position: int, stack_name: str) -> None:
    """Bring the element at position to the top of the named stack.

    Rotates forward when the position is in the upper half, backward otherwise.
    """
    if stack_name == "a":
        stack, forward, backward = machine.a, machine.ra, machine.rra
    else:
        stack, forward, backward = machine.b, machine.rb, machine.rrb
    if position <= len(stack) // 2:
        for _ in range(position):
            forward()
    else:
        for _ in range(len(stack) - position):
            backward()


def find_chunk_index(stack: Iterable[Element], start: int, end: int) -> Optional[int]:
    """Position of the first element whose rank lies in [start, end], or None."""
    for position, element in enumerate(stack):
        if start <= element.index <= end:
            return position
    return None


def find_max_index_pos(stack: Iterable[Element]) -> Optional[int]:
    """Position of the first element with the highest rank, or None if empty."""
    best_position: Optional[int] = None
    best_index = 0
    for position, element in enumerate(stack):
        if best_position is None or element.index > best_index:
            best_position = position
            best_index = element.index
    return best_position


def _handle_element_in_chunk(machine: Machine, start: int, chunk: int) -> None:
    position = find_chunk_index(machine.a, start, start + chunk - 1)
    if position is None:
        return
    move_to_top(machine, position, "a")
    machine.pb()
    top = machine.b.top
    if top is not None and top.index < start + chunk // 2:
        machine.rb()


def _push_chunks_to_b(machine: Machine, count: int, chunk: int) -> None:
    start = 0
    end = min(chunk - 1, count - 1)
    while len(machine.a) > 0 and start < count:
        if find_chunk_index(machine.a, start, end) is not None:
            _handle_element_in_chunk(machine, start, chunk)
        else:
            start = end + 1
            end = min(start + chunk - 1, count - 1)


def _push_back_to_a(machine: Machine) -> None:
    while len(machine.b) > 0:
        position = find_max_index_pos(machine.b)
        if position is None:
            return
        move_to_top(machine, position, "b")
        machine.pa()


def medium_sort(machine: Machine, values: Sequence[int]) -> None:
    """Sort stack a by chunks of ranks (15 per chunk up to 100 numbers, else 35)."""
    count = len(values)
    assign_indexes(machine.a, values)
    chunk = 15 if count <= 100 else 35
    _push_chunks_to_b(machine, count, chunk)
    _push_back_to_a(machine)