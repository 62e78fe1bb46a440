"""Binary radix sort on the ranks of the numbers."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.machine import Machine
from pushswap.medium import assign_indexes


def complex_sort(machine: Machine, values: Sequence[int]) -> None:
    """Sort stack a by ranks, one bit at a time from the lowest."""
    count = len(values)
    assign_indexes(machine.a, values)
    max_bits = max(count - 1, 0).bit_length()
    for bit in range(max_bits):
        for _ in range(len(machine.a)):
            top = machine.a.top
            if top is not None and (top.index >> bit) & 1 == 0:
                machine.pb()
            else:
                machine.ra()
        while len(machine.b) > 0:
            machine.pa()