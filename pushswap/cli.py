"""The push_swap command: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from pushswap.arguments import ArgumentError, parse_arguments
from pushswap.benchmark import OpCounter, format_benchmark
from pushswap.disorder import compute_disorder
from pushswap.machine import Emit, Machine
from pushswap.medium import medium_sort
from pushswap.options import OptionError, Options, Strategy, parse_options
from pushswap.radix import complex_sort
from pushswap.simple import bubble_sort, is_sorted, sort_five, sort_four, sort_three


def _run_adaptive(machine: Machine, values: Sequence[int], disorder: float) -> None:
    count = len(machine.a)
    if count == 2:
        first, second = machine.a.values()
        if first > second:
            machine.sa()
    elif count == 3:
        sort_three(machine)
    elif count == 4:
        sort_four(machine)
    elif count == 5:
        sort_five(machine)
    elif disorder < 0.2:
        bubble_sort(machine)
    elif disorder < 0.5:
        medium_sort(machine, values)
    else:
        complex_sort(machine, values)


def run(
    values: Sequence[int],
    options: Optional[Options] = None,
    emit: Optional[Emit] = None,
) -> Machine:
    """Sort values with the chosen strategy; return the machine afterwards."""
    options = options or Options()
    machine = Machine(values, emit)
    if is_sorted(machine.a):
        return machine
    if options.strategy is Strategy.SIMPLE:
        bubble_sort(machine)
    elif options.strategy is Strategy.MEDIUM:
        medium_sort(machine, values)
    elif options.strategy is Strategy.COMPLEX:
        complex_sort(machine, values)
    else:
        _run_adaptive(machine, values, compute_disorder(values))
    return machine


def _print_operation(op: str) -> None:
    sys.stdout.write(op + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options, rest = parse_options(args)
        if not rest:
            return 0
        values = parse_arguments(rest)
    except (OptionError, ArgumentError):
        sys.stderr.write("Error\n")
        return 1
    if not values:
        return 0
    disorder = compute_disorder(values)
    machine = run(values, options, _print_operation)
    if options.bench:
        counter = OpCounter()
        for op in machine.operations:
            counter.record(op)
        sys.stderr.write(
            format_benchmark(len(values), disorder, options.strategy, counter)
        )
    return 0