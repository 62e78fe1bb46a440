import random

import pytest

from pushswap.cli import main, run
from pushswap.machine import Machine
from pushswap.options import Options, Strategy


def _replay(values, operations):
    machine = Machine(values)
    for op in operations:
        getattr(machine, op)()
    return machine


def test_run_sorts_and_emits_each_operation():
    emitted = []
    machine = run([3, 2, 1], Options(), emitted.append)
    assert machine.a.values() == [1, 2, 3]
    assert emitted == machine.operations


def test_run_on_sorted_input_does_nothing():
    emitted = []
    machine = run([1, 2, 3, 4], Options(), emitted.append)
    assert emitted == []
    assert machine.a.values() == [1, 2, 3, 4]


@pytest.mark.parametrize("strategy", list(Strategy))
@pytest.mark.parametrize("size", [2, 4, 5, 40])
def test_every_strategy_sorts(strategy, size):
    values = random.Random(size).sample(range(-1000, 1000), size)
    machine = run(values, Options(strategy=strategy))
    assert machine.a.values() == sorted(values)
    assert len(machine.b) == 0


def test_main_prints_operations_that_sort(capsys):
    values = [8, -2, 5, 0, 13, 7, 1]
    assert main([str(v) for v in values]) == 0
    printed = capsys.readouterr().out.split()
    assert _replay(values, printed).a.values() == sorted(values)


def test_main_accepts_single_string(capsys):
    assert main(["3 2 1"]) == 0
    printed = capsys.readouterr().out.split()
    assert _replay([3, 2, 1], printed).a.values() == [1, 2, 3]


def test_main_duplicate_is_error(capsys):
    assert main(["1", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_unknown_option_is_error(capsys):
    assert main(["--oops", "1"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_without_numbers_prints_nothing(capsys):
    assert main([]) == 0
    assert main(["--bench"]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_main_bench_report(capsys):
    assert main(["--bench", "2", "1"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "sa\n"
    assert captured.err.startswith("[bench] disorder: 100.0%\n")
    assert "[bench] strategy: Adaptive / O(1)\n" in captured.err
    assert "[bench] total_ops: 1\n" in captured.err