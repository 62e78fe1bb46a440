"""Counting operations and formatting the benchmark report."""

from __future__ import annotations

from pushswap.options import Strategy, adaptive_strategy_label

OPERATIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


class OpCounter:
    """Counts operations in total and by name."""

    def __init__(self) -> None:
        self.total = 0
        self.counts: dict[str, int] = dict.fromkeys(OPERATIONS, 0)

    def record(self, op: str) -> None:
        """Count one operation; unknown names count only toward the total."""
        self.total += 1
        if op in self.counts:
            self.counts[op] += 1

    def reset(self) -> None:
        self.total = 0
        self.counts = dict.fromkeys(OPERATIONS, 0)

    def report(self) -> str:
        """The operation totals as three report lines."""
        first = " ".join(f"{op}: {self.counts[op]}" for op in OPERATIONS[:5])
        second = " ".join(f"{op}: {self.counts[op]}" for op in OPERATIONS[5:])
        return (
            f"[bench] total_ops: {self.total}\n"
            f"[bench] {first}\n"
            f"[bench] {second}\n"
        )


_STRATEGY_LINES = {
    Strategy.SIMPLE: "[bench] strategy: simple / O(n^2) \n",
    Strategy.MEDIUM: "[bench] strategy: medium / O(n√n) \n",
    Strategy.COMPLEX: "[bench] strategy: complex / O(n log n) \n",
}


def format_benchmark(
    count: int, disorder: float, strategy: Strategy, counter: OpCounter
) -> str:
    """The full benchmark report: disorder, strategy and operation counts."""
    whole = int(disorder * 100)
    fraction = int(disorder * 10000) % 100
    text = f"[bench] disorder: {whole}.{fraction}%\n"
    if strategy in _STRATEGY_LINES:
        text += _STRATEGY_LINES[strategy]
    else:
        text += f"[bench] strategy: {adaptive_strategy_label(count, disorder)}\n"
    return text + counter.report()