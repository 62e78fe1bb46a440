"""Command-line flags that choose the strategy and turn on the benchmark."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass


class Strategy(enum.Enum):
    ADAPTIVE = "adaptive"
    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"


@dataclass
class Options:
    bench: bool = False
    strategy: Strategy = Strategy.ADAPTIVE


class OptionError(ValueError):
    """Raised for an unknown flag."""


_STRATEGY_FLAGS = {
    "--simple": Strategy.SIMPLE,
    "--medium": Strategy.MEDIUM,
    "--complex": Strategy.COMPLEX,
    "--adaptive": Strategy.ADAPTIVE,
}


def parse_options(argv: Sequence[str]) -> tuple[Options, list[str]]:
    """Read leading "--" flags; return the options and the remaining words."""
    options = Options()
    args = list(argv)
    consumed = 0
    for arg in args:
        if not arg.startswith("--"):
            break
        if arg == "--bench":
            options.bench = True
        elif arg in _STRATEGY_FLAGS:
            options.strategy = _STRATEGY_FLAGS[arg]
        else:
            raise OptionError(f"unknown option: {arg}")
        consumed += 1
    return options, args[consumed:]


def adaptive_strategy_label(count: int, disorder: float) -> str:
    """The strategy the adaptive mode picks, as shown in the benchmark."""
    if 2 <= count <= 5:
        return "Adaptive / O(1)"
    if disorder < 0.2:
        return "Adaptive / O(n^2)"
    if disorder < 0.5:
        return "Adaptive / O(n√n)"
    return "Adaptive / O(n log n)"