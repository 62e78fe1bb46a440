"""Measure how far a sequence is from ascending order."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def compute_disorder(values: Sequence[int]) -> float:
    """Return the share of pairs (i < j) with values[i] > values[j].

    Sequences of fewer than two items have disorder 0.0.
    """
    if len(values) < 2:
        return 0.0
    total = 0
    mistakes = 0
    for first, second in combinations(values, 2):
        total += 1
        if first > second:
            mistakes += 1
    return mistakes / total