"""Turn command-line words into the list of numbers to sort."""

from __future__ import annotations

import re
from collections.abc import Sequence

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)[ \t\n\v\f\r]*")


class ArgumentError(ValueError):
    """Raised when the arguments do not describe a valid list of numbers."""


def parse_int(text: str) -> int:
    """Parse one number: optional surrounding whitespace, an optional sign,
    decimal digits, and a value that fits in a 32-bit signed integer."""
    match = _NUMBER.fullmatch(text)
    if match is None:
        raise ArgumentError(f"not a number: {text!r}")
    sign, digits = match.groups()
    value = int(digits)
    if sign == "-":
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise ArgumentError(f"out of range: {text!r}")
    return value


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Parse the program's arguments into distinct integers.

    A single argument is split on spaces; several arguments are taken one
    number each.
    """
    if len(args) == 1:
        tokens = [word for word in args[0].split(" ") if word]
    else:
        tokens = list(args)
    numbers = [parse_int(token) for token in tokens]
    if len(set(numbers)) != len(numbers):
        raise ArgumentError("duplicate numbers")
    return numbers