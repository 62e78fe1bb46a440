"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

Emit = Callable[[str], None]


@dataclass
class Element:
    """A number on a stack together with its rank among all the numbers."""

    value: int
    index: int = 0


class Stack:
    """A stack of elements whose top is the first item."""

    def __init__(self, name: str, values: Iterable[int] = ()) -> None:
        self.name = name
        self._items: deque[Element] = deque(Element(value) for value in values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self.name!r}, {self.values()!r})"

    @property
    def top(self) -> Optional[Element]:
        """The element on top, or None when the stack is empty."""
        return self._items[0] if self._items else None

    def values(self) -> list[int]:
        """The values from top to bottom."""
        return [element.value for element in self._items]

    def indexes(self) -> list[int]:
        """The ranks from top to bottom."""
        return [element.index for element in self._items]

    def _has_two(self) -> bool:
        return len(self._items) >= 2

    def _swap(self) -> None:
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def _rotate(self) -> None:
        self._items.rotate(-1)

    def _reverse_rotate(self) -> None:
        self._items.rotate(1)

    def _pop(self) -> Element:
        return self._items.popleft()

    def _push(self, element: Element) -> None:
        self._items.appendleft(element)


class Machine:
    """Stacks a and b; each operation that takes effect is reported by name.

    An operation that cannot act (too few elements) changes nothing and is
    not reported.
    """

    def __init__(self, values: Iterable[int], emit: Optional[Emit] = None) -> None:
        self.a = Stack("a", values)
        self.b = Stack("b")
        self._emit = emit
        self.operations: list[str] = []

    def _record(self, op: str) -> None:
        self.operations.append(op)
        if self._emit is not None:
            self._emit(op)

    def sa(self) -> None:
        """Swap the top two elements of a."""
        if self.a._has_two():
            self.a._swap()
            self._record("sa")

    def sb(self) -> None:
        """Swap the top two elements of b."""
        if self.b._has_two():
            self.b._swap()
            self._record("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks, only when both can be swapped."""
        if self.a._has_two() and self.b._has_two():
            self.a._swap()
            self.b._swap()
            self._record("ss")

    def pa(self) -> None:
        """Move the top of b onto a."""
        if len(self.b):
            self.a._push(self.b._pop())
            self._record("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        if len(self.a):
            self.b._push(self.a._pop())
            self._record("pb")

    def ra(self) -> None:
        """Rotate a: the top element goes to the bottom."""
        if self.a._has_two():
            self.a._rotate()
            self._record("ra")

    def rb(self) -> None:
        """Rotate b: the top element goes to the bottom."""
        if self.b._has_two():
            self.b._rotate()
            self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks, only when both can be rotated."""
        if self.a._has_two() and self.b._has_two():
            self.a._rotate()
            self.b._rotate()
            self._record("rr")

    def rra(self) -> None:
        """Reverse-rotate a: the bottom element comes to the top."""
        if self.a._has_two():
            self.a._reverse_rotate()
            self._record("rra")

    def rrb(self) -> None:
        """Reverse-rotate b: the bottom element comes to the top."""
        if self.b._has_two():
            self.b._reverse_rotate()
            self._record("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks, only when both can be rotated."""
        if self.a._has_two() and self.b._has_two():
            self.a._reverse_rotate()
            self.b._reverse_rotate()
            self._record("rrr")