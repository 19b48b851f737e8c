"""The two stacks and the operations that rearrange them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum

__all__ = ["Operation", "Stacks", "is_ascending"]


class Operation(Enum):
    """An instruction acting on stack *a*, stack *b* or both."""

    SA = "sa"
    SB = "sb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"
    PA = "pa"
    PB = "pb"

    def __str__(self) -> str:
        return self.value


def is_ascending(values: Iterable[int]) -> bool:
    """Return True if no value is greater than the one after it."""
    previous = None
    for value in values:
        if previous is not None and previous > value:
            return False
        previous = value
    return True


def _swap(stack: deque) -> bool:
    if len(stack) < 2:
        return False
    first = stack.popleft()
    second = stack.popleft()
    stack.appendleft(first)
    stack.appendleft(second)
    return True


def _rotate(stack: deque) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: deque) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


def _push(source: deque, target: deque) -> bool:
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


class Stacks:
    """Stack *a* and stack *b*, top first, with the operations applied so far.

    ``history`` lists the operations that were emitted: single-stack
    operations that could not act (too few elements) are left out, while
    ``rr`` and ``rrr`` are always recorded.
    """

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.history: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def apply(self, op: Operation | str) -> bool:
        """Apply one operation; return True if it was recorded in the history."""
        op = Operation(op)
        a, b = self.a, self.b
        if op is Operation.SA:
            done = _swap(a)
        elif op is Operation.SB:
            done = _swap(b)
        elif op is Operation.RA:
            done = _rotate(a)
        elif op is Operation.RB:
            done = _rotate(b)
        elif op is Operation.RR:
            _rotate(a)
            _rotate(b)
            done = True
        elif op is Operation.RRA:
            done = _reverse_rotate(a)
        elif op is Operation.RRB:
            done = _reverse_rotate(b)
        elif op is Operation.RRR:
            _reverse_rotate(a)
            _reverse_rotate(b)
            done = True
        elif op is Operation.PA:
            done = _push(b, a)
        else:
            done = _push(a, b)
        if done:
            self.history.append(op)
        return done

    def run(self, ops: Iterable[Operation | str]) -> None:
        """Apply each operation in turn."""
        for op in ops:
            self.apply(op)

    def is_solved(self) -> bool:
        """Return True if *a* is in ascending order and *b* is empty."""
        return not self.b and is_ascending(self.a)