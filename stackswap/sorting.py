"""Algorithms that sort stack *a* using the stack operations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .stacks import Operation, Stacks, is_ascending

__all__ = ["sort_three", "sort_five", "sort_large", "solve"]

# Elements whose minimum lies at or beyond this position are brought up
# with reverse rotations while reducing to three elements.
_FIVE_SPLIT = 5 // 2


def sort_three(stacks: Stacks) -> None:
    """Sort the three elements of stack *a* in at most two operations."""
    if len(stacks.a) < 3:
        raise ValueError("sort_three needs at least three elements in stack a")
    top, mid, bottom = stacks.a[0], stacks.a[1], stacks.a[2]
    if top > mid and mid < bottom and bottom > top:
        stacks.run([Operation.SA])
    elif top > mid > bottom:
        stacks.run([Operation.SA, Operation.RRA])
    elif top > mid and mid < bottom and bottom < top:
        stacks.run([Operation.RA])
    elif top < mid and mid > bottom and bottom > top:
        stacks.run([Operation.SA, Operation.RA])
    elif top < mid and mid > bottom and bottom < top:
        stacks.run([Operation.RRA])


def sort_five(stacks: Stacks) -> None:
    """Sort four or five elements by parking the smallest ones on stack *b*."""
    while len(stacks.a) > 3:
        smallest = min(stacks.a)
        position = stacks.a.index(smallest)
        step = Operation.RRA if position >= _FIVE_SPLIT else Operation.RA
        while stacks.a[0] != smallest:
            stacks.apply(step)
        stacks.apply(Operation.PB)
    sort_three(stacks)
    while stacks.b:
        stacks.apply(Operation.PA)


@dataclass
class _Move:
    """The rotations needed to insert one element of *b* into *a*."""

    ra: int
    rra: int
    rb: int
    rrb: int
    total: int = 0
    reverse_a: bool = False
    reverse_b: bool = False

    def choose(self) -> None:
        forward = max(self.rb, self.ra)
        rb_rra = self.rb + self.rra
        rrb_ra = self.rrb + self.ra
        backward = max(self.rrb, self.rra)
        self.total = min(forward, rb_rra, rrb_ra, backward)
        if self.total == forward:
            self.reverse_a, self.reverse_b = False, False
        elif self.total == rb_rra:
            self.reverse_a, self.reverse_b = True, False
        elif self.total == rrb_ra:
            self.reverse_a, self.reverse_b = False, True
        else:
            self.reverse_a, self.reverse_b = True, True


def _min_position(values: Iterable[int]) -> int:
    items = list(values)
    return items.index(min(items))


def _target_position(a: Iterable[int], value: int) -> int:
    """Position in *a* before which *value* belongs."""
    items = list(a)
    greater = [(item, pos) for pos, item in enumerate(items) if item > value]
    if greater:
        return min(greater, key=lambda pair: pair[0])[1]
    return _min_position(items)


def _moves(stacks: Stacks) -> list[_Move]:
    len_a, len_b = len(stacks.a), len(stacks.b)
    moves = []
    for position, value in enumerate(stacks.b):
        target = _target_position(stacks.a, value)
        move = _Move(ra=target, rra=len_a - target, rb=position, rrb=len_b - position)
        move.choose()
        moves.append(move)
    return moves


def _combined(stacks: Stacks, both: Operation, only_a: Operation,
              only_b: Operation, cost_a: int, cost_b: int) -> None:
    shared = min(cost_a, cost_b)
    rest = max(cost_a, cost_b) - shared
    for _ in range(shared):
        stacks.apply(both)
    single = only_a if max(cost_a, cost_b) == cost_a else only_b
    for _ in range(rest):
        stacks.apply(single)
    stacks.apply(Operation.PA)


def _perform(stacks: Stacks, move: _Move) -> None:
    if move.reverse_a and move.reverse_b and move.rra and move.rrb:
        _combined(stacks, Operation.RRR, Operation.RRA, Operation.RRB, move.rra, move.rrb)
        return
    if not move.reverse_a and not move.reverse_b and move.ra and move.rb:
        _combined(stacks, Operation.RR, Operation.RA, Operation.RB, move.ra, move.rb)
        return
    if move.reverse_b:
        stacks.run([Operation.RRB] * move.rrb)
    else:
        stacks.run([Operation.RB] * move.rb)
    if move.reverse_a:
        stacks.run([Operation.RRA] * move.rra)
    else:
        stacks.run([Operation.RA] * move.ra)
    stacks.apply(Operation.PA)


def _min_to_top(stacks: Stacks) -> None:
    target = _min_position(stacks.a)
    smallest = stacks.a[target]
    step = Operation.RRA if target > len(stacks.a) // 2 else Operation.RA
    while stacks.a[0] != smallest:
        stacks.apply(step)


def sort_large(stacks: Stacks) -> None:
    """Sort by pushing all but one element to *b* and inserting the cheapest back."""
    while len(stacks.a) > 1:
        stacks.apply(Operation.PB)
    while stacks.b:
        moves = _moves(stacks)
        cheapest = min(moves, key=lambda move: move.total)
        _perform(stacks, cheapest)
    _min_to_top(stacks)


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort *values* (top first) into ascending order."""
    stacks = Stacks(values)
    size = len(stacks.a)
    if size == 1 or is_ascending(stacks.a):
        return []
    if size == 2:
        stacks.apply(Operation.SA)
    elif size == 3:
        sort_three(stacks)
    elif size in (4, 5):
        sort_five(stacks)
    else:
        sort_large(stacks)
    return list(stacks.history)