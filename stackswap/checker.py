"""Reading instructions and checking whether they sort a stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TextIO

from .parsing import InputError
from .stacks import Operation, Stacks

__all__ = ["parse_instruction", "read_instructions", "check"]

_NAMES = frozenset(op.value for op in Operation)


def parse_instruction(line: str) -> Operation:
    """Turn one input line, newline included, into an operation.

    The line must hold exactly an instruction name followed by a newline.
    """
    if not line.endswith("\n"):
        raise InputError(f"instruction not terminated by a newline: {line!r}")
    name = line[:-1]
    if name not in _NAMES:
        raise InputError(f"unknown instruction: {name!r}")
    return Operation(name)


def read_instructions(stream: Iterable[str]) -> Iterator[Operation]:
    """Yield the operations read line by line until the end of *stream*."""
    for line in stream:
        if not line:
            break
        yield parse_instruction(line)


def check(values: Iterable[int], instructions: Iterable[Operation | str]) -> bool:
    """Return True if *instructions* leave *values* sorted with stack *b* empty."""
    stacks = Stacks(values)
    stacks.run(instructions)
    return stacks.is_solved()


def _read_from(stream: TextIO) -> Iterator[Operation]:
    return read_instructions(stream)