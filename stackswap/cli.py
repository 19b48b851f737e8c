"""Command-line entry points: the sorter and the checker."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .checker import check, read_instructions
from .parsing import InputError, parse_int, split_words, validate_arguments
from .sorting import solve

__all__ = ["push_swap_main", "checker_main"]

_ERROR = "Error\n"
# Exit status when the failure happens before any number was read.
_EMPTY_STATUS = 5
_FAILURE_STATUS = 1


class _Abort(Exception):
    """Stops a command with the given exit status after reporting an error."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def _read_stack(args: Sequence[str]) -> list[int]:
    """Validate and parse the arguments, raising _Abort on bad input."""
    try:
        validate_arguments(args)
    except InputError as exc:
        raise _Abort(_FAILURE_STATUS) from exc
    values: list[int] = []
    for arg in args:
        for word in split_words(arg):
            try:
                values.append(parse_int(word))
            except InputError as exc:
                raise _Abort(_FAILURE_STATUS if values else _EMPTY_STATUS) from exc
    if not values:
        raise _Abort(_EMPTY_STATUS)
    if len(set(values)) != len(values):
        raise _Abort(_FAILURE_STATUS)
    return values


def push_swap_main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the integers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = _read_stack(args)
    except _Abort as abort:
        sys.stderr.write(_ERROR)
        return abort.status
    for op in solve(values):
        sys.stdout.write(f"{op}\n")
    return 0


def checker_main(argv: Sequence[str] | None = None) -> int:
    """Apply the instructions on standard input and report OK or KO."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = _read_stack(args)
    except _Abort as abort:
        sys.stderr.write(_ERROR)
        return abort.status
    try:
        instructions = list(read_instructions(sys.stdin))
    except InputError:
        sys.stderr.write(_ERROR)
        return _FAILURE_STATUS
    sys.stderr.write("OK\n" if check(values, instructions) else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(push_swap_main())