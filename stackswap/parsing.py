"""Validation and parsing of the integers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice, takewhile

__all__ = ["InputError", "validate_arguments", "split_words", "parse_int", "parse_arguments"]

INT_MAX = 2**31 - 1
_MAX_TOKEN_LENGTH = 11
_END = "\0"


class InputError(ValueError):
    """Raised when the arguments do not describe a valid stack."""


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def validate_arguments(args: Iterable[str]) -> None:
    """Check that each argument holds only digits, spaces and well-placed signs.

    A sign is accepted at the start of an argument that has more characters,
    or right after a space when it is not followed by another space.
    """
    for arg in args:
        start = 1 if len(arg) > 1 and arg[0] in "+-" else 0
        padded = _END + arg + _END
        for prev, ch, nxt in islice(zip(padded, padded[1:], padded[2:]), start, None):
            if ch in "+-":
                if prev == " " and nxt != " ":
                    continue
                raise InputError(f"misplaced sign in {arg!r}")
            if ch == " " or _is_digit(ch):
                continue
            raise InputError(f"invalid character {ch!r} in {arg!r}")


def split_words(text: str) -> list[str]:
    """Split on spaces, dropping empty pieces."""
    return [word for word in text.split(" ") if word]


def parse_int(token: str) -> int:
    """Read an optional sign and leading digits as a 32-bit integer.

    Tokens longer than eleven characters and magnitudes above ``INT_MAX``
    are rejected.
    """
    negative = token[:1] == "-"
    body = token[1:] if token[:1] in ("+", "-") else token
    digits = "".join(takewhile(_is_digit, body))
    magnitude = int(digits) if digits else 0
    if len(token) > _MAX_TOKEN_LENGTH or magnitude > INT_MAX:
        raise InputError(f"number out of range: {token!r}")
    return -magnitude if negative else magnitude


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn the arguments into the values of stack *a*, top first."""
    args = list(args)
    validate_arguments(args)
    values = [parse_int(word) for arg in args for word in split_words(arg)]
    if not values:
        raise InputError("no numbers given")
    if len(set(values)) != len(values):
        raise InputError("duplicate numbers")
    return values