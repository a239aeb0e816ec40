"""Checking and converting the numbers given on the command line."""

from __future__ import annotations

import re
from typing import Optional, Sequence

from .stack import Stack
from .strings import split_words

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"
_NUMBER = re.compile(r"([+-]?)([0-9]*)")


class InputError(Exception):
    """Rejected input; ``status`` is the exit status the program ends with."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        # The status is the length of the printed message, newline included,
        # unless a fixed status is given.
        self.status = len(message) + 1 if status is None else status


def is_num(text: str) -> bool:
    """True when text is an optional '-' followed only by decimal digits."""
    digits = text[1:] if text.startswith("-") else text
    return all("0" <= char <= "9" for char in digits)


def parse_int(text: str) -> int:
    """Read a leading integer the way atoi does, checking the 32-bit range.

    Leading whitespace is skipped, one sign is accepted, and reading stops at
    the first non-digit; no digits give 0. Values outside the signed 32-bit
    range raise InputError with status 1.
    """
    match = _NUMBER.match(text.lstrip(_WHITESPACE))
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise InputError("max/min error", status=1)
    return value


def is_dup(args: Sequence[str], number: int, position: int) -> bool:
    """True when no argument after position parses to number."""
    return all(parse_int(arg) != number for arg in args[position + 1:])


def parse_arguments(args: Sequence[str]) -> Stack:
    """Validate the arguments and build stack a from them.

    A single argument is split on spaces; several arguments are taken one
    number each. Each node is indexed by its position.
    """
    tokens = split_words(args[0], " ") if len(args) == 1 else list(args)
    values = []
    for position, token in enumerate(tokens):
        number = parse_int(token)
        if not is_num(token):
            raise InputError("digit error")
        if not is_dup(tokens, number, position):
            raise InputError("dup error")
        values.append(number)
    return Stack.from_values(values)