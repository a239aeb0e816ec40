"""Command line: validate numbers, sort them, print the instructions used."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence, Tuple

from .operations import Machine
from .sort import sort_stacks
from .validation import InputError, parse_arguments


def run(args: Sequence[str]) -> Tuple[int, List[str]]:
    """Sort the numbers in args; return the exit status and the instructions.

    With no arguments, or when the numbers are already in order, nothing is
    done and the status is 1. Invalid input raises InputError.
    """
    if not args:
        return 1, []
    stack = parse_arguments(args)
    if stack.is_sorted():
        return 1, []
    machine = Machine(stack)
    sort_stacks(machine)
    return 0, list(machine.operations)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program and print one instruction per line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        status, operations = run(args)
    except InputError as error:
        print(error.message)
        return error.status
    for name in operations:
        print(name)
    return status