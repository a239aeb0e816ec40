"""Sorting stack a with the push-swap instructions, chosen by stack size."""

from __future__ import annotations

from .operations import Machine


def sort_three(machine: Machine) -> None:
    """Order a small stack a by comparing its top, second and bottom elements.

    The three elements are followed as nodes: a swap exchanges their values,
    a rotation moves them, and each later test sees the result.
    """
    nodes = list(machine.a)
    if len(nodes) < 2:
        raise ValueError("sort_three needs at least two elements")
    head, mid, tail = nodes[0], nodes[1], nodes[-1]
    if head.content > mid.content and head.content < tail.content:
        machine.sa()
    if head.content > mid.content and mid.content > tail.content:
        machine.sa()
        machine.rra()
    if head.content > mid.content and mid.content < tail.content:
        machine.ra()
    if head.content < mid.content and head.content < tail.content:
        machine.sa()
        machine.ra()
    if head.content < mid.content and head.content > tail.content:
        machine.rra()


def sort_four(machine: Machine) -> None:
    """Bring the smallest element to the top, park it on b, order the rest, bring it back."""
    min_index = machine.a.find_min()
    if min_index == 1:
        machine.sa()
    elif min_index == 2:
        machine.ra()
        machine.sa()
    elif min_index == 3:
        machine.rra()
    machine.pb()
    if not machine.a.is_sorted():
        sort_three(machine)
    machine.pa()


def sort_five(machine: Machine) -> None:
    """Park the smallest element on b, sort the remaining four, bring it back."""
    min_index = machine.a.find_min()
    if min_index == 1:
        machine.sa()
    elif min_index == 2:
        machine.ra()
        machine.sa()
    elif min_index == 3:
        machine.rra()
        machine.rra()
    elif min_index == 4:
        machine.rra()
    machine.pb()
    machine.a.reset_index()
    sort_four(machine)
    machine.pa()


def sort_stacks(machine: Machine) -> None:
    """Sort stack a with the routine for its size.

    Stacks of more than five elements are left as they are.
    """
    size = len(machine.a)
    if size == 2:
        machine.sa()
    elif size == 3:
        sort_three(machine)
    elif size == 4:
        sort_four(machine)
    elif size == 5:
        sort_five(machine)