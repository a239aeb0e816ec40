"""The push-swap instruction set, acting on a pair of stacks."""

from __future__ import annotations

from typing import List, Optional

from .stack import Stack


class Machine:
    """Two stacks, a and b, and the log of instructions applied to them.

    Each instruction changes the stacks and appends its name to
    ``operations``, in the order it was carried out.
    """

    def __init__(self, a: Optional[Stack] = None, b: Optional[Stack] = None) -> None:
        self.a = a if a is not None else Stack()
        self.b = b if b is not None else Stack()
        self.operations: List[str] = []

    def __repr__(self) -> str:
        return f"Machine(a={self.a.contents()!r}, b={self.b.contents()!r})"

    def _record(self, name: str) -> None:
        self.operations.append(name)

    @staticmethod
    def _push(src: Stack, dest: Stack) -> None:
        dest.push_top(src.pop_top())

    def sa(self) -> None:
        """Swap the values of the two top elements of a."""
        self.a.swap_top()
        self._record("sa")

    def sb(self) -> None:
        """Swap the values of the two top elements of b."""
        self.b.swap_top()
        self._record("sb")

    def ss(self) -> None:
        """Swap on both stacks; logs each single swap and then the combined one."""
        self.sa()
        self.sb()
        self._record("ss")

    def pa(self) -> None:
        """Move the top element of b onto a."""
        self._push(self.b, self.a)
        self._record("pa")

    def pb(self) -> None:
        """Move the top element of a onto b."""
        self._push(self.a, self.b)
        self._record("pb")

    def ra(self) -> None:
        """Move the top element of a to its bottom."""
        self.a.rotate()
        self._record("ra")

    def rra(self) -> None:
        """Move the bottom element of a to its top."""
        self.a.reverse_rotate()
        self._record("rra")