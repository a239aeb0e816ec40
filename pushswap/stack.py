"""Stacks of indexed integers and the sorting helpers that work on their nodes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Tuple


@dataclass
class Node:
    """One stack element: its value and the position it was given."""

    content: int
    index: int = 0


class Stack:
    """A stack of nodes; the first node is the top."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self._nodes: deque[Node] = deque(nodes)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "Stack":
        """Build a stack whose nodes are indexed by their position."""
        return cls(Node(value, position) for position, value in enumerate(values))

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({list(self._nodes)!r})"

    def contents(self) -> List[int]:
        """The values from top to bottom."""
        return [node.content for node in self._nodes]

    def last(self) -> Optional[Node]:
        """The bottom node, or None when the stack is empty."""
        return self._nodes[-1] if self._nodes else None

    def append(self, node: Node) -> None:
        """Add a node at the bottom."""
        self._nodes.append(node)

    def push_top(self, node: Node) -> None:
        """Add a node on top."""
        self._nodes.appendleft(node)

    def pop_top(self) -> Node:
        """Remove and return the top node."""
        if not self._nodes:
            raise IndexError("pop from an empty stack")
        return self._nodes.popleft()

    def clear(self) -> None:
        """Remove every node."""
        self._nodes.clear()

    def copy(self) -> "Stack":
        """A stack holding copies of the nodes, independent of this one."""
        return Stack(Node(node.content, node.index) for node in self._nodes)

    def each(self, func: Callable[[int], object]) -> None:
        """Call func with each value, top to bottom."""
        for node in self._nodes:
            func(node.content)

    def map(self, func: Callable[[int], int]) -> "Stack":
        """A new stack of func applied to each value; indices are kept."""
        return Stack(Node(func(node.content), node.index) for node in self._nodes)

    def swap_top(self) -> None:
        """Exchange the values of the two top nodes; their indices stay put."""
        if len(self._nodes) < 2:
            raise IndexError("swap needs at least two elements")
        first, second = self._nodes[0], self._nodes[1]
        first.content, second.content = second.content, first.content

    def rotate(self) -> None:
        """Move the top node to the bottom."""
        if not self._nodes:
            raise IndexError("rotate on an empty stack")
        self._nodes.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom node to the top."""
        if not self._nodes:
            raise IndexError("reverse rotate on an empty stack")
        self._nodes.rotate(1)

    def reset_index(self) -> None:
        """Renumber the nodes by their current position."""
        for position, node in enumerate(self._nodes):
            node.index = position

    def find_min(self) -> int:
        """The index field of the node holding the smallest value (first one on ties)."""
        if not self._nodes:
            raise ValueError("find_min on an empty stack")
        return min(self._nodes, key=lambda node: node.content).index

    def is_sorted(self) -> bool:
        """True when the values never decrease from top to bottom."""
        values = self.contents()
        return all(a <= b for a, b in zip(values, values[1:]))

    def format(self) -> str:
        """One 'index->content' line per node, top first."""
        return "".join(f"{node.index}->{node.content}\n" for node in self._nodes)


def merge(left: Iterable[Node], right: Iterable[Node]) -> List[Node]:
    """Merge two lists of nodes sorted by value; on ties the left node comes first."""
    left_nodes, right_nodes = list(left), list(right)
    result: List[Node] = []
    li = ri = 0
    while li < len(left_nodes) and ri < len(right_nodes):
        if left_nodes[li].content <= right_nodes[ri].content:
            result.append(left_nodes[li])
            li += 1
        else:
            result.append(right_nodes[ri])
            ri += 1
    result.extend(left_nodes[li:])
    result.extend(right_nodes[ri:])
    return result


def split(nodes: Iterable[Node]) -> Tuple[List[Node], List[Node]]:
    """Cut nodes into a front and back half; the front gets the extra node."""
    items = list(nodes)
    middle = (len(items) + 1) // 2
    return items[:middle], items[middle:]


def merge_sort(nodes: Iterable[Node]) -> List[Node]:
    """Return the nodes sorted by value, keeping the order of equal values."""
    items = list(nodes)
    if len(items) < 2:
        return items
    front, back = split(items)
    return merge(merge_sort(front), merge_sort(back))


def bubble_sort(nodes: List[Node]) -> List[Node]:
    """Sort a list of nodes by value in place, exchanging values between nodes."""
    end = len(nodes)
    swapped = True
    while swapped and end > 1:
        swapped = False
        for current, following in zip(nodes[:end - 1], nodes[1:end]):
            if current.content > following.content:
                current.content, following.content = following.content, current.content
                swapped = True
        end -= 1
    return nodes