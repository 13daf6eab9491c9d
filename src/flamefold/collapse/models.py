"""Data models for collapsed stacks and the call tree built from them.

The tree is an arena: ``StackTree`` owns every ``Node`` in a flat list and
nodes refer to their children by index.  The root always sits at index 0
and carries the empty name.
"""

from dataclasses import dataclass, field
from typing import Iterator

ROOT = 0


@dataclass(frozen=True)
class StackRecord:
    """One parsed collapsed-stack line: a frame path and its sample count."""

    frames: tuple[str, ...]
    count: int = 1


@dataclass
class Node:
    """One stack frame at a specific position in the aggregated call tree.

    ``value`` is cumulative: it counts every sample whose frame path passes
    through this node, not only those ending here.
    """

    name: str
    value: int = 0
    children: list[int] = field(default_factory=list)


class StackTree:
    """Rooted, ordered call tree stored as an index-addressed arena."""

    def __init__(self) -> None:
        self._nodes: list[Node] = [Node("")]

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def root(self) -> Node:
        return self._nodes[ROOT]

    @property
    def total(self) -> int:
        """Sum of all record counts applied to the tree."""
        return self._nodes[ROOT].value

    def node(self, index: int) -> Node:
        return self._nodes[index]

    def children(self, index: int) -> list[Node]:
        return [self._nodes[i] for i in self._nodes[index].children]

    def add_child(self, parent: int, name: str) -> int:
        """Append a new, zero-valued child under *parent* and return its index."""
        index = len(self._nodes)
        self._nodes.append(Node(name))
        self._nodes[parent].children.append(index)
        return index

    def add_value(self, index: int, count: int) -> None:
        self._nodes[index].value += count

    def walk(self) -> Iterator[tuple[int, Node]]:
        """Yield ``(depth, node)`` pairs depth-first, children in stored order."""
        stack = [(0, ROOT)]
        while stack:
            depth, index = stack.pop()
            node = self._nodes[index]
            yield depth, node
            for child in reversed(node.children):
                stack.append((depth + 1, child))

    @property
    def max_depth(self) -> int:
        return max(depth for depth, _ in self.walk())
