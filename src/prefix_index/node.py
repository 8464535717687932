# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PrefixIndex node class."""

from __future__ import annotations

from bisect import bisect_left, insort
from typing import Any, Iterator


class PrefixNode:
    """A node in a PrefixIndex tree.

    Each node has:
    - value: Reference to the caller's object if the path from the root
      to this node spells a stored key, None otherwise
    - children: Child nodes keyed by a single character

    Children are kept alongside a sorted list of their labels, so iterating
    a node always visits children in ascending character order.

    Example:
        >>> node = PrefixNode()
        >>> child = node.add_child('b')
        >>> node.add_child('a') is not child
        True
        >>> [label for label, _ in node.iter_children()]
        ['a', 'b']
    """

    __slots__ = ('value', '_children', '_labels')

    def __init__(self, value: Any = None) -> None:
        """Initialize a PrefixNode.

        Args:
            value: Optional reference to a caller-owned object.
        """
        self.value = value
        self._children: dict[str, PrefixNode] = {}
        self._labels: list[str] = []

    def __repr__(self) -> str:
        return f"PrefixNode(value={self.value!r}, children={self._labels!r})"

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self._children)

    @property
    def is_terminal(self) -> bool:
        """True if a stored key ends at this node."""
        return self.value is not None

    @property
    def is_prunable(self) -> bool:
        """True if this node holds neither a value nor any children."""
        return self.value is None and not self._children

    def get_child(self, char: str) -> PrefixNode | None:
        """Return the child reached by char, or None."""
        return self._children.get(char)

    def add_child(self, char: str) -> PrefixNode:
        """Return the child reached by char, creating it if missing.

        Args:
            char: A single character labelling the edge.

        Returns:
            The existing or newly created child node.
        """
        child = self._children.get(char)
        if child is None:
            child = PrefixNode()
            self._children[char] = child
            insort(self._labels, char)
        return child

    def remove_child(self, char: str) -> PrefixNode:
        """Detach and return the child reached by char.

        Raises:
            KeyError: If there is no child for char.
        """
        child = self._children.pop(char)
        del self._labels[bisect_left(self._labels, char)]
        return child

    def iter_children(self) -> Iterator[tuple[str, PrefixNode]]:
        """Yield (char, child) pairs in ascending character order."""
        for label in self._labels:
            yield label, self._children[label]

    def detach_children(self) -> list[PrefixNode]:
        """Remove all children and return them in ascending order."""
        children = [self._children[label] for label in self._labels]
        self._children.clear()
        self._labels.clear()
        return children
