# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PrefixIndex - A character trie over caller-owned values.

This module provides the PrefixIndex class, which maps string keys to
references of objects owned by the caller. Keys sharing a prefix share the
nodes of that prefix, so prefix checks and completions cost time proportional
to the prefix length plus the size of the result.

Key Features:
    - **Exact lookup**: word_exists(key) returns the stored reference or None
    - **Prefix checks**: prefix_exists(prefix) is True for any partial key
    - **Ordered completion**: auto_complete(prefix) returns values in
      lexicographic key order, taken straight from the child ordering
    - **Pruning erase**: erase(key) removes the nodes that no longer lead
      to a stored key, in the same call

Ownership:
    The index owns its nodes and nothing else. Values are stored as given
    and are never copied, so the caller keeps them alive and mutable for as
    long as they are reachable through the index.

Example:
    Basic usage::

        index = PrefixIndex()
        index.insert('A red fruit', 'apple')
        index.insert('A software program', 'application')
        index.insert('To make a request', 'apply')

        index.auto_complete('app')
        # ['A red fruit', 'A software program', 'To make a request']

        index.word_exists('app')    # None
        index.prefix_exists('app')  # True
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterator, TypeVar

from ..exceptions import KeyNotFoundError
from ..node import PrefixNode
from .loading import load_from_dict, load_from_index, load_from_list

V = TypeVar('V')

logger = logging.getLogger(__name__)


class PrefixIndex(Generic[V]):
    """A prefix tree mapping string keys to caller-owned values.

    PrefixIndex provides:
    - insert(value, key): Store a reference under key (overwrites silently)
    - word_exists(key): Value stored at key, or None
    - prefix_exists(prefix): True if any stored key starts with prefix
    - auto_complete(prefix): Values of all keys starting with prefix, sorted
    - traverse(visitor): Call visitor on every value, in key order
    - erase(key): Remove key and prune dead branches
    - clear(): Drop every node

    None marks an absent value, so None itself cannot be stored.

    Example:
        >>> index = PrefixIndex({'car': 'A', 'cart': 'B', 'cat': 'C'})
        >>> index.auto_complete('ca')
        ['A', 'B', 'C']
        >>> index.erase('cart')
        True
        >>> index.keys()
        ['car', 'cat']
    """

    __slots__ = ('_root', '_size')

    def __init__(
        self,
        source: dict[str, V] | list[tuple[str, V]] | PrefixIndex[V] | None = None,
    ) -> None:
        """Initialize a PrefixIndex.

        Args:
            source: Optional initial data. Can be:
                - dict: Mapping of key to value
                - list: List of (key, value) tuples
                - PrefixIndex: Another index; its value references are
                  shared, its nodes are not

        Example:
            >>> PrefixIndex({'apple': 1, 'apply': 2})
            >>> PrefixIndex([('apple', 1), ('apply', 2)])
            >>> PrefixIndex(other_index)  # same values, new nodes
        """
        self._root: PrefixNode = PrefixNode()
        self._size = 0

        if source is not None:
            self._load_source(source)

    def _load_source(
        self, source: dict[str, V] | list[tuple[str, V]] | PrefixIndex[V]
    ) -> None:
        """Load data from source into this index.

        Raises:
            TypeError: If source is not dict, list, or PrefixIndex.
        """
        if isinstance(source, dict):
            load_from_dict(self, source)
        elif isinstance(source, PrefixIndex):
            load_from_index(self, source)
        elif isinstance(source, list):
            load_from_list(self, source)
        else:
            raise TypeError(
                f"source must be dict, list, or PrefixIndex, not {type(source).__name__}"
            )

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"PrefixIndex({self._size} keys)"

    def __len__(self) -> int:
        """Return the number of stored keys."""
        return self._size

    def __iter__(self) -> Iterator[str]:
        """Iterate over stored keys in lexicographic order."""
        return self.iter_keys()

    def __contains__(self, key: str) -> bool:
        """Check if key is a stored key (not merely a prefix)."""
        return self.word_exists(key) is not None

    def __getitem__(self, key: str) -> V:
        """Get the value stored at key.

        Raises:
            KeyNotFoundError: If key is not stored.
        """
        value = self.word_exists(key)
        if value is None:
            raise KeyNotFoundError(key)
        return value

    def __setitem__(self, key: str, value: V) -> None:
        self.insert(value, key)

    def __delitem__(self, key: str) -> None:
        """Erase key.

        Raises:
            KeyNotFoundError: If key is not stored.
        """
        if not self.erase(key):
            raise KeyNotFoundError(key)

    # ==================== Path Utilities ====================

    def _find(self, prefix: str) -> PrefixNode | None:
        """Return the node reached by following prefix, or None."""
        node = self._root
        for char in prefix:
            node = node.get_child(char)
            if node is None:
                return None
        return node

    def _walk(self, prefix: str) -> Iterator[tuple[str, V]]:
        """Yield (key, value) for stored keys starting with prefix.

        Pre-order walk: a node's own value comes before any of its
        children, and children are visited in ascending character order.
        """
        start = self._find(prefix)
        if start is None:
            return
        stack: list[tuple[str, PrefixNode]] = [(prefix, start)]
        while stack:
            key, node = stack.pop()
            if node.value is not None:
                yield key, node.value
            # reversed so the smallest character is popped first
            stack.extend(
                (key + char, child)
                for char, child in reversed(list(node.iter_children()))
            )

    # ==================== Core API ====================

    def insert(self, value: V, key: str) -> None:
        """Store a reference to value under key.

        Missing nodes along the path are created. If key is already stored,
        its reference is replaced and the previous one is not returned.

        Args:
            value: Caller-owned object. Not copied, never released.
            key: The key; the empty string addresses the root.

        Raises:
            ValueError: If value is None.
        """
        if value is None:
            raise ValueError("Cannot insert None: None marks an absent value")
        node = self._root
        for char in key:
            node = node.add_child(char)
        if node.value is None:
            self._size += 1
        node.value = value

    def word_exists(self, key: str) -> V | None:
        """Return the value stored at key, or None.

        A key that is only a prefix of stored keys returns None.
        """
        node = self._find(key)
        if node is None:
            return None
        return node.value

    def prefix_exists(self, prefix: str) -> bool:
        """Return True if some stored key starts with prefix.

        The empty prefix always exists.
        """
        return self._find(prefix) is not None

    def auto_complete(self, prefix: str) -> list[V]:
        """Return values of all stored keys starting with prefix.

        Args:
            prefix: Prefix to complete. The empty prefix matches every key.

        Returns:
            Values in lexicographic order of their keys; an empty list if no
            key starts with prefix.

        Example:
            >>> index = PrefixIndex({'car': 'A', 'cat': 'C', 'cart': 'B'})
            >>> index.auto_complete('ca')
            ['A', 'B', 'C']
        """
        return [value for _, value in self._walk(prefix)]

    def traverse(self, visitor: Callable[[V], Any]) -> None:
        """Call visitor on every stored value, in lexicographic key order.

        The visitor may mutate the values themselves but must not insert or
        erase keys while the walk is running.
        """
        for _, value in self._walk(''):
            visitor(value)

    def erase(self, key: str) -> bool:
        """Remove key from the index.

        The terminal node forgets its value, then every node on the way back
        to the root that is left with no value and no children is removed.

        Args:
            key: Key to remove.

        Returns:
            True if key was stored and is now removed; False if key was not
            stored, in which case the tree is left untouched.
        """
        path: list[tuple[PrefixNode, str]] = []
        node = self._root
        for char in key:
            child = node.get_child(char)
            if child is None:
                return False
            path.append((node, char))
            node = child
        if node.value is None:
            return False

        node.value = None
        self._size -= 1

        pruned = 0
        while path and node.is_prunable:
            parent, char = path.pop()
            parent.remove_child(char)
            pruned += 1
            node = parent
        logger.debug("Erased %r, pruned %d node(s)", key, pruned)
        return True

    def clear(self) -> None:
        """Remove every node, leaving an empty root.

        Stored values are forgotten, never released.
        """
        released = 0
        stack = self._root.detach_children()
        while stack:
            node = stack.pop()
            stack.extend(node.detach_children())
            node.value = None
            released += 1
        self._root.value = None
        self._size = 0
        logger.debug("Cleared index, released %d node(s)", released)

    def get(self, key: str, default: Any = None) -> V | Any:
        """Return the value stored at key, or default."""
        value = self.word_exists(key)
        return default if value is None else value

    def update(
        self, other: dict[str, V] | list[tuple[str, V]] | PrefixIndex[V]
    ) -> None:
        """Insert every entry of other, overwriting existing keys.

        Args:
            other: Source data (dict, list of tuples, or PrefixIndex).

        Raises:
            TypeError: If other is not dict, list, or PrefixIndex.
        """
        self._load_source(other)

    # ==================== Iteration ====================

    def iter_keys(self, prefix: str = '') -> Iterator[str]:
        """Yield stored keys starting with prefix, in lexicographic order."""
        for key, _ in self._walk(prefix):
            yield key

    def iter_values(self, prefix: str = '') -> Iterator[V]:
        """Yield values of keys starting with prefix, in key order."""
        for _, value in self._walk(prefix):
            yield value

    def iter_items(self, prefix: str = '') -> Iterator[tuple[str, V]]:
        """Yield (key, value) pairs starting with prefix, in key order."""
        yield from self._walk(prefix)

    def keys(self, prefix: str = '') -> list[str]:
        """Return stored keys starting with prefix."""
        return list(self.iter_keys(prefix))

    def values(self, prefix: str = '') -> list[V]:
        """Return values of keys starting with prefix."""
        return list(self.iter_values(prefix))

    def items(self, prefix: str = '') -> list[tuple[str, V]]:
        """Return (key, value) pairs starting with prefix."""
        return list(self.iter_items(prefix))

    # ==================== Structure ====================

    @property
    def node_count(self) -> int:
        """Number of nodes in the tree, root included.

        An empty index has exactly one node. After erasing every key the
        count is back to one.
        """
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(child for _, child in node.iter_children())
        return count
