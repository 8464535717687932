# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Loading functions for PrefixIndex.

These functions fill an index from the sources accepted by the
PrefixIndex constructor and by PrefixIndex.update(). Values are inserted
as given: loading never copies them.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .core import PrefixIndex


def load_from_dict(index: PrefixIndex, data: dict[str, Any]) -> None:
    """Insert every key/value pair of a dict.

    Args:
        index: Target index.
        data: Mapping of key to value.

    Example:
        >>> load_from_dict(index, {'apple': 1, 'apply': 2})
    """
    for key, value in data.items():
        index.insert(value, key)


def load_from_list(index: PrefixIndex, items: list[tuple[str, Any]]) -> None:
    """Insert every (key, value) tuple of a list.

    Args:
        index: Target index.
        items: List of (key, value) tuples.

    Raises:
        ValueError: If an item is not a 2-element tuple.
    """
    for item in items:
        if not isinstance(item, tuple):
            raise ValueError(
                f"List items must be (key, value) tuples, got {type(item).__name__}"
            )
        if len(item) != 2:
            raise ValueError(
                f"List items must be (key, value) tuples, got {len(item)} elements"
            )
        key, value = item
        index.insert(value, key)


def load_from_index(index: PrefixIndex, source: PrefixIndex) -> None:
    """Insert every stored entry of another index.

    The target gets its own nodes; both indexes then reference the same
    value objects.

    Args:
        index: Target index.
        source: Index to read from.
    """
    for key, value in source.items():
        index.insert(value, key)
