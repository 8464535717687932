# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PrefixIndex package - Character trie over caller-owned values.

The package is organized into:
- core: Main PrefixIndex class with lookup, completion, traversal and erase
- loading: Functions for loading data from dict, list, or PrefixIndex sources

Example:
    >>> from prefix_index import PrefixIndex
    >>> index = PrefixIndex()
    >>> index.insert('A red fruit', 'apple')
    >>> index.auto_complete('ap')
    ['A red fruit']
"""

from ..node import PrefixNode
from .core import PrefixIndex

__all__ = ["PrefixIndex", "PrefixNode"]
