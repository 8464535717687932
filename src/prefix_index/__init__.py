# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Prefix-Index - A character trie mapping string keys to caller-owned values.

A lightweight, zero-dependency library providing exact lookup, prefix
checks, sorted auto-completion and pruning erase, plus a small console
input helper.
"""

__version__ = "0.1.0"

from .console import read_validated_input
from .exceptions import (
    InputClosedError,
    KeyNotFoundError,
    PrefixIndexError,
)
from .index import PrefixIndex
from .node import PrefixNode

__all__ = [
    # Core classes
    "PrefixIndex",
    "PrefixNode",
    # Console input
    "read_validated_input",
    # Exceptions
    "PrefixIndexError",
    "KeyNotFoundError",
    "InputClosedError",
]
