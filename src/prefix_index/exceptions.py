# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PrefixIndex exceptions."""

from __future__ import annotations


class PrefixIndexError(Exception):
    """Base exception for PrefixIndex errors."""

    pass


class KeyNotFoundError(PrefixIndexError, KeyError):
    """Raised by item access when a key is not stored in the index."""

    pass


class InputClosedError(PrefixIndexError, EOFError):
    """Raised when the input stream ends before a valid value is read."""

    pass
