# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Console input with parsing and validation.

read_validated_input() prompts on an output stream, reads one line at a
time and re-prompts until the line parses into a value that the optional
validator accepts.

Example:
    >>> age = read_validated_input(
    ...     'Enter age: ',
    ...     parse=int,
    ...     validator=lambda a: a >= 18,
    ...     error_message='Must be 18+.\\n',
    ... )
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, TextIO, TypeVar

from .exceptions import InputClosedError

T = TypeVar('T')

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Invalid value. Please try again.\n"
DEFAULT_FORMAT_ERROR_MESSAGE = "Invalid format. Please try again.\n"


def _parse_line(line: str, parse: Callable[[str], T]) -> T:
    """Parse a whole input line as a single token.

    Leading whitespace is skipped. Anything after the token, trailing
    whitespace included, makes the line invalid.

    Raises:
        ValueError: If the line is not exactly one token or parse rejects it.
    """
    token = line.rstrip('\r\n').lstrip()
    if not token or any(ch.isspace() for ch in token):
        raise ValueError(f"expected a single token, got {line!r}")
    try:
        return parse(token)
    except TypeError as exc:
        raise ValueError(str(exc)) from exc


def read_validated_input(
    prompt: str,
    parse: Callable[[str], T] = str,
    indent: int = 0,
    validator: Callable[[T], Any] | None = None,
    error_message: str = DEFAULT_ERROR_MESSAGE,
    format_error_message: str = DEFAULT_FORMAT_ERROR_MESSAGE,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> T:
    """Read a value from the console, re-prompting until it is valid.

    Args:
        prompt: Text written before each read (no newline is added).
        parse: Callable converting the token into the target type, e.g.
            int or float. ValueError or TypeError means a format error.
        indent: Number of tabs prefixed to the prompt. Messages get one
            more tab. Must be non-negative.
        validator: Optional predicate over the parsed value. A falsy
            result rejects the value.
        error_message: Written when the validator rejects a value.
        format_error_message: Written when the line cannot be parsed.
        stdin: Stream to read from. Defaults to sys.stdin.
        stdout: Stream for the prompt and messages. Defaults to sys.stdout.
        stderr: Stream for read errors. Defaults to sys.stderr.

    Returns:
        The first parsed value accepted by the validator.

    Raises:
        ValueError: If indent is negative.
        InputClosedError: If the input stream ends first.
    """
    if indent < 0:
        raise ValueError(f"indent must be non-negative, got {indent}")

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    indent_str = '\t' * indent
    message_indent = indent_str + '\t'

    while True:
        stdout.write(indent_str + prompt)
        stdout.flush()

        line = stdin.readline()
        if not line:
            stderr.write(message_indent + "Error reading input.\n")
            raise InputClosedError("input closed before a valid value was read")

        try:
            value = _parse_line(line, parse)
        except ValueError as exc:
            logger.debug("Rejected input: %s", exc)
            stdout.write(message_indent + format_error_message)
            continue

        if validator is None or validator(value):
            return value
        stdout.write(message_indent + error_message)
