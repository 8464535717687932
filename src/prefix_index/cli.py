# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Glossary shell built on PrefixIndex.

Usage:
    prefix-index [--words FILE] [--complete PREFIX] [--log-level LEVEL]

Examples:
    # Interactive shell over the sample glossary
    prefix-index

    # One-shot completion over a word list (key<TAB>description per line)
    prefix-index --words glossary.tsv --complete app
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from .console import read_validated_input
from .exceptions import InputClosedError
from .index import PrefixIndex

logger = logging.getLogger(__name__)

SAMPLE_GLOSSARY: list[tuple[str, str]] = [
    ('apple', 'A red fruit'),
    ('application', 'A software program'),
    ('apply', 'To make a request'),
    ('banana', 'A yellow fruit'),
]

MENU = """
1) Auto-complete a prefix
2) Look up a word
3) Check a prefix
4) Add a word
5) Erase a word
6) Quit"""


def load_glossary(path: str | Path) -> list[tuple[str, str]]:
    """Read (word, description) entries from a word list file.

    Each line is 'word<TAB>description'; a line without a tab uses the
    word as its own description. Blank lines and '#' comments are skipped.
    """
    entries: list[tuple[str, str]] = []
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.rstrip('\r\n')
            if not line.strip() or line.lstrip().startswith('#'):
                continue
            word, sep, description = line.partition('\t')
            word = word.strip()
            entries.append((word, description.strip() if sep else word))
    logger.info("Loaded %d entries from %s", len(entries), path)
    return entries


def build_index(entries: list[tuple[str, str]]) -> PrefixIndex[str]:
    """Index descriptions by word. The descriptions stay owned by entries."""
    return PrefixIndex(entries)


def _read_line(prompt: str, stdin: TextIO, stdout: TextIO) -> str:
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise InputClosedError("input closed")
    return line.strip()


def run_shell(
    index: PrefixIndex[str],
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Run the interactive menu until the user quits or input ends."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    streams = {'stdin': stdin, 'stdout': stdout}

    def read_word(prompt: str) -> str:
        return read_validated_input(prompt, indent=1, **streams)

    print("=" * 40, file=stdout)
    print("  GLOSSARY", file=stdout)
    print("=" * 40, file=stdout)

    try:
        while True:
            print(MENU, file=stdout)
            choice = read_validated_input(
                "Choice: ",
                parse=int,
                validator=lambda c: 1 <= c <= 6,
                error_message="Choose a number from 1 to 6.\n",
                **streams,
            )

            if choice == 1:
                prefix = read_word("Prefix: ")
                results = index.auto_complete(prefix)
                print(f"Words starting with '{prefix}':", file=stdout)
                for description in results:
                    print(f"  - {description}", file=stdout)
                if not results:
                    print("  (none)", file=stdout)
            elif choice == 2:
                word = read_word("Word: ")
                description = index.word_exists(word)
                if description is None:
                    print(f"Search for '{word}': Not found", file=stdout)
                else:
                    print(f"Search for '{word}': {description}", file=stdout)
            elif choice == 3:
                prefix = read_word("Prefix: ")
                answer = 'yes' if index.prefix_exists(prefix) else 'no'
                print(f"Prefix '{prefix}' exists: {answer}", file=stdout)
            elif choice == 4:
                word = read_word("Word: ")
                description = _read_line("\tDescription: ", stdin, stdout) or word
                existed = word in index
                index.insert(description, word)
                print(f"{'Updated' if existed else 'Added'} '{word}'", file=stdout)
            elif choice == 5:
                word = read_word("Word: ")
                if index.erase(word):
                    print(f"Removed '{word}'", file=stdout)
                else:
                    print(f"'{word}' was not stored", file=stdout)
            else:
                break
    except InputClosedError:
        print(file=stdout)
    print("Bye.", file=stdout)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog='prefix-index',
        description="Glossary shell with prefix auto-completion",
    )
    parser.add_argument("--words", type=str, default=None,
                        help="Word list file, one 'word<TAB>description' per line")
    parser.add_argument("--complete", type=str, default=None, metavar="PREFIX",
                        help="Print completions for PREFIX and exit")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    if args.words:
        entries = load_glossary(args.words)
    else:
        logger.info("No word list given -- using the sample glossary.")
        entries = list(SAMPLE_GLOSSARY)
    index = build_index(entries)

    if args.complete is not None:
        for description in index.auto_complete(args.complete):
            print(f"  - {description}")
        return 0

    run_shell(index)
    return 0


if __name__ == '__main__':
    sys.exit(main())
