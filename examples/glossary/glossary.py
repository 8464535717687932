# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Glossary - Example of a PrefixIndex over caller-owned entries.

The Entry objects live in the ``entries`` list; the index only points at
them. Editing an entry is visible through the index, and erasing a word
leaves the entry itself alone.
"""

from __future__ import annotations

from dataclasses import dataclass

from prefix_index import PrefixIndex


@dataclass
class Entry:
    word: str
    description: str
    lookups: int = 0


def main() -> None:
    entries = [
        Entry('apple', 'A red fruit'),
        Entry('application', 'A software program'),
        Entry('apply', 'To make a request'),
        Entry('banana', 'A yellow fruit'),
    ]

    dictionary: PrefixIndex[Entry] = PrefixIndex()
    for entry in entries:
        dictionary.insert(entry, entry.word)

    print("Words starting with 'app':")
    for entry in dictionary.auto_complete('app'):
        print(f"  - {entry.description}")

    print("\nSearch for 'apple': ", end='')
    entry = dictionary.word_exists('apple')
    if entry is not None:
        entry.lookups += 1
        print(entry.description)
    else:
        print("Not found")

    answer = 'yes' if dictionary.prefix_exists('ban') else 'no'
    print(f"Prefix 'ban' exists: {answer}")

    dictionary.erase('apple')
    print(f"\nAfter erasing 'apple': {dictionary.keys()}")
    print(f"'apple' entry still owned by the caller: {entries[0]}")


if __name__ == '__main__':
    main()
