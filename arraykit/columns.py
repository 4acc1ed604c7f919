"""Conversion between spreadsheet column titles and column numbers."""

from __future__ import annotations

import string

_LETTERS = string.ascii_uppercase


def title_to_number(title: str) -> int:
    """Convert a column title such as 'AB' to its 1-based number."""
    result = 0
    for char in title:
        if char not in _LETTERS:
            raise ValueError(f"invalid column title character: {char!r}")
        result = result * 26 + _LETTERS.index(char) + 1
    return result


def number_to_title(number: int) -> str:
    """Convert a 1-based column number to its title; non-positive gives ''."""
    letters: list[str] = []
    while number > 0:
        number, remainder = divmod(number - 1, 26)
        letters.append(_LETTERS[remainder])
    return "".join(reversed(letters))