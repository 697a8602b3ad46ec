"""
Alphabet
=========

The fixed 26-symbol Latin alphabet and its mapping onto integer offsets
0-25. Every permutation in the engine operates on offsets; letters only
appear at the edges of the machine.
"""

from __future__ import annotations

import string
from typing import Union

from enigma.core.errors import InvalidCharacter

LETTERS: str = string.ascii_uppercase
SIZE: int = len(LETTERS)

_INDEX: dict[str, int] = {ch: i for i, ch in enumerate(LETTERS)}


def is_letter(symbol: object) -> bool:
    """Return ``True`` if *symbol* is a single letter A-Z (either case)."""
    return (
        isinstance(symbol, str)
        and len(symbol) == 1
        and symbol.isascii()
        and symbol.upper() in _INDEX
    )


def to_offset(symbol: str) -> int:
    """Map a letter to its offset.

    Raises:
        InvalidCharacter: If *symbol* is not a single ASCII letter.
    """
    if not is_letter(symbol):
        raise InvalidCharacter(symbol)
    return _INDEX[symbol.upper()]


def from_offset(offset: int) -> str:
    """Map an offset (taken modulo 26) back to its letter."""
    return LETTERS[offset % SIZE]


def coerce_offset(value: Union[int, str]) -> int:
    """Accept either an offset 0-25 or a single letter and return the offset.

    Raises:
        ValueError: If an integer lies outside [0, 25].
        InvalidCharacter: If a string is not a single letter.
    """
    if isinstance(value, bool):
        raise ValueError(f"Expected an offset or a letter, got {value!r}")
    if isinstance(value, int):
        if not 0 <= value < SIZE:
            raise ValueError(f"Offset {value} outside range 0-{SIZE - 1}")
        return value
    return to_offset(value)


def normalize(text: str) -> str:
    """Upper-case *text* and drop everything that is not a letter A-Z.

    The engine itself never strips input; callers that accept free text
    (the CLI, a form) normalise before encoding.
    """
    return "".join(ch.upper() for ch in text if ch.isascii() and ch.upper() in _INDEX)


def group(text: str, size: int = 5) -> str:
    """Split *text* into space-separated blocks of *size* letters."""
    if size <= 0:
        return text
    return " ".join(text[i:i + size] for i in range(0, len(text), size))
