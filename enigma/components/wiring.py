"""
Wiring Tables
==============

Array-backed permutations of the offsets 0-25. A :class:`Wiring` stores the
forward table and its inverse as numpy integer arrays so that every lookup
is a plain index operation with no missing-key path.

References:
    - NumPy ``argsort``: the inverse of a permutation ``p`` is ``argsort(p)``.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from enigma.core import alphabet

_IDENTITY = np.arange(alphabet.SIZE)


class Wiring:
    """A bijection ``forward: offset -> offset`` with its inverse ``backward``.

    Args:
        table: Either a 26-letter string (``"EKMFLGDQVZNTOWYHXUSPAIBRCJ"``,
            letter *i* is the image of offset *i*) or a sequence of 26
            offsets.

    Raises:
        ValueError: If *table* is not a permutation of the alphabet.
    """

    __slots__ = ("_forward", "_backward")

    def __init__(self, table: Union[str, Sequence[int]]) -> None:
        if isinstance(table, str):
            if len(table) != alphabet.SIZE or not all(
                alphabet.is_letter(ch) for ch in table
            ):
                raise ValueError(
                    f"Wiring {table!r} must be {alphabet.SIZE} letters A-Z"
                )
            values = [alphabet.to_offset(ch) for ch in table]
        else:
            values = list(table)

        forward = np.asarray(values, dtype=np.int64)
        if forward.shape != (alphabet.SIZE,) or not np.array_equal(
            np.sort(forward), _IDENTITY
        ):
            raise ValueError("Wiring must be a permutation of offsets 0-25")

        self._forward = forward
        self._backward = np.argsort(forward)
        self._forward.setflags(write=False)
        self._backward.setflags(write=False)

    # ------------------------------------------------------------------ #
    #  Lookups
    # ------------------------------------------------------------------ #

    def forward(self, offset: int) -> int:
        """Image of *offset* under the permutation."""
        return int(self._forward[offset])

    def backward(self, offset: int) -> int:
        """Pre-image of *offset* (the inverse permutation)."""
        return int(self._backward[offset])

    # ------------------------------------------------------------------ #
    #  Structural properties
    # ------------------------------------------------------------------ #

    def is_involution(self) -> bool:
        """``True`` when applying the wiring twice is the identity."""
        return bool(np.array_equal(self._forward[self._forward], _IDENTITY))

    def fixed_points(self) -> list[int]:
        """Offsets that the wiring maps onto themselves."""
        return [int(i) for i in np.flatnonzero(self._forward == _IDENTITY)]

    @property
    def letters(self) -> str:
        """The forward table rendered as a 26-letter string."""
        return "".join(alphabet.from_offset(int(i)) for i in self._forward)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wiring):
            return NotImplemented
        return bool(np.array_equal(self._forward, other._forward))

    def __hash__(self) -> int:
        return hash(self.letters)

    def __repr__(self) -> str:
        return f"Wiring({self.letters!r})"
