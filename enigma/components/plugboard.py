"""
Plugboard
==========

The Steckerbrett: a configurable involutive partial permutation applied to
the signal before it enters the rotors and again after it leaves them.
Each letter takes part in at most one pair; unplugged letters pass through
unchanged.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Union

from enigma.core import alphabet
from enigma.core.errors import InvalidPlugboardPairing

PairLike = Union[str, Sequence[str]]


class Plugboard:
    """Letter-swapping plugboard.

    Usage::

        board = Plugboard()
        board.configure(["AB", ("C", "D")])
        board.swap(0)   # -> 1

    Args:
        pairs: Optional initial pairs, validated as in :meth:`configure`.
    """

    __slots__ = ("_mapping",)

    def __init__(self, pairs: Iterable[PairLike] = ()) -> None:
        self._mapping: list[int] = list(range(alphabet.SIZE))
        self.configure(pairs)

    def configure(self, pairs: Iterable[PairLike]) -> None:
        """Replace the current wiring with *pairs*.

        Each pair is a 2-letter string (``"AB"``) or a 2-element sequence of
        letters (``("A", "B")``); case is ignored. The whole set is validated
        before anything is committed, so a rejected request leaves the
        previous wiring untouched.

        Raises:
            InvalidPlugboardPairing: On a malformed pair, a symbol outside
                A-Z, a self-pair or a symbol used by more than one pair.
        """
        mapping = list(range(alphabet.SIZE))
        used: set[int] = set()

        for raw in pairs:
            first, second = self._split(raw)
            a, b = self._offset(first, raw), self._offset(second, raw)

            if a == b:
                raise InvalidPlugboardPairing(
                    f"Letter {first.upper()} cannot be plugged to itself"
                )
            for off in (a, b):
                if off in used:
                    raise InvalidPlugboardPairing(
                        f"Letter {alphabet.from_offset(off)} is used by more than one pair"
                    )

            mapping[a], mapping[b] = b, a
            used.update((a, b))

        self._mapping = mapping

    @staticmethod
    def _split(raw: PairLike) -> tuple[str, str]:
        if isinstance(raw, str):
            if len(raw) != 2:
                raise InvalidPlugboardPairing(
                    f"Pair {raw!r} must be exactly 2 letters"
                )
            return raw[0], raw[1]
        try:
            items = tuple(raw)
        except TypeError:
            raise InvalidPlugboardPairing(f"Pair {raw!r} is not a pair") from None
        if len(items) != 2:
            raise InvalidPlugboardPairing(
                f"Pair {raw!r} must contain exactly 2 letters"
            )
        return items[0], items[1]

    @staticmethod
    def _offset(symbol: object, raw: PairLike) -> int:
        if not alphabet.is_letter(symbol):
            raise InvalidPlugboardPairing(
                f"Pair {raw!r} contains {symbol!r}, which is not a letter A-Z"
            )
        return alphabet.to_offset(symbol)  # type: ignore[arg-type]

    # ------------------------------------------------------------------ #
    #  Signal path
    # ------------------------------------------------------------------ #

    def swap(self, offset: int) -> int:
        return self._mapping[offset]

    @property
    def pairs(self) -> list[str]:
        """Configured pairs as sorted 2-letter strings, e.g. ``["AB", "CD"]``."""
        return [
            alphabet.from_offset(a) + alphabet.from_offset(b)
            for a, b in enumerate(self._mapping)
            if a < b
        ]

    def __len__(self) -> int:
        return len(self.pairs)

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs) or '-'}>"
