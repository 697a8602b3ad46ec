"""
Reflector
==========

The Umkehrwalze: a fixed wiring that sends the signal back through the
rotors. Its wiring must be an involution without fixed points, which is
what makes the whole machine reciprocal and guarantees that no letter
ever encrypts to itself.
"""

from __future__ import annotations

from typing import Sequence, Union

from enigma.components.wiring import Wiring
from enigma.core import alphabet
from enigma.core.errors import InvalidReflectorWiring


class Reflector:
    """Immutable involutive, fixed-point-free permutation.

    Args:
        wiring: 26-letter string, offset sequence or :class:`Wiring`.
        name: Catalog name, for display only.

    Raises:
        InvalidReflectorWiring: If the wiring is not a permutation, is not
            its own inverse, or maps any letter to itself.
    """

    __slots__ = ("name", "_wiring")

    def __init__(
        self,
        wiring: Union[Wiring, str, Sequence[int]],
        *,
        name: str = "",
    ) -> None:
        label = name or "?"
        if not isinstance(wiring, Wiring):
            try:
                wiring = Wiring(wiring)
            except ValueError as exc:
                raise InvalidReflectorWiring(f"Reflector {label}: {exc}") from exc

        if not wiring.is_involution():
            raise InvalidReflectorWiring(
                f"Reflector {label}: wiring is not an involution"
            )
        fixed = wiring.fixed_points()
        if fixed:
            letters = "".join(alphabet.from_offset(i) for i in fixed)
            raise InvalidReflectorWiring(
                f"Reflector {label}: letters map to themselves: {letters}"
            )

        self.name = name
        self._wiring = wiring

    @property
    def wiring(self) -> Wiring:
        return self._wiring

    def reflect(self, offset: int) -> int:
        return self._wiring.forward(offset)

    def __repr__(self) -> str:
        return f"<Reflector {self.name or '?'} {self._wiring.letters}>"
