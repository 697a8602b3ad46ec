"""
Rotor
======

A single Enigma wheel: fixed wiring, a ring setting (Ringstellung) that
shifts the wiring relative to the visible letter, a mutable rotational
position and a set of notch positions.

Signal alignment (all arithmetic modulo 26)::

    effective = offset_in + position - ring_setting
    mapped    = wiring[effective]
    offset_out = mapped - position + ring_setting

The same alignment is used in both directions; only the table differs.
"""

from __future__ import annotations

from typing import Iterable, Union

from enigma.components.wiring import Wiring
from enigma.core import alphabet
from enigma.core.errors import (
    ConfigurationFailure,
    InvalidConfiguration,
    InvalidRotorWiring,
)


class Rotor:
    """A rotating substitution wheel.

    Args:
        wiring: Rotor wiring as a :class:`Wiring` or 26-letter string.
        notches: Notch positions as offsets or letters (``"Q"``, ``"ZM"``).
        ring_setting: Ring offset 0-25.
        position: Starting position 0-25.
        name: Catalog name of the rotor type, for display only.

    Raises:
        InvalidRotorWiring: If the wiring or a notch is invalid.
    """

    __slots__ = ("name", "wiring", "notches", "_ring_setting", "_position")

    def __init__(
        self,
        wiring: Union[Wiring, str],
        notches: Iterable[Union[int, str]] = (),
        *,
        ring_setting: int = 0,
        position: int = 0,
        name: str = "",
    ) -> None:
        try:
            self.wiring = wiring if isinstance(wiring, Wiring) else Wiring(wiring)
            self.notches: frozenset[int] = frozenset(
                alphabet.coerce_offset(n) for n in notches
            )
        except ValueError as exc:
            raise InvalidRotorWiring(f"Rotor {name or '?'}: {exc}") from exc

        self.name = name
        self._ring_setting = 0
        self._position = 0
        self.ring_setting = ring_setting
        self.position = position

    # ------------------------------------------------------------------ #
    #  State
    # ------------------------------------------------------------------ #

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        self._position = self._checked(value, "position", ConfigurationFailure.INVALID_POSITION)

    @property
    def ring_setting(self) -> int:
        return self._ring_setting

    @ring_setting.setter
    def ring_setting(self, value: int) -> None:
        self._ring_setting = self._checked(
            value, "ring setting", ConfigurationFailure.INVALID_RING_SETTING
        )

    def _checked(self, value: int, label: str, reason: ConfigurationFailure) -> int:
        if isinstance(value, bool) or not 0 <= value < alphabet.SIZE:
            raise InvalidConfiguration(
                f"Rotor {self.name or '?'}: {label} {value!r} outside 0-{alphabet.SIZE - 1}",
                reason,
            )
        return value

    @property
    def window(self) -> str:
        """Letter currently visible in the machine window."""
        return alphabet.from_offset(self._position)

    # ------------------------------------------------------------------ #
    #  Stepping
    # ------------------------------------------------------------------ #

    def is_at_notch(self) -> bool:
        return self._position in self.notches

    def advance(self) -> None:
        self._position = (self._position + 1) % alphabet.SIZE

    # ------------------------------------------------------------------ #
    #  Signal path
    # ------------------------------------------------------------------ #

    def encode_forward(self, offset: int) -> int:
        """Pass a signal entering from the right (keyboard side)."""
        shift = self._position - self._ring_setting
        mapped = self.wiring.forward((offset + shift) % alphabet.SIZE)
        return (mapped - shift) % alphabet.SIZE

    def encode_backward(self, offset: int) -> int:
        """Pass a signal entering from the left (returning from the reflector)."""
        shift = self._position - self._ring_setting
        mapped = self.wiring.backward((offset + shift) % alphabet.SIZE)
        return (mapped - shift) % alphabet.SIZE

    def __repr__(self) -> str:
        return (
            f"<Rotor {self.name or '?'} pos={self.window} "
            f"ring={alphabet.from_offset(self._ring_setting)}>"
        )
