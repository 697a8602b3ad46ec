"""
Rotor Assembly
===============

The ordered set of installed rotors together with the stepping mechanism.

Stepping per keypress (evaluated on the pre-step state, applied at once):

1. The rightmost rotor always advances.
2. Any other rotor advances when its right-hand neighbour sits at a notch
   (the pawl between them drops into that notch).
3. A rotor with a left-hand neighbour also advances when it sits at its own
   notch: the pawl of the neighbour catches the notch and pushes both
   wheels. This is the double-step anomaly of the middle rotor.

The leftmost rotor has no pawl to its left, so rule 3 never applies to it.

Rotors are indexed left-to-right as installed; the signal enters on the
right.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from enigma.components.reflector import Reflector
from enigma.components.rotor import Rotor
from enigma.core.errors import ConfigurationFailure, InvalidConfiguration


class RotorAssembly:
    """Rotors plus reflector, with stepping and the bidirectional signal pass.

    Args:
        rotors: Rotors ordered left-to-right.
        reflector: Reflector closing the signal path.

    Raises:
        InvalidConfiguration: If *rotors* is empty.
    """

    __slots__ = ("_rotors", "reflector")

    def __init__(self, rotors: Sequence[Rotor], reflector: Reflector) -> None:
        if not rotors:
            raise InvalidConfiguration(
                "At least one rotor must be installed",
                ConfigurationFailure.EMPTY_ASSEMBLY,
            )
        self._rotors: tuple[Rotor, ...] = tuple(rotors)
        self.reflector = reflector

    # ------------------------------------------------------------------ #
    #  Stepping
    # ------------------------------------------------------------------ #

    def stepping_plan(self) -> list[bool]:
        """Which rotors the next keypress will advance, left-to-right."""
        at_notch = [rotor.is_at_notch() for rotor in self._rotors]
        last = len(self._rotors) - 1
        plan: list[bool] = []
        for i in range(len(self._rotors)):
            if i == last:
                plan.append(True)
            else:
                pushed_by_neighbour = at_notch[i + 1]
                double_step = i > 0 and at_notch[i]
                plan.append(pushed_by_neighbour or double_step)
        return plan

    def double_stepping(self) -> list[bool]:
        """Rotors the next keypress moves solely through their own notch."""
        at_notch = [rotor.is_at_notch() for rotor in self._rotors]
        last = len(self._rotors) - 1
        return [
            0 < i < last and at_notch[i] and not at_notch[i + 1]
            for i in range(len(self._rotors))
        ]

    def step(self) -> list[bool]:
        """Advance the rotors for one keypress and return the plan applied."""
        plan = self.stepping_plan()
        for rotor, moves in zip(self._rotors, plan):
            if moves:
                rotor.advance()
        return plan

    # ------------------------------------------------------------------ #
    #  Signal path
    # ------------------------------------------------------------------ #

    def process(self, offset: int) -> int:
        """Right-to-left through the rotors, reflect, then back left-to-right."""
        for rotor in reversed(self._rotors):
            offset = rotor.encode_forward(offset)
        offset = self.reflector.reflect(offset)
        for rotor in self._rotors:
            offset = rotor.encode_backward(offset)
        return offset

    # ------------------------------------------------------------------ #
    #  Positions
    # ------------------------------------------------------------------ #

    @property
    def positions(self) -> list[int]:
        return [rotor.position for rotor in self._rotors]

    def set_positions(self, positions: Sequence[int]) -> None:
        if len(positions) != len(self._rotors):
            raise InvalidConfiguration(
                f"Expected {len(self._rotors)} positions, got {len(positions)}",
                ConfigurationFailure.ROTOR_COUNT_MISMATCH,
            )
        for rotor, pos in zip(self._rotors, positions):
            rotor.position = pos

    @property
    def rotors(self) -> tuple[Rotor, ...]:
        return self._rotors

    def __len__(self) -> int:
        return len(self._rotors)

    def __iter__(self) -> Iterator[Rotor]:
        return iter(self._rotors)
