"""
Key Sheet Generator
====================

Draws random daily settings in the layout of a historical key sheet:
rotor order without repetition, a reflector, ring settings, start
positions and a set of disjoint plugboard pairs.

Draws use :func:`numpy.random.default_rng`, so a given seed always yields
the same sheet.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from enigma.core import alphabet
from enigma.core.catalog import RotorCatalog
from enigma.core.errors import ConfigurationFailure, InvalidConfiguration
from enigma.core.models import MachineSettings


class KeySheetGenerator:
    """Random :class:`MachineSettings` from a rotor catalog.

    Args:
        catalog: Source of rotor and reflector type names.
        rotor_count: Rotors per machine.
        plug_count: Plugboard cables (at most 13).
    """

    def __init__(
        self,
        catalog: Optional[RotorCatalog] = None,
        *,
        rotor_count: int = 3,
        plug_count: int = 10,
    ) -> None:
        self.catalog = catalog or RotorCatalog()
        available = len(self.catalog.rotor_names())
        if not 1 <= rotor_count <= available:
            raise InvalidConfiguration(
                f"Cannot draw {rotor_count} distinct rotors from {available}",
                ConfigurationFailure.ROTOR_COUNT_MISMATCH,
            )
        if not 0 <= plug_count <= alphabet.SIZE // 2:
            raise InvalidConfiguration(
                f"Plug count {plug_count} outside 0-{alphabet.SIZE // 2}",
                ConfigurationFailure.INVALID_PLUGBOARD,
            )
        self.rotor_count = rotor_count
        self.plug_count = plug_count

    def generate(self, seed: Optional[int] = None) -> MachineSettings:
        rng = np.random.default_rng(seed)

        names = self.catalog.rotor_names()
        order = rng.choice(len(names), size=self.rotor_count, replace=False)
        reflectors = self.catalog.reflector_names()
        reflector = reflectors[int(rng.integers(len(reflectors)))]

        rings = rng.integers(0, alphabet.SIZE, size=self.rotor_count)
        positions = rng.integers(0, alphabet.SIZE, size=self.rotor_count)

        letters = rng.permutation(alphabet.SIZE)[: 2 * self.plug_count]
        pairs = sorted(
            "".join(sorted(alphabet.from_offset(int(o)) for o in letters[i:i + 2]))
            for i in range(0, len(letters), 2)
        )

        return MachineSettings(
            rotors=[names[int(i)] for i in order],
            reflector=reflector,
            ring_settings=[int(r) for r in rings],
            positions=[int(p) for p in positions],
            plugboard=pairs,
        )
