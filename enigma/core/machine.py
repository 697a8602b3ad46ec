"""
Enigma Machine
===============

Composes a :class:`Plugboard`, a :class:`RotorAssembly` and a
:class:`Reflector` into the full signal path and exposes the public
cipher API.

Per keypress::

    step rotors -> plugboard -> rotors (right to left) -> reflector
                -> rotors (left to right) -> plugboard -> lamp

The machine starts *unconfigured*; :meth:`Machine.configure` validates a
complete configuration request and only then replaces the installed
components, so a rejected request leaves the previous configuration in
place. One machine instance belongs to one session; it is not safe to
share between threads without external locking.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Union

from shared.logger import RotorLogger

from enigma.components.assembly import RotorAssembly
from enigma.components.plugboard import PairLike, Plugboard
from enigma.components.reflector import Reflector
from enigma.core import alphabet
from enigma.core.catalog import RotorCatalog
from enigma.core.errors import (
    ConfigurationFailure,
    InvalidConfiguration,
    MachineNotConfigured,
)
from enigma.core.models import MachineSettings

OffsetLike = Union[int, str]
OffsetsLike = Union[str, Sequence[OffsetLike]]


class Machine:
    """An Enigma cipher machine.

    Usage::

        machine = Machine()
        machine.configure(["I", "II", "III"], "AAA", "AAA", [])
        machine.encode_message("AAAAA")     # 'BDZGO'
        machine.reset()
        machine.encode_message("BDZGO")     # 'AAAAA'

    Args:
        catalog: Rotor / reflector types available to :meth:`configure`.
            Each machine gets its own default catalog when omitted.
        logger: Logger for configuration and stepping events. Defaults to
            the shared ``enigma.machine`` logger as currently configured.
    """

    def __init__(
        self,
        catalog: Optional[RotorCatalog] = None,
        logger: Optional[RotorLogger] = None,
    ) -> None:
        self.catalog = catalog or RotorCatalog()
        self.logger = logger or RotorLogger.attach("enigma.machine")

        self._plugboard: Optional[Plugboard] = None
        self._assembly: Optional[RotorAssembly] = None
        self._settings: Optional[MachineSettings] = None

    # ------------------------------------------------------------------ #
    #  Configuration
    # ------------------------------------------------------------------ #

    @property
    def is_configured(self) -> bool:
        return self._assembly is not None

    def configure(
        self,
        rotor_types: Union[str, Sequence[str]],
        ring_settings: Optional[OffsetsLike] = None,
        start_positions: Optional[OffsetsLike] = None,
        plugboard_pairs: Union[str, Iterable[PairLike]] = (),
        reflector: str = "B",
    ) -> MachineSettings:
        """Validate a configuration request and install it.

        Args:
            rotor_types: Rotor type names, left-to-right (``["I", "II", "III"]``
                or ``"I II III"``).
            ring_settings: One ring offset per rotor, as integers 0-25 or
                letters (``"AAA"``). All zero when omitted.
            start_positions: One start position per rotor, same forms.
                All ``A`` when omitted.
            plugboard_pairs: 2-letter strings or letter pairs; a single
                string is split on whitespace (``"AB CD"``).
            reflector: Reflector type name.

        Returns:
            The :class:`MachineSettings` snapshot now in force.

        Raises:
            InvalidConfiguration: Tagged with the failing sub-validation.
            InvalidPlugboardPairing: For a rejected plugboard (a sub-kind
                of :class:`InvalidConfiguration`).
        """
        with self.logger.operation("configure"):
            names = rotor_types.split() if isinstance(rotor_types, str) else list(rotor_types)
            if not names:
                raise InvalidConfiguration(
                    "At least one rotor must be installed",
                    ConfigurationFailure.EMPTY_ASSEMBLY,
                )
            count = len(names)

            rings = self._coerce_offsets(
                ring_settings, count, "ring settings",
                ConfigurationFailure.INVALID_RING_SETTING,
            )
            positions = self._coerce_offsets(
                start_positions, count, "start positions",
                ConfigurationFailure.INVALID_POSITION,
            )

            rotors = [
                self.catalog.rotor(name, ring_setting=ring, position=pos)
                for name, ring, pos in zip(names, rings, positions)
            ]
            refl: Reflector = self.catalog.reflector(reflector)

            if isinstance(plugboard_pairs, str):
                plugboard_pairs = plugboard_pairs.split()
            plugboard = Plugboard(plugboard_pairs)

            assembly = RotorAssembly(rotors, refl)
            settings = MachineSettings(
                rotors=[r.name for r in rotors],
                reflector=refl.name,
                ring_settings=rings,
                positions=positions,
                plugboard=plugboard.pairs,
            )

            self._plugboard = plugboard
            self._assembly = assembly
            self._settings = settings

            self.logger.info("Configured %s", settings.describe())
            return settings

    @staticmethod
    def _coerce_offsets(
        values: Optional[OffsetsLike],
        count: int,
        label: str,
        reason: ConfigurationFailure,
    ) -> list[int]:
        if values is None:
            return [0] * count
        items = list(values.strip()) if isinstance(values, str) else list(values)
        if len(items) != count:
            raise InvalidConfiguration(
                f"{count} rotors but {len(items)} {label}",
                ConfigurationFailure.ROTOR_COUNT_MISMATCH,
            )
        offsets: list[int] = []
        for item in items:
            try:
                offsets.append(alphabet.coerce_offset(item))
            except ValueError as exc:
                raise InvalidConfiguration(f"Invalid {label}: {exc}", reason) from exc
        return offsets

    # ------------------------------------------------------------------ #
    #  Cipher operations
    # ------------------------------------------------------------------ #

    def _require(self) -> tuple[Plugboard, RotorAssembly]:
        if self._assembly is None or self._plugboard is None:
            raise MachineNotConfigured()
        return self._plugboard, self._assembly

    def encode_char(self, char: str) -> str:
        """Press one key and return the lamp that lights.

        Raises:
            InvalidCharacter: If *char* is not a single letter A-Z. Lower
                case letters are accepted; nothing else is stripped.
            MachineNotConfigured: Before :meth:`configure`.
        """
        plugboard, assembly = self._require()
        offset = alphabet.to_offset(char)

        assembly.step()
        if self.logger.is_enabled_for(logging.DEBUG):
            self.logger.debug(
                "Key %s, rotors at %s", char.upper(), self._window(assembly)
            )

        offset = plugboard.swap(offset)
        offset = assembly.process(offset)
        offset = plugboard.swap(offset)
        return alphabet.from_offset(offset)

    def encode_message(self, message: str) -> str:
        """Encode (equivalently, decode) *message* one letter at a time.

        The input is not normalised: any non-letter raises
        :class:`InvalidCharacter` and the rotors keep the positions reached
        before the offending symbol.
        """
        return "".join(self.encode_char(ch) for ch in message)

    decode_message = encode_message

    # ------------------------------------------------------------------ #
    #  Rotor positions
    # ------------------------------------------------------------------ #

    def get_positions(self) -> list[int]:
        """Snapshot of rotor positions, left-to-right."""
        _, assembly = self._require()
        return assembly.positions

    def get_position_letters(self) -> str:
        """Rotor window letters, left-to-right (``"ADU"``)."""
        _, assembly = self._require()
        return self._window(assembly)

    def set_positions(self, positions: OffsetsLike) -> None:
        """Turn the rotors to *positions* (integers 0-25 or letters).

        Raises:
            InvalidConfiguration: On a count mismatch or an invalid value.
        """
        _, assembly = self._require()
        offsets = self._coerce_offsets(
            positions, len(assembly), "positions",
            ConfigurationFailure.INVALID_POSITION,
        )
        assembly.set_positions(offsets)

    def reset(self) -> None:
        """Return the rotors to the configured start positions."""
        _, assembly = self._require()
        assembly.set_positions(self.settings.positions)

    def stepping_preview(self) -> tuple[list[bool], list[bool]]:
        """Which rotors the next keypress moves, and which of those double-step."""
        _, assembly = self._require()
        return assembly.stepping_plan(), assembly.double_stepping()

    @staticmethod
    def _window(assembly: RotorAssembly) -> str:
        return "".join(alphabet.from_offset(p) for p in assembly.positions)

    # ------------------------------------------------------------------ #
    #  Introspection
    # ------------------------------------------------------------------ #

    @property
    def settings(self) -> MachineSettings:
        if self._settings is None:
            raise MachineNotConfigured()
        return self._settings

    @property
    def plugboard(self) -> Plugboard:
        return self._require()[0]

    @property
    def assembly(self) -> RotorAssembly:
        return self._require()[1]

    @property
    def reflector(self) -> Reflector:
        return self._require()[1].reflector

    def __repr__(self) -> str:
        if self._settings is None:
            return "<Machine unconfigured>"
        return f"<Machine {self._settings.describe()} window={self._window(self.assembly)}>"
