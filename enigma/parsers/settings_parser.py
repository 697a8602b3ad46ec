"""
Settings Parser
================

Turns the free-text notation found on key sheets and typed into forms into
the structured arguments of :meth:`Machine.configure`.

Supported notations:
    - Rotor order: ``"I II III"``, ``"I-II-III"``, ``"I,II,III"``
    - Ring settings / positions: ``"AAA"``, ``"A A A"``, ``"01 13 22"``,
      ``"1-13-22"``. Numbers are 1-based as engraved on the wheels
      (``01`` is ``A``).
    - Plugboard: ``"AB CD EF"``, ``"AB,CD,EF"``

Malformed input raises the same tagged errors the machine raises, so a
caller handles one error family regardless of where validation failed.
"""

from __future__ import annotations

import re
from typing import Optional

from enigma.core import alphabet
from enigma.core.errors import (
    ConfigurationFailure,
    InvalidConfiguration,
    InvalidPlugboardPairing,
)

_SEPARATORS = re.compile(r"[\s,;\-/.]+")
_PAIR_SEPARATORS = re.compile(r"[\s,;]+")


class SettingsParser:
    """Parser for key-sheet style machine settings.

    Usage::

        parser = SettingsParser()
        parser.rotors("II-IV-V")           # ['II', 'IV', 'V']
        parser.offsets("02 21 12")         # [1, 20, 11]
        parser.plugboard("AV BS CG")       # ['AV', 'BS', 'CG']
    """

    def rotors(self, text: str) -> list[str]:
        """Split a rotor order into upper-case type names."""
        names = [tok.upper() for tok in _SEPARATORS.split(text.strip()) if tok]
        if not names:
            raise InvalidConfiguration(
                "No rotors given", ConfigurationFailure.EMPTY_ASSEMBLY
            )
        return names

    def offsets(
        self,
        text: Optional[str],
        reason: ConfigurationFailure = ConfigurationFailure.INVALID_POSITION,
    ) -> Optional[list[int]]:
        """Parse ring settings or positions into offsets 0-25.

        Returns ``None`` for empty input so the machine applies its default.
        """
        if text is None or not text.strip():
            return None

        tokens = [tok for tok in _SEPARATORS.split(text.strip()) if tok]
        if all(tok.isdigit() for tok in tokens):
            return [self._number(tok, reason) for tok in tokens]

        letters = "".join(tokens)
        result: list[int] = []
        for ch in letters:
            if not alphabet.is_letter(ch):
                raise InvalidConfiguration(
                    f"{text!r}: {ch!r} is neither a letter A-Z nor a number", reason
                )
            result.append(alphabet.to_offset(ch))
        return result

    def ring_settings(self, text: Optional[str]) -> Optional[list[int]]:
        return self.offsets(text, ConfigurationFailure.INVALID_RING_SETTING)

    def positions(self, text: Optional[str]) -> Optional[list[int]]:
        return self.offsets(text, ConfigurationFailure.INVALID_POSITION)

    @staticmethod
    def _number(token: str, reason: ConfigurationFailure) -> int:
        value = int(token)
        if not 1 <= value <= alphabet.SIZE:
            raise InvalidConfiguration(
                f"Wheel number {token} outside 01-{alphabet.SIZE}", reason
            )
        return value - 1

    def plugboard(self, text: Optional[str]) -> list[str]:
        """Split plugboard notation into 2-letter pair strings.

        Only the notation is checked here (every token has two symbols);
        the :class:`Plugboard` validates letters and duplicates.
        """
        if text is None or not text.strip():
            return []
        pairs = [tok.upper() for tok in _PAIR_SEPARATORS.split(text.strip()) if tok]
        for pair in pairs:
            if len(pair) != 2:
                raise InvalidPlugboardPairing(
                    f"Plugboard pairs must be exactly 2 letters; {pair!r} is invalid"
                )
        return pairs
