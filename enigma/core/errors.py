"""
Enigma Error Hierarchy
=======================

Exceptions raised by the Enigma cipher engine. Every error is a caller-input
error: validation happens eagerly when the machine is configured or when a
character is encoded, and nothing is ever silently corrected.

Configuration failures are tagged with a :class:`ConfigurationFailure`
variant so that callers can tell *why* a configuration was rejected without
parsing the message text.

Hierarchy::

    EnigmaError (ValueError)
    +-- InvalidCharacter
    +-- MachineNotConfigured
    +-- InvalidConfiguration
        +-- InvalidPlugboardPairing
        +-- InvalidReflectorWiring
        +-- InvalidRotorWiring
"""

from __future__ import annotations

import enum
from typing import Optional


class ConfigurationFailure(str, enum.Enum):
    """Which sub-validation of a machine configuration failed."""

    ROTOR_COUNT_MISMATCH = "rotor_count_mismatch"
    EMPTY_ASSEMBLY = "empty_assembly"
    UNKNOWN_ROTOR = "unknown_rotor"
    UNKNOWN_REFLECTOR = "unknown_reflector"
    INVALID_RING_SETTING = "invalid_ring_setting"
    INVALID_POSITION = "invalid_position"
    INVALID_PLUGBOARD = "invalid_plugboard"
    INVALID_REFLECTOR_WIRING = "invalid_reflector_wiring"
    INVALID_ROTOR_WIRING = "invalid_rotor_wiring"


class EnigmaError(ValueError):
    """Base class for all Enigma engine errors."""


class InvalidCharacter(EnigmaError):
    """A symbol outside the 26-letter alphabet was submitted for encoding.

    Attributes:
        character: The offending input symbol.
    """

    def __init__(self, character: object) -> None:
        self.character = character
        super().__init__(
            f"Invalid character {character!r}: expected a single letter A-Z"
        )


class MachineNotConfigured(EnigmaError):
    """The machine was used before :meth:`Machine.configure` succeeded."""

    def __init__(self) -> None:
        super().__init__("Machine is not configured; call configure() first")


class InvalidConfiguration(EnigmaError):
    """A configuration request was rejected.

    Attributes:
        reason: Tag naming the sub-validation that failed.
        detail: Human-readable explanation.
    """

    default_reason: Optional[ConfigurationFailure] = None

    def __init__(
        self,
        detail: str,
        reason: Optional[ConfigurationFailure] = None,
    ) -> None:
        resolved = reason or self.default_reason
        if resolved is None:
            raise TypeError("InvalidConfiguration requires a reason")
        self.reason: ConfigurationFailure = resolved
        self.detail = detail
        super().__init__(f"[{resolved.value}] {detail}")


class InvalidPlugboardPairing(InvalidConfiguration):
    """Malformed, duplicate, self-referential or out-of-alphabet plug pair."""

    default_reason = ConfigurationFailure.INVALID_PLUGBOARD


class InvalidReflectorWiring(InvalidConfiguration):
    """Reflector wiring is not a fixed-point-free involution."""

    default_reason = ConfigurationFailure.INVALID_REFLECTOR_WIRING


class InvalidRotorWiring(InvalidConfiguration):
    """Rotor wiring is not a permutation of the alphabet, or a notch is invalid."""

    default_reason = ConfigurationFailure.INVALID_ROTOR_WIRING
