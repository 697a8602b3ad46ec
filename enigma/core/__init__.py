"""
Enigma Core Module
===================

The machine, its configuration catalog, error types and result models,
plus the engine facade used by front ends.
"""

from enigma.core.catalog import ReflectorSpec, RotorCatalog, RotorSpec
from enigma.core.engine import EnigmaEngine
from enigma.core.errors import (
    ConfigurationFailure,
    EnigmaError,
    InvalidCharacter,
    InvalidConfiguration,
    InvalidPlugboardPairing,
    InvalidReflectorWiring,
    InvalidRotorWiring,
    MachineNotConfigured,
)
from enigma.core.keygen import KeySheetGenerator
from enigma.core.machine import Machine
from enigma.core.models import EncodeResult, KeypressRecord, MachineSettings, StepTrace

__all__ = [
    "ConfigurationFailure",
    "EncodeResult",
    "EnigmaEngine",
    "EnigmaError",
    "InvalidCharacter",
    "InvalidConfiguration",
    "InvalidPlugboardPairing",
    "InvalidReflectorWiring",
    "InvalidRotorWiring",
    "KeySheetGenerator",
    "KeypressRecord",
    "Machine",
    "MachineNotConfigured",
    "MachineSettings",
    "ReflectorSpec",
    "RotorCatalog",
    "RotorSpec",
    "StepTrace",
]
