"""
Enigma Components
==================

The mechanical parts of the machine. Each component owns one piece of the
signal path and knows nothing about the others except through the
assembly.
"""

from enigma.components.assembly import RotorAssembly
from enigma.components.plugboard import Plugboard
from enigma.components.reflector import Reflector
from enigma.components.rotor import Rotor
from enigma.components.wiring import Wiring

__all__ = [
    "Plugboard",
    "Reflector",
    "Rotor",
    "RotorAssembly",
    "Wiring",
]
