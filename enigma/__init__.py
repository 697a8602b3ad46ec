"""
RotorCore Enigma -- Rotor Cipher Machine Simulator
===================================================

Simulates the Enigma cipher machine: rotors with ring settings and
turnover notches, the double-stepping mechanism, a reflector and a
plugboard, composed into a reciprocal letter cipher.

Modules:
    - enigma.components: Wiring, rotor, reflector, plugboard, rotor assembly
    - enigma.core.machine: Configurable machine and public cipher API
    - enigma.core.engine: Facade used by front ends
    - enigma.parsers: Key-sheet notation parsing
    - enigma.output: Rich console output
    - enigma.cli: Click-based command-line interface

References:
    - Hamer, D. H. (1997). Enigma: Actions Involved in the 'Double Stepping'
      of the Middle Rotor. Cryptologia, 21(1), 47-50.
    - Rejewski, M. (1980). An Application of the Theory of Permutations in
      Breaking the Enigma Cipher. Applicationes Mathematicae, 16(4).
"""

from enigma.core.machine import Machine

__version__ = "1.0.0"
__tool_name__ = "enigma"

__all__ = ["Machine"]
