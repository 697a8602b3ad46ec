"""
Enigma Output Module
=====================

Console display of settings, results and stepping traces.
"""

from enigma.output.console import EnigmaConsoleOutput

__all__ = ["EnigmaConsoleOutput"]
