"""
Enigma Parsers
===============

Input parsing for key-sheet style settings strings.
"""

from enigma.parsers.settings_parser import SettingsParser

__all__ = ["SettingsParser"]
