"""Shared fixtures for the Enigma test suite."""

from __future__ import annotations

import pytest

from enigma.components.plugboard import Plugboard
from enigma.core.catalog import RotorCatalog
from enigma.core.machine import Machine


@pytest.fixture
def catalog() -> RotorCatalog:
    return RotorCatalog()


@pytest.fixture
def machine() -> Machine:
    """Enigma I: rotors I-II-III, reflector B, rings AAA, start AAA, no plugs."""
    m = Machine()
    m.configure(["I", "II", "III"], "AAA", "AAA", [])
    return m


@pytest.fixture
def plugged_machine() -> Machine:
    m = Machine()
    m.configure(["II", "IV", "V"], [1, 20, 11], "BLA", ["AV", "BS", "CG", "DL", "FU"])
    return m


@pytest.fixture
def empty_board() -> Plugboard:
    return Plugboard()
