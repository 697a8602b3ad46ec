"""Tests for the key-sheet settings parser."""

from __future__ import annotations

import pytest

from enigma.core.errors import (
    ConfigurationFailure,
    InvalidConfiguration,
    InvalidPlugboardPairing,
)
from enigma.parsers.settings_parser import SettingsParser


@pytest.fixture
def parser() -> SettingsParser:
    return SettingsParser()


@pytest.mark.parametrize("text", ["I II III", "i-ii-iii", "I,II,III", " I / II / III "])
def test_rotor_orders(parser, text):
    assert parser.rotors(text) == ["I", "II", "III"]


def test_empty_rotor_order(parser):
    with pytest.raises(InvalidConfiguration) as excinfo:
        parser.rotors(" - ")
    assert excinfo.value.reason is ConfigurationFailure.EMPTY_ASSEMBLY


@pytest.mark.parametrize(
    "text, expected",
    [
        ("AAA", [0, 0, 0]),
        ("bul", [1, 20, 11]),
        ("B U L", [1, 20, 11]),
        ("02 21 12", [1, 20, 11]),
        ("2-21-12", [1, 20, 11]),
        ("26", [25]),
    ],
)
def test_offsets(parser, text, expected):
    assert parser.offsets(text) == expected


@pytest.mark.parametrize("text", [None, "", "   "])
def test_empty_offsets_mean_default(parser, text):
    assert parser.positions(text) is None


def test_offset_errors_carry_reason(parser):
    with pytest.raises(InvalidConfiguration) as excinfo:
        parser.ring_settings("00 01 01")
    assert excinfo.value.reason is ConfigurationFailure.INVALID_RING_SETTING

    with pytest.raises(InvalidConfiguration) as excinfo:
        parser.positions("27")
    assert excinfo.value.reason is ConfigurationFailure.INVALID_POSITION

    with pytest.raises(InvalidConfiguration) as excinfo:
        parser.positions("A1B")
    assert excinfo.value.reason is ConfigurationFailure.INVALID_POSITION


@pytest.mark.parametrize(
    "text, expected",
    [
        ("AV BS CG", ["AV", "BS", "CG"]),
        ("av,bs;cg", ["AV", "BS", "CG"]),
        ("", []),
        (None, []),
    ],
)
def test_plugboard(parser, text, expected):
    assert parser.plugboard(text) == expected


def test_plugboard_notation_errors(parser):
    with pytest.raises(InvalidPlugboardPairing):
        parser.plugboard("AB C")
    with pytest.raises(InvalidPlugboardPairing):
        parser.plugboard("ABC")
