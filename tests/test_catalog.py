"""Tests for the rotor catalog and the key sheet generator."""

from __future__ import annotations

import pytest

from enigma.core.catalog import RotorCatalog
from enigma.core.errors import (
    ConfigurationFailure,
    InvalidConfiguration,
    InvalidReflectorWiring,
    InvalidRotorWiring,
)
from enigma.core.keygen import KeySheetGenerator


class TestCatalog:
    def test_default_wheel_set(self, catalog):
        assert catalog.rotor_names() == ["I", "II", "III", "IV", "V", "VI", "VII", "VIII"]
        assert catalog.reflector_names() == ["A", "B", "C"]
        assert catalog.rotor_spec("VI").notches == "ZM"

    def test_lookup_is_case_insensitive(self, catalog):
        assert catalog.rotor("iii", position=21).window == "V"
        assert catalog.reflector(" b ").name == "B"
        assert "ii" in catalog
        assert "IX" not in catalog

    def test_unknown_names(self, catalog):
        with pytest.raises(InvalidConfiguration) as excinfo:
            catalog.rotor("IX")
        assert excinfo.value.reason is ConfigurationFailure.UNKNOWN_ROTOR
        with pytest.raises(InvalidConfiguration) as excinfo:
            catalog.reflector("D")
        assert excinfo.value.reason is ConfigurationFailure.UNKNOWN_REFLECTOR

    def test_rotors_are_independent(self, catalog):
        a = catalog.rotor("I")
        b = catalog.rotor("I")
        a.advance()
        assert b.position == 0

    def test_register_custom_types(self):
        catalog = RotorCatalog(include_defaults=False)
        spec = catalog.register_rotor("x", "qwertzuioasdfghjkpyxcvbnml", "a")
        assert spec.name == "X"
        assert spec.wiring == "QWERTZUIOASDFGHJKPYXCVBNML"
        catalog.register_reflector("ukw", "BADCFEHGJILKNMPORQTSVUXWZY")
        assert catalog.rotor_names() == ["X"]
        assert catalog.reflector_names() == ["UKW"]

    def test_register_rejects_bad_wiring(self, catalog):
        with pytest.raises(InvalidRotorWiring):
            catalog.register_rotor("X", "ABC")
        with pytest.raises(InvalidReflectorWiring):
            catalog.register_reflector("Y", "EKMFLGDQVZNTOWYHXUSPAIBRCJ")
        assert "X" not in catalog
        assert "Y" not in catalog.reflector_names()

    def test_from_tables(self):
        catalog = RotorCatalog.from_tables(
            {"X": {"wiring": "QWERTZUIOASDFGHJKPYXCVBNML", "notches": "AN"}},
            {"T": {"wiring": "BADCFEHGJILKNMPORQTSVUXWZY"}},
        )
        assert catalog.rotor_spec("X").notches == "AN"
        assert catalog.rotor_spec("X").description == "custom"
        assert "T" in catalog.reflector_names()
        assert "I" in catalog


class TestKeySheetGenerator:
    def test_same_seed_same_sheet(self):
        generator = KeySheetGenerator()
        assert generator.generate(1939) == generator.generate(1939)

    def test_sheet_shape(self):
        settings = KeySheetGenerator(rotor_count=4, plug_count=10).generate(7)
        assert len(settings.rotors) == 4
        assert len(set(settings.rotors)) == 4
        assert len(settings.ring_settings) == 4
        assert all(0 <= p < 26 for p in settings.positions)
        assert len(settings.plugboard) == 10
        letters = "".join(settings.plugboard)
        assert len(set(letters)) == 20
        assert settings.plugboard == sorted(settings.plugboard)

    def test_no_plugs(self):
        assert KeySheetGenerator(plug_count=0).generate(3).plugboard == []

    def test_generated_settings_configure_a_machine(self):
        from enigma.core.machine import Machine

        settings = KeySheetGenerator(plug_count=13).generate(42)
        machine = Machine()
        machine.configure(
            settings.rotors,
            settings.ring_settings,
            settings.positions,
            settings.plugboard,
            reflector=settings.reflector,
        )
        assert machine.settings == settings

    @pytest.mark.parametrize(
        "kwargs, reason",
        [
            (dict(rotor_count=9), ConfigurationFailure.ROTOR_COUNT_MISMATCH),
            (dict(rotor_count=0), ConfigurationFailure.ROTOR_COUNT_MISMATCH),
            (dict(plug_count=14), ConfigurationFailure.INVALID_PLUGBOARD),
        ],
    )
    def test_rejects_impossible_sheets(self, kwargs, reason):
        with pytest.raises(InvalidConfiguration) as excinfo:
            KeySheetGenerator(**kwargs)
        assert excinfo.value.reason is reason


@pytest.mark.parametrize(
    "rotors, reflectors, error",
    [
        ({"X": {"notches": "A"}}, None, InvalidRotorWiring),
        ({"X": "QWERTZUIOASDFGHJKPYXCVBNML"}, None, InvalidRotorWiring),
        (None, {"T": {"description": "no wiring"}}, InvalidReflectorWiring),
    ],
)
def test_from_tables_requires_wiring(rotors, reflectors, error):
    with pytest.raises(error, match="wiring"):
        RotorCatalog.from_tables(rotors, reflectors)
