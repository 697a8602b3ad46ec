"""Tests for the engine facade, its result models and the console output."""

from __future__ import annotations

import pytest

from shared.config import RotorConfig
from shared.console import RotorConsole

from enigma.core.engine import EnigmaEngine
from enigma.core.errors import InvalidCharacter, InvalidConfiguration
from enigma.output.console import EnigmaConsoleOutput


@pytest.fixture
def engine() -> EnigmaEngine:
    return EnigmaEngine()


@pytest.fixture
def bare_settings(engine):
    return engine.settings_from_text(plugboard="")


def test_default_settings_follow_config(engine):
    settings = engine.default_settings()
    assert settings.rotors == ["I", "II", "III"]
    assert settings.reflector == "B"
    assert settings.position_letters == "AAA"
    assert settings.plugboard == ["AB", "CD"]
    assert settings.describe() == "B I-II-III AAA AAA AB CD"


def test_settings_from_text_overrides(engine):
    settings = engine.settings_from_text(
        rotors="II-IV-V", reflector="c", ring_settings="02 21 12",
        positions="BLA", plugboard="av bs",
    )
    assert settings.rotors == ["II", "IV", "V"]
    assert settings.reflector == "C"
    assert settings.ring_letters == "BUL"
    assert settings.plugboard == ["AV", "BS"]


def test_settings_from_text_validates(engine):
    with pytest.raises(InvalidConfiguration):
        engine.settings_from_text(rotors="I II", positions="AAA")


def test_encode_text_golden(engine, bare_settings):
    result = engine.encode_text("aaaaa", bare_settings)
    assert result.output_text == "BDZGO"
    assert result.grouped_output == "BDZGO"
    assert result.character_count == 5
    assert result.start_positions == "AAA"
    assert result.end_positions == "AAF"


def test_encode_text_strips_and_round_trips(engine):
    settings = engine.default_settings()
    first = engine.encode_text("Hello, World!", settings)
    assert first.processed_text == "HELLOWORLD"
    assert len(first.output_text) == 10
    assert first.grouped_output == f"{first.output_text[:5]} {first.output_text[5:]}"

    second = engine.encode_text(first.output_text, settings)
    assert second.output_text == "HELLOWORLD"


def test_encode_text_without_stripping():
    config = RotorConfig()
    config.enigma.strip_invalid = False
    engine = EnigmaEngine(config)
    with pytest.raises(InvalidCharacter):
        engine.encode_text("HELLO WORLD")


def test_each_call_starts_from_configured_positions(engine, bare_settings):
    assert engine.encode_text("AAAAA", bare_settings).output_text == "BDZGO"
    assert engine.encode_text("AAAAA", bare_settings).output_text == "BDZGO"


def test_trace_marks_double_step(engine):
    settings = engine.settings_from_text(positions="ADU", plugboard="")
    trace = engine.trace_stepping("AAAA", settings)
    assert [r.positions_after for r in trace.records] == ["ADV", "AEW", "BFX", "BFY"]
    assert trace.double_steps == [3]
    assert trace.records[2].stepped == [True, True, True]
    assert trace.records[0].positions_before == "ADU"


def test_generate_settings_is_reproducible(engine):
    first = engine.generate_settings(1939, plug_count=6)
    assert first == engine.generate_settings(1939, plug_count=6)
    assert len(first.plugboard) == 6


def test_custom_rotor_from_config():
    config = RotorConfig()
    config.enigma.custom_rotors = {
        "X": {"wiring": "QWERTZUIOASDFGHJKPYXCVBNML", "notches": "A"},
    }
    engine = EnigmaEngine(config)
    rotors, reflectors = engine.list_catalog()
    assert "X" in [r.name for r in rotors]
    settings = engine.settings_from_text(rotors="X II III")
    ciphertext = engine.encode_text("WETTERBERICHT", settings).output_text
    assert engine.encode_text(ciphertext, settings).output_text == "WETTERBERICHT"


def test_settings_serialise(engine):
    dumped = engine.default_settings().model_dump()
    assert dumped == {
        "rotors": ["I", "II", "III"],
        "reflector": "B",
        "ring_settings": [0, 0, 0],
        "positions": [0, 0, 0],
        "plugboard": ["AB", "CD"],
    }


class TestConsoleOutput:
    @pytest.fixture
    def output(self) -> EnigmaConsoleOutput:
        return EnigmaConsoleOutput(RotorConsole(record=True))

    def test_result_panel(self, engine, output):
        result = engine.encode_text("Attack at dawn", engine.default_settings())
        output.display_settings(result.settings)
        output.display_result(result)
        output.display_window(result.end_positions)
        text = output.console.export_text()
        assert result.grouped_output in text
        assert "Non-letter characters were removed" in text

    def test_trace_table(self, engine, output):
        settings = engine.settings_from_text(positions="ADU", plugboard="")
        output.display_trace(engine.trace_stepping("AAAA", settings))
        text = output.console.export_text()
        assert "double step" in text
        assert "BFX" in text

    def test_catalog_tables(self, engine, output):
        output.display_catalog(*engine.list_catalog())
        text = output.console.export_text()
        assert "EKMFLGDQVZNTOWYHXUSPAIBRCJ" in text
        assert "YRUHQSLDPXNGOKMIEBFZCWVJAT" in text


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_positions_use_configured_defaults(blank):
    config = RotorConfig()
    config.enigma.ring_settings = "BUL"
    config.enigma.positions = "ADU"
    engine = EnigmaEngine(config)
    settings = engine.settings_from_text(ring_settings=blank, positions=blank)
    assert settings.ring_letters == "BUL"
    assert settings.position_letters == "ADU"
