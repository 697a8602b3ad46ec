"""Tests for the click command-line front end."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from enigma.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_quiet_encode_prints_grouped_output(runner):
    result = runner.invoke(cli, ["-q", "encode", "AAAAA", "--plugboard", ""], obj={})
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "BDZGO"


def test_encode_decode_round_trip(runner):
    args = ["-q", "encode", "--rotors", "II IV V", "--rings", "BUL",
            "--positions", "BLA", "--plugboard", "AV BS CG DL FU"]
    first = runner.invoke(cli, args[:2] + ["Funkspruch"] + args[2:], obj={})
    assert first.exit_code == 0, first.output
    ciphertext = first.output.strip().replace(" ", "")

    second = runner.invoke(cli, args[:2] + [ciphertext] + args[2:], obj={})
    assert second.output.strip().replace(" ", "") == "FUNKSPRUCH"


def test_json_output(runner):
    result = runner.invoke(
        cli, ["-o", "json", "encode", "AAAAA", "--plugboard", ""], obj={}
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["output_text"] == "BDZGO"
    assert payload["settings"]["rotors"] == ["I", "II", "III"]
    assert payload["end_positions"] == "AAF"


def test_console_output(runner):
    result = runner.invoke(cli, ["encode", "Attack at dawn"], obj={})
    assert result.exit_code == 0, result.output
    assert "Machine Settings" in result.output
    assert "Rotor Window" in result.output


def test_invalid_plugboard_exits_non_zero(runner):
    result = runner.invoke(cli, ["-q", "encode", "HELLO", "--plugboard", "AA"], obj={})
    assert result.exit_code == 1
    assert "itself" in result.output


def test_unknown_rotor_exits_non_zero(runner):
    result = runner.invoke(cli, ["-q", "encode", "HELLO", "--rotors", "I II IX"], obj={})
    assert result.exit_code == 1
    assert "unknown_rotor" in result.output


def test_trace_json(runner):
    result = runner.invoke(
        cli,
        ["-o", "json", "trace", "--positions", "ADU", "--count", "4", "--plugboard", ""],
        obj={},
    )
    assert result.exit_code == 0, result.output
    records = json.loads(result.stdout)["records"]
    assert [r["positions_after"] for r in records] == ["ADV", "AEW", "BFX", "BFY"]
    assert records[2]["double_stepped"] == [False, True, False]


def test_catalog_json(runner):
    result = runner.invoke(cli, ["-o", "json", "catalog"], obj={})
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert [r["name"] for r in payload["reflectors"]] == ["A", "B", "C"]
    assert payload["rotors"][0]["notches"] == "Q"


def test_keygen_seed_is_reproducible(runner):
    first = runner.invoke(cli, ["-q", "keygen", "--seed", "1939"], obj={})
    second = runner.invoke(cli, ["-q", "keygen", "--seed", "1939"], obj={})
    assert first.exit_code == 0, first.output
    assert first.output == second.output
    assert len(first.output.split()) == 4 + 10


def test_config_file_option(runner, tmp_path):
    path = tmp_path / "machine.toml"
    path.write_text('[enigma]\nplugboard = []\n', encoding="utf-8")
    result = runner.invoke(cli, ["-q", "-c", str(path), "encode", "AAAAA"], obj={})
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "BDZGO"


@pytest.mark.parametrize(
    "table",
    [
        '[enigma.custom_rotors.X]\nwiring = "ABC"\n',
        '[enigma.custom_rotors.X]\nnotches = "A"\n',
        '[enigma.custom_reflectors.T]\nwiring = "EKMFLGDQVZNTOWYHXUSPAIBRCJ"\n',
    ],
)
def test_invalid_custom_wheel_in_config(runner, tmp_path, table):
    path = tmp_path / "bad.toml"
    path.write_text(table, encoding="utf-8")
    result = runner.invoke(cli, ["-c", str(path), "catalog"], obj={})
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "wiring" in result.output
