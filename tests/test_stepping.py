"""Stepping mechanism tests, driven keypress by keypress on position sequences."""

from __future__ import annotations

import pytest

from enigma.components.assembly import RotorAssembly
from enigma.core import alphabet
from enigma.core.catalog import RotorCatalog
from enigma.core.errors import ConfigurationFailure, InvalidConfiguration


def build(names: str, positions: str) -> RotorAssembly:
    catalog = RotorCatalog()
    rotors = [
        catalog.rotor(name, position=alphabet.to_offset(pos))
        for name, pos in zip(names.split(), positions)
    ]
    return RotorAssembly(rotors, catalog.reflector("B"))


def window(assembly: RotorAssembly) -> str:
    return "".join(alphabet.from_offset(p) for p in assembly.positions)


def press(assembly: RotorAssembly, times: int) -> list[str]:
    seen = []
    for _ in range(times):
        assembly.step()
        seen.append(window(assembly))
    return seen


def test_double_step_sequence():
    # III turns over at V, II at E: the middle rotor moves on two
    # consecutive keypresses and takes the left rotor with it.
    assembly = build("I II III", "ADU")
    assert press(assembly, 5) == ["ADV", "AEW", "BFX", "BFY", "BFZ"]


def test_double_step_is_reported_before_it_happens():
    assembly = build("I II III", "AEW")
    assert assembly.stepping_plan() == [True, True, True]
    assert assembly.double_stepping() == [False, True, False]


def test_right_rotor_always_advances():
    assembly = build("I II III", "AAA")
    rights = [p[2] for p in press(assembly, 30)]
    assert rights == [alphabet.from_offset(i) for i in range(1, 31)]


def test_one_revolution_of_right_rotor_moves_middle_once():
    assembly = build("I II III", "AAA")
    positions = press(assembly, 26)
    assert positions[20] == "AAV"
    assert positions[21] == "ABW"
    assert positions[-1] == "ABA"


def test_full_period_returns_to_start():
    # 26 * 25 * 26: the double step removes one middle position per cycle
    assembly = build("I II III", "AAA")
    for _ in range(16_900):
        assembly.step()
    assert window(assembly) == "AAA"


def test_period_is_not_shorter():
    assembly = build("I II III", "AAA")
    seen = {window(assembly)}
    for _ in range(16_899):
        assembly.step()
        seen.add(window(assembly))
    assert len(seen) == 16_900


def test_left_rotor_ignores_its_own_notch():
    assembly = build("I II III", "QAA")
    assert press(assembly, 1) == ["QAB"]


def test_triggers_do_not_cascade():
    # Middle and right both at their notches: every rotor moves exactly once.
    assembly = build("I II III", "AEV")
    assert press(assembly, 1) == ["BFW"]


def test_two_rotor_assembly():
    assert press(build("I III", "AV"), 1) == ["BW"]
    assert press(build("I III", "QA"), 1) == ["QB"]


def test_four_rotor_inner_double_step():
    assembly = build("I II III IV", "AEAA")
    assert press(assembly, 1) == ["BFAB"]


def test_two_notch_rotor_turns_over_twice():
    assembly = build("I II VI", "AAL")
    positions = press(assembly, 26)
    assert positions[0] == "AAM"
    assert positions[1] == "ABN"
    assert positions[13] == "ABZ"
    assert positions[14] == "ACA"


def test_single_rotor_assembly():
    assembly = build("I", "Z")
    assert press(assembly, 2) == ["A", "B"]


def test_step_returns_plan():
    assembly = build("I II III", "ADV")
    assert assembly.step() == [False, True, True]


def test_set_positions_checks_count():
    assembly = build("I II III", "AAA")
    assembly.set_positions([1, 2, 3])
    assert window(assembly) == "BCD"
    with pytest.raises(InvalidConfiguration) as excinfo:
        assembly.set_positions([1, 2])
    assert excinfo.value.reason is ConfigurationFailure.ROTOR_COUNT_MISMATCH


def test_empty_assembly_rejected(catalog):
    with pytest.raises(InvalidConfiguration) as excinfo:
        RotorAssembly([], catalog.reflector("B"))
    assert excinfo.value.reason is ConfigurationFailure.EMPTY_ASSEMBLY


def test_process_has_no_side_effects():
    assembly = build("I II III", "ADU")
    before = assembly.positions
    outputs = {assembly.process(i) for i in range(26)}
    assert assembly.positions == before
    assert outputs == set(range(26))
