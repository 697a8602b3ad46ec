"""
Enigma Core Data Models
========================

Pydantic models describing a machine configuration and the results the
engine hands to its callers. The models are snapshots: validation of the
machine itself is done by :meth:`Machine.configure`, which raises the
tagged errors of :mod:`enigma.core.errors`; these records only carry the
already-validated values to the output layer and to JSON.

References:
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from enigma.core import alphabet


# ===================================================================== #
#  Configuration snapshot
# ===================================================================== #


class MachineSettings(BaseModel):
    """Immutable record of how a machine was configured.

    Attributes:
        rotors: Rotor type names, left-to-right as installed.
        reflector: Reflector type name.
        ring_settings: Ring offsets 0-25, one per rotor.
        positions: Start positions 0-25, one per rotor.
        plugboard: Plug pairs as upper-case 2-letter strings.
    """

    model_config = ConfigDict(frozen=True)

    rotors: list[str] = Field(..., min_length=1)
    reflector: str = "B"
    ring_settings: list[int] = Field(default_factory=list)
    positions: list[int] = Field(default_factory=list)
    plugboard: list[str] = Field(default_factory=list)

    @field_validator("rotors", "plugboard", mode="before")
    @classmethod
    def _upper_names(cls, v: list[str]) -> list[str]:
        return [str(item).strip().upper() for item in v]

    @field_validator("reflector", mode="before")
    @classmethod
    def _upper_reflector(cls, v: str) -> str:
        return str(v).strip().upper()

    @property
    def ring_letters(self) -> str:
        return "".join(alphabet.from_offset(r) for r in self.ring_settings)

    @property
    def position_letters(self) -> str:
        return "".join(alphabet.from_offset(p) for p in self.positions)

    def describe(self) -> str:
        """One-line key-sheet style summary, e.g. ``B I-II-III AAA AAA AB CD``."""
        plugs = " ".join(self.plugboard) or "-"
        return (
            f"{self.reflector} {'-'.join(self.rotors)} "
            f"{self.ring_letters} {self.position_letters} {plugs}"
        )


# ===================================================================== #
#  Results
# ===================================================================== #


class EncodeResult(BaseModel):
    """Outcome of running a message through the machine.

    Attributes:
        input_text: Text as supplied by the caller.
        processed_text: Letters actually fed to the machine.
        output_text: Machine output, ungrouped.
        grouped_output: Output split into fixed-size blocks for display.
        character_count: Number of keypresses.
        settings: Configuration the run started from.
        start_positions: Window letters before the first keypress.
        end_positions: Window letters after the last keypress.
    """

    input_text: str
    processed_text: str
    output_text: str
    grouped_output: str = ""
    character_count: int = 0
    settings: MachineSettings
    start_positions: str
    end_positions: str


class KeypressRecord(BaseModel):
    """Rotor movement and output for a single keypress.

    Attributes:
        index: 1-based keypress number.
        key: Letter pressed.
        output: Letter lit on the lampboard.
        positions_before: Window letters before stepping.
        positions_after: Window letters after stepping.
        stepped: Which rotors moved, left-to-right.
        double_stepped: Which rotors moved only because they sat at their
            own notch (the double-step anomaly), left-to-right.
    """

    index: int
    key: str
    output: str
    positions_before: str
    positions_after: str
    stepped: list[bool] = Field(default_factory=list)
    double_stepped: list[bool] = Field(default_factory=list)

    @property
    def double_step(self) -> bool:
        return any(self.double_stepped)


class StepTrace(BaseModel):
    """Sequence of keypress records from one starting configuration."""

    settings: MachineSettings
    records: list[KeypressRecord] = Field(default_factory=list)

    @property
    def double_steps(self) -> list[int]:
        """Keypress numbers at which a double step occurred."""
        return [r.index for r in self.records if r.double_step]
