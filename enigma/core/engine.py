"""
Enigma Engine
==============

Facade over the machine, catalog, settings parser and key sheet generator.
Front ends (the CLI, a web form) talk to :class:`EnigmaEngine`; it turns
configuration and free text into configured machines and result models.

Each call builds a fresh :class:`Machine`, so results never depend on the
rotor positions left behind by an earlier call.
"""

from __future__ import annotations

from typing import Optional

from shared.config import RotorConfig
from shared.logger import RotorLogger

from enigma.core import alphabet
from enigma.core.catalog import ReflectorSpec, RotorCatalog, RotorSpec
from enigma.core.keygen import KeySheetGenerator
from enigma.core.machine import Machine
from enigma.core.models import EncodeResult, KeypressRecord, MachineSettings, StepTrace
from enigma.parsers.settings_parser import SettingsParser


class EnigmaEngine:
    """Builds machines from configuration and runs messages through them.

    Usage::

        engine = EnigmaEngine()
        settings = engine.settings_from_text(rotors="I II III", positions="AAA",
                                             plugboard="")
        result = engine.encode_text("Hello world", settings)
        result.output_text

    Attributes:
        config: RotorCore configuration.
        catalog: Default rotor set extended with the configured custom wheels.
        logger: Logger for engine-level events.
    """

    def __init__(self, config: Optional[RotorConfig] = None) -> None:
        self.config = config or RotorConfig()
        self.logger = RotorLogger.from_config("enigma.engine", self.config.global_settings)
        self._machine_logger = RotorLogger.from_config(
            "enigma.machine", self.config.global_settings
        )
        self.catalog = RotorCatalog.from_tables(
            self.config.enigma.custom_rotors,
            self.config.enigma.custom_reflectors,
        )
        self.parser = SettingsParser()

    # ------------------------------------------------------------------ #
    #  Settings
    # ------------------------------------------------------------------ #

    def default_settings(self) -> MachineSettings:
        """The machine described by the ``[enigma]`` configuration section."""
        cfg = self.config.enigma
        return self.build_machine_from(
            rotors=list(cfg.rotors),
            reflector=cfg.reflector,
            ring_settings=cfg.ring_settings,
            positions=cfg.positions,
            plugboard=list(cfg.plugboard),
        ).settings

    def settings_from_text(
        self,
        *,
        rotors: Optional[str] = None,
        reflector: Optional[str] = None,
        ring_settings: Optional[str] = None,
        positions: Optional[str] = None,
        plugboard: Optional[str] = None,
    ) -> MachineSettings:
        """Parse key-sheet notation, falling back to configured defaults
        for every argument left as ``None``. Blank ring settings and
        positions also fall back; a blank plugboard means no plugs.

        Raises:
            InvalidConfiguration: If any part fails to parse or validate.
        """
        cfg = self.config.enigma
        names = self.parser.rotors(rotors) if rotors is not None else list(cfg.rotors)
        rings = self.parser.ring_settings(ring_settings)
        if rings is None:
            rings = cfg.ring_settings
        starts = self.parser.positions(positions)
        if starts is None:
            starts = cfg.positions
        plugs = (
            self.parser.plugboard(plugboard)
            if plugboard is not None
            else list(cfg.plugboard)
        )
        return self.build_machine_from(
            rotors=names,
            reflector=reflector or cfg.reflector,
            ring_settings=rings,
            positions=starts,
            plugboard=plugs,
        ).settings

    def generate_settings(
        self,
        seed: Optional[int] = None,
        *,
        rotor_count: int = 3,
        plug_count: int = 10,
    ) -> MachineSettings:
        """Draw a random key sheet entry from the engine's catalog."""
        generator = KeySheetGenerator(
            self.catalog, rotor_count=rotor_count, plug_count=plug_count
        )
        settings = generator.generate(seed)
        self.logger.info("Generated key %s", settings.describe(), seed=seed)
        return settings

    # ------------------------------------------------------------------ #
    #  Machines
    # ------------------------------------------------------------------ #

    def build_machine_from(self, **kwargs) -> Machine:
        machine = Machine(self.catalog, self._machine_logger)
        machine.configure(
            kwargs["rotors"],
            kwargs.get("ring_settings"),
            kwargs.get("positions"),
            kwargs.get("plugboard", ()),
            kwargs.get("reflector", "B"),
        )
        return machine

    def build_machine(self, settings: Optional[MachineSettings] = None) -> Machine:
        """A fresh machine configured with *settings* (or the defaults)."""
        settings = settings or self.default_settings()
        return self.build_machine_from(**settings.model_dump())

    # ------------------------------------------------------------------ #
    #  Operations
    # ------------------------------------------------------------------ #

    def encode_text(
        self,
        text: str,
        settings: Optional[MachineSettings] = None,
    ) -> EncodeResult:
        """Run *text* through a freshly configured machine.

        With ``strip_invalid`` enabled (the default) the text is upper-cased
        and reduced to letters first; otherwise the first non-letter raises
        :class:`InvalidCharacter`.
        """
        machine = self.build_machine(settings)
        cfg = self.config.enigma
        processed = alphabet.normalize(text) if cfg.strip_invalid else text

        with self.logger.operation("encode"):
            start = machine.get_position_letters()
            with self.logger.timed(f"encode {len(processed)} letters"):
                output = machine.encode_message(processed)

        return EncodeResult(
            input_text=text,
            processed_text=processed.upper(),
            output_text=output,
            grouped_output=alphabet.group(output, cfg.group_size),
            character_count=len(processed),
            settings=machine.settings,
            start_positions=start,
            end_positions=machine.get_position_letters(),
        )

    def trace_stepping(
        self,
        keys: str,
        settings: Optional[MachineSettings] = None,
    ) -> StepTrace:
        """Record rotor movement for each key in *keys*."""
        machine = self.build_machine(settings)
        trace = StepTrace(settings=machine.settings)

        with self.logger.operation("trace"):
            for index, key in enumerate(keys, start=1):
                before = machine.get_position_letters()
                plan, doubles = machine.stepping_preview()
                lamp = machine.encode_char(key)
                trace.records.append(KeypressRecord(
                    index=index,
                    key=key.upper(),
                    output=lamp,
                    positions_before=before,
                    positions_after=machine.get_position_letters(),
                    stepped=plan,
                    double_stepped=doubles,
                ))

        if trace.double_steps:
            self.logger.debug("Double steps at keypresses %s", trace.double_steps)
        return trace

    def list_catalog(self) -> tuple[list[RotorSpec], list[ReflectorSpec]]:
        return self.catalog.rotor_specs(), self.catalog.reflector_specs()
