"""
Rotor & Reflector Catalog
==========================

Named wheel types the machine can be configured with. The default catalog
holds the Wehrmacht / Kriegsmarine rotors I-VIII and the wide reflectors
A, B and C. Callers (or the ``[enigma.custom_rotors]`` configuration table)
can register further types; the catalog is a configurable set, not an
archive of every historical wheel.

References:
    - Rijmenants, D. Technical Details of the Enigma Machine.
      https://www.ciphermachinesandcryptology.com/en/enigmatech.htm
    - Hamer, D. H. (1997). Enigma: Actions Involved in the 'Double Stepping'
      of the Middle Rotor. Cryptologia, 21(1), 47-50.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Union

from enigma.components.reflector import Reflector
from enigma.components.rotor import Rotor
from enigma.core.errors import (
    ConfigurationFailure,
    InvalidConfiguration,
    InvalidReflectorWiring,
    InvalidRotorWiring,
)


# ===================================================================== #
#  Wheel type records
# ===================================================================== #

@dataclass(frozen=True, slots=True)
class RotorSpec:
    """Wiring and turnover notches of a rotor type.

    Attributes:
        name: Catalog name (``"I"``, ``"VI"``).
        wiring: Forward wiring as 26 letters.
        notches: Window letters at which the rotor pushes its left neighbour.
        description: Free-form note shown by the catalog listing.
    """

    name: str
    wiring: str
    notches: str
    description: str = ""

    def build(self, ring_setting: int = 0, position: int = 0) -> Rotor:
        return Rotor(
            self.wiring,
            self.notches,
            ring_setting=ring_setting,
            position=position,
            name=self.name,
        )


@dataclass(frozen=True, slots=True)
class ReflectorSpec:
    """Wiring of a reflector type."""

    name: str
    wiring: str
    description: str = ""

    def build(self) -> Reflector:
        return Reflector(self.wiring, name=self.name)


# ===================================================================== #
#  Default wheel set
# ===================================================================== #

_DEFAULT_ROTORS: tuple[RotorSpec, ...] = (
    RotorSpec("I", "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q", "Enigma I, 1930"),
    RotorSpec("II", "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E", "Enigma I, 1930"),
    RotorSpec("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V", "Enigma I, 1930"),
    RotorSpec("IV", "ESOVPZJAYQUIRHXLNFTGKDCMWB", "J", "M3 Army, 1938"),
    RotorSpec("V", "VZBRGITYUPSDNHLXAWMJQOFECK", "Z", "M3 Army, 1938"),
    RotorSpec("VI", "JPGVOUMFYQBENHZRDKASXLICTW", "ZM", "M3/M4 Naval, 1939"),
    RotorSpec("VII", "NZJHGRCXMYSWBOUFAIVLPEKQDT", "ZM", "M3/M4 Naval, 1939"),
    RotorSpec("VIII", "FKQHTLXOCBJSPDZRAMEWNIUYGV", "ZM", "M3/M4 Naval, 1939"),
)

_DEFAULT_REFLECTORS: tuple[ReflectorSpec, ...] = (
    ReflectorSpec("A", "EJMZALYXVBWFCRQUONTSPIKHGD", "Pre-war"),
    ReflectorSpec("B", "YRUHQSLDPXNGOKMIEBFZCWVJAT", "Standard wide reflector"),
    ReflectorSpec("C", "FVPJIAOYEDRZXWGCTKUQSBNMHL", "Wide reflector, 1940"),
)


# ===================================================================== #
#  Catalog
# ===================================================================== #

class RotorCatalog:
    """Lookup table of rotor and reflector types.

    Usage::

        catalog = RotorCatalog()
        rotor = catalog.rotor("III", ring_setting=1, position=21)
        refl = catalog.reflector("B")

    Args:
        include_defaults: Seed the catalog with rotors I-VIII and
            reflectors A-C.
    """

    def __init__(self, *, include_defaults: bool = True) -> None:
        self._rotors: dict[str, RotorSpec] = {}
        self._reflectors: dict[str, ReflectorSpec] = {}
        if include_defaults:
            for spec in _DEFAULT_ROTORS:
                self._rotors[spec.name] = spec
            for refl in _DEFAULT_REFLECTORS:
                self._reflectors[refl.name] = refl

    @classmethod
    def from_tables(
        cls,
        rotors: Optional[Mapping[str, Mapping[str, str]]] = None,
        reflectors: Optional[Mapping[str, Mapping[str, str]]] = None,
    ) -> RotorCatalog:
        """Build a default catalog extended with configuration tables.

        Each table maps a name to ``{"wiring": ..., "notches": ...}``
        (reflector tables only need ``wiring``).
        """
        catalog = cls()
        for name, entry in (rotors or {}).items():
            if not isinstance(entry, Mapping) or not isinstance(entry.get("wiring"), str):
                raise InvalidRotorWiring(f"Rotor {name}: table needs a 'wiring' string")
            catalog.register_rotor(
                name,
                entry["wiring"],
                entry.get("notches", ""),
                description=entry.get("description", "custom"),
            )
        for name, entry in (reflectors or {}).items():
            if not isinstance(entry, Mapping) or not isinstance(entry.get("wiring"), str):
                raise InvalidReflectorWiring(
                    f"Reflector {name}: table needs a 'wiring' string"
                )
            catalog.register_reflector(
                name,
                entry["wiring"],
                description=entry.get("description", "custom"),
            )
        return catalog

    # ------------------------------------------------------------------ #
    #  Registration
    # ------------------------------------------------------------------ #

    def register_rotor(
        self,
        name: str,
        wiring: str,
        notches: Union[str, Iterable[str]] = "",
        *,
        description: str = "",
    ) -> RotorSpec:
        """Add (or replace) a rotor type after validating its wiring.

        Raises:
            InvalidRotorWiring: If the wiring or notches are invalid.
        """
        spec = RotorSpec(
            name=name.strip().upper(),
            wiring=wiring.strip().upper(),
            notches="".join(notches).upper(),
            description=description,
        )
        spec.build()
        self._rotors[spec.name] = spec
        return spec

    def register_reflector(
        self,
        name: str,
        wiring: str,
        *,
        description: str = "",
    ) -> ReflectorSpec:
        """Add (or replace) a reflector type after validating its wiring.

        Raises:
            InvalidReflectorWiring: If the wiring is not a fixed-point-free
                involution.
        """
        spec = ReflectorSpec(
            name=name.strip().upper(),
            wiring=wiring.strip().upper(),
            description=description,
        )
        spec.build()
        self._reflectors[spec.name] = spec
        return spec

    # ------------------------------------------------------------------ #
    #  Lookup
    # ------------------------------------------------------------------ #

    def rotor_spec(self, name: str) -> RotorSpec:
        key = name.strip().upper()
        try:
            return self._rotors[key]
        except KeyError:
            raise InvalidConfiguration(
                f"Unknown rotor type {name!r}; available: {', '.join(self.rotor_names())}",
                ConfigurationFailure.UNKNOWN_ROTOR,
            ) from None

    def reflector_spec(self, name: str) -> ReflectorSpec:
        key = name.strip().upper()
        try:
            return self._reflectors[key]
        except KeyError:
            raise InvalidConfiguration(
                f"Unknown reflector {name!r}; available: {', '.join(self.reflector_names())}",
                ConfigurationFailure.UNKNOWN_REFLECTOR,
            ) from None

    def rotor(self, name: str, *, ring_setting: int = 0, position: int = 0) -> Rotor:
        """Build a fresh rotor of type *name*."""
        return self.rotor_spec(name).build(ring_setting, position)

    def reflector(self, name: str) -> Reflector:
        return self.reflector_spec(name).build()

    def rotor_names(self) -> list[str]:
        return list(self._rotors)

    def reflector_names(self) -> list[str]:
        return list(self._reflectors)

    def rotor_specs(self) -> list[RotorSpec]:
        return list(self._rotors.values())

    def reflector_specs(self) -> list[ReflectorSpec]:
        return list(self._reflectors.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().upper() in self._rotors
