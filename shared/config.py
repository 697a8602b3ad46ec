"""
RotorCore Configuration Management
===================================

Centralised configuration for the RotorCore tools using dataclasses and
TOML files. Missing keys fall back to dataclass defaults and unknown keys
are ignored, so older and newer configuration files both load.

Example ``config.toml``::

    [global]
    log_level = "DEBUG"

    [enigma]
    rotors = ["II", "IV", "V"]
    reflector = "B"
    ring_settings = "BUL"
    positions = "ABL"
    plugboard = ["AV", "BS", "CG"]

    [enigma.custom_rotors.X]
    wiring = "QWERTZUIOASDFGHJKPYXCVBNML"
    notches = "A"

References:
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class EnigmaConfig:
    """Default machine for the Enigma tool and its catalog extensions.

    The defaults reproduce the stock machine: rotors I-II-III, reflector B,
    rings and positions at ``A`` and plugs AB and CD.
    """

    rotors: list[str] = field(default_factory=lambda: ["I", "II", "III"])
    reflector: str = "B"
    ring_settings: str = "AAA"
    positions: str = "AAA"
    plugboard: list[str] = field(default_factory=lambda: ["AB", "CD"])
    group_size: int = 5
    strip_invalid: bool = True
    custom_rotors: dict[str, dict[str, str]] = field(default_factory=dict)
    custom_reflectors: dict[str, dict[str, str]] = field(default_factory=dict)


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Settings shared by every RotorCore tool."""

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class RotorConfig:
    """Master configuration aggregating global and tool settings.

    Usage:
        >>> config = RotorConfig.load()                  # default path
        >>> config = RotorConfig.load("machine.toml")    # explicit path
        >>> config.enigma.reflector
        'B'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    enigma: EnigmaConfig = field(default_factory=EnigmaConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> RotorConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root and returns pure defaults when it is absent.

        Raises:
            FileNotFoundError: If an explicitly given *path* does not exist.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            enigma=cls._build_section(EnigmaConfig, raw.get("enigma", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate dataclass *cls* from the keys it declares."""
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


def get_config(path: Optional[str | Path] = None) -> RotorConfig:
    """Cached wrapper around :meth:`RotorConfig.load`."""
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = RotorConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
