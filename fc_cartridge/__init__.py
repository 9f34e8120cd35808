"""High-level public API for the FC cartridge loader.

The core parser in :mod:`fc_cartridge.rom` has no third-party
dependencies; NumPy is only needed by :mod:`fc_cartridge.banks`. Public
objects are exposed lazily via the __getattr__ hook so importing the
package never pulls in NumPy.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = [
    "Cartridge",
    "CartridgeSummary",
    "FormatVersion",
    "Header",
    "InvalidHeaderError",
    "InvalidMagicError",
    "LoadErrorKind",
    "Mirroring",
    "ROMLoadError",
    "TruncatedROMError",
    "chr_banks",
    "load",
    "parse_header",
    "prg_banks",
    "read_rom",
    "summarise_cartridge",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "Cartridge": ("fc_cartridge.rom", "Cartridge"),
    "FormatVersion": ("fc_cartridge.rom", "FormatVersion"),
    "Header": ("fc_cartridge.rom", "Header"),
    "InvalidHeaderError": ("fc_cartridge.rom", "InvalidHeaderError"),
    "InvalidMagicError": ("fc_cartridge.rom", "InvalidMagicError"),
    "LoadErrorKind": ("fc_cartridge.rom", "LoadErrorKind"),
    "Mirroring": ("fc_cartridge.rom", "Mirroring"),
    "ROMLoadError": ("fc_cartridge.rom", "ROMLoadError"),
    "TruncatedROMError": ("fc_cartridge.rom", "TruncatedROMError"),
    "load": ("fc_cartridge.rom", "load"),
    "parse_header": ("fc_cartridge.rom", "parse_header"),
    "chr_banks": ("fc_cartridge.banks", "chr_banks"),
    "prg_banks": ("fc_cartridge.banks", "prg_banks"),
    "read_rom": ("fc_cartridge.files", "read_rom"),
    "CartridgeSummary": ("fc_cartridge.analysis", "CartridgeSummary"),
    "summarise_cartridge": ("fc_cartridge.analysis", "summarise_cartridge"),
}


def __getattr__(name: str) -> Any:
    if name in _LAZY_IMPORTS:
        module_name, attr_name = _LAZY_IMPORTS[name]
        module = import_module(module_name)
        value = getattr(module, attr_name)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - simple helper
    return sorted(set(__all__ + list(globals().keys())))


if TYPE_CHECKING:  # pragma: no cover - type checkers need eager defs
    from .analysis import CartridgeSummary, summarise_cartridge
    from .banks import chr_banks, prg_banks
    from .files import read_rom
    from .rom import (
        Cartridge,
        FormatVersion,
        Header,
        InvalidHeaderError,
        InvalidMagicError,
        LoadErrorKind,
        Mirroring,
        ROMLoadError,
        TruncatedROMError,
        load,
        parse_header,
    )
