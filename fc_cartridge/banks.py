"""NumPy views over the PRG/CHR banks of a loaded cartridge."""
from __future__ import annotations

import numpy as np

from .rom import CHR_BANK_SIZE, PRG_BANK_SIZE, Cartridge


def _as_banks(data: bytes, bank_size: int) -> np.ndarray:
    # np.frombuffer over bytes is already read-only.
    flat = np.frombuffer(data, dtype=np.uint8)
    return flat.reshape(len(flat) // bank_size, bank_size)


def prg_banks(cartridge: Cartridge) -> np.ndarray:
    """Return PRG-ROM as a ``(prg_rom_units, 16384)`` uint8 array."""
    return _as_banks(cartridge.prg_rom, PRG_BANK_SIZE)


def chr_banks(cartridge: Cartridge) -> np.ndarray:
    """Return CHR-ROM as a ``(chr_rom_units, 8192)`` uint8 array.

    CHR-RAM cartridges yield an empty ``(0, 8192)`` array.
    """
    return _as_banks(cartridge.chr_rom, CHR_BANK_SIZE)


def prg_bank(cartridge: Cartridge, index: int) -> np.ndarray:
    banks = prg_banks(cartridge)
    if not 0 <= index < len(banks):
        raise IndexError(f"PRG bank {index} out of range (0..{len(banks) - 1})")
    return banks[index]


def chr_bank(cartridge: Cartridge, index: int) -> np.ndarray:
    banks = chr_banks(cartridge)
    if not 0 <= index < len(banks):
        raise IndexError(f"CHR bank {index} out of range ({len(banks)} banks)")
    return banks[index]
