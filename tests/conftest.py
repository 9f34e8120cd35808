"""Shared helpers for building synthetic iNES images."""

from __future__ import annotations

import pytest

from fc_cartridge.rom import CHR_BANK_SIZE, INES_MAGIC, PRG_BANK_SIZE, TRAINER_SIZE


def make_header(
    *,
    prg_units: int = 1,
    chr_units: int = 1,
    flags6: int = 0,
    flags7: int = 0,
    tail: bytes = b"\x00" * 8,
    magic: bytes = INES_MAGIC,
) -> bytes:
    return magic + bytes([prg_units, chr_units, flags6, flags7]) + tail


def make_image(
    *,
    prg_units: int = 1,
    chr_units: int = 1,
    flags6: int = 0,
    flags7: int = 0,
    trailing: bytes = b"",
    short_by: int = 0,
) -> bytes:
    """Build an image whose trainer/PRG/CHR regions are filled with distinct bytes."""
    image = bytearray(make_header(prg_units=prg_units, chr_units=chr_units, flags6=flags6, flags7=flags7))
    if flags6 & 0x04:
        image += b"\x77" * TRAINER_SIZE
    for bank in range(prg_units):
        image += bytes([0x10 + bank]) * PRG_BANK_SIZE
    for bank in range(chr_units):
        image += bytes([0xC0 + bank]) * CHR_BANK_SIZE
    image += trailing
    if short_by:
        del image[-short_by:]
    return bytes(image)


@pytest.fixture
def nrom_image() -> bytes:
    return make_image(prg_units=2, chr_units=1, flags6=0x01)
