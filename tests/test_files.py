"""Tests for reading ROM files from disk."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from conftest import make_image
from fc_cartridge.files import read_rom, read_rom_image
from fc_cartridge.rom import InvalidMagicError, ROMLoadError, TruncatedROMError, load


def test_read_rom_matches_in_memory_load(tmp_path: Path, nrom_image: bytes) -> None:
    rom_path = tmp_path / "game.nes"
    rom_path.write_bytes(nrom_image)
    assert read_rom(rom_path) == load(nrom_image)
    assert read_rom(str(rom_path)) == load(nrom_image)


def test_read_rom_image_returns_raw_bytes(tmp_path: Path, nrom_image: bytes) -> None:
    rom_path = tmp_path / "game.bin"
    rom_path.write_bytes(nrom_image)
    cartridge, raw = read_rom_image(rom_path)
    assert raw == nrom_image
    assert cartridge.header.mirroring.value == "vertical"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ROMLoadError, match="not found"):
        read_rom(tmp_path / "missing.nes")


def test_malformed_file_errors_propagate(tmp_path: Path) -> None:
    bad_magic = tmp_path / "bad.nes"
    bad_magic.write_bytes(b"GB\x00\x00" + b"\x00" * 64)
    with pytest.raises(InvalidMagicError):
        read_rom(bad_magic)

    truncated = tmp_path / "short.nes"
    truncated.write_bytes(make_image(prg_units=2, chr_units=1, short_by=10))
    with pytest.raises(TruncatedROMError):
        read_rom(truncated)


def test_debug_log_on_load(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    rom_path = tmp_path / "mapper1.nes"
    rom_path.write_bytes(make_image(prg_units=1, chr_units=0, flags6=0x10, trailing=b"\x00" * 4))
    with caplog.at_level(logging.DEBUG, logger="fc_cartridge.files"):
        read_rom(rom_path)
    messages = [record.getMessage() for record in caplog.records]
    assert any("mapper=1" in message for message in messages)
    assert any("ignoring 4 trailing bytes" in message for message in messages)
