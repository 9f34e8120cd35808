"""Utilities for summarising loaded cartridges."""

from __future__ import annotations

import hashlib
import zlib
from dataclasses import dataclass

from .rom import Cartridge, RawImage


@dataclass(frozen=True)
class CartridgeSummary:
    """Header fields and content digests of a single cartridge."""

    mapper_number: int
    mirroring: str
    format_version: str
    prg_rom_units: int
    chr_rom_units: int
    prg_rom_bytes: int
    chr_rom_bytes: int
    uses_chr_ram: bool
    battery_backed: bool
    has_trainer: bool
    four_screen: bool
    vs_unisystem: bool
    playchoice10: bool
    flags6: int
    flags7: int
    prg_crc32: str
    prg_sha1: str
    chr_crc32: str | None
    chr_sha1: str | None
    image_crc32: str | None = None
    image_sha1: str | None = None
    image_bytes: int | None = None

    def as_dict(self) -> dict[str, str | int | bool | None]:
        return {
            "mapper_number": self.mapper_number,
            "mirroring": self.mirroring,
            "format_version": self.format_version,
            "prg_rom_units": self.prg_rom_units,
            "chr_rom_units": self.chr_rom_units,
            "prg_rom_bytes": self.prg_rom_bytes,
            "chr_rom_bytes": self.chr_rom_bytes,
            "uses_chr_ram": self.uses_chr_ram,
            "battery_backed": self.battery_backed,
            "has_trainer": self.has_trainer,
            "four_screen": self.four_screen,
            "vs_unisystem": self.vs_unisystem,
            "playchoice10": self.playchoice10,
            "flags6": self.flags6,
            "flags7": self.flags7,
            "prg_crc32": self.prg_crc32,
            "prg_sha1": self.prg_sha1,
            "chr_crc32": self.chr_crc32,
            "chr_sha1": self.chr_sha1,
            "image_crc32": self.image_crc32,
            "image_sha1": self.image_sha1,
            "image_bytes": self.image_bytes,
        }


def _crc32(data: bytes) -> str:
    return f"{zlib.crc32(data) & 0xFFFFFFFF:08X}"


def _sha1(data: bytes) -> str:
    return hashlib.sha1(data).hexdigest()


def summarise_cartridge(cartridge: Cartridge, *, raw: RawImage | None = None) -> CartridgeSummary:
    header = cartridge.header
    chr_rom = cartridge.chr_rom
    image = bytes(raw) if raw is not None else None

    return CartridgeSummary(
        mapper_number=header.mapper_number,
        mirroring=header.mirroring.value,
        format_version=header.format_version.value,
        prg_rom_units=header.prg_rom_units,
        chr_rom_units=header.chr_rom_units,
        prg_rom_bytes=len(cartridge.prg_rom),
        chr_rom_bytes=len(chr_rom),
        uses_chr_ram=header.uses_chr_ram,
        battery_backed=header.battery_backed,
        has_trainer=header.has_trainer,
        four_screen=header.four_screen,
        vs_unisystem=header.vs_unisystem,
        playchoice10=header.playchoice10,
        flags6=header.flags6,
        flags7=header.flags7,
        prg_crc32=_crc32(cartridge.prg_rom),
        prg_sha1=_sha1(cartridge.prg_rom),
        chr_crc32=_crc32(chr_rom) if chr_rom else None,
        chr_sha1=_sha1(chr_rom) if chr_rom else None,
        image_crc32=_crc32(image) if image is not None else None,
        image_sha1=_sha1(image) if image is not None else None,
        image_bytes=len(image) if image is not None else None,
    )


def format_summary(summary: CartridgeSummary) -> str:
    data = summary.as_dict()
    lines = [
        f"Mapper              : {data['mapper_number']}",
        f"Format              : {data['format_version']}",
        f"Mirroring           : {data['mirroring']}",
        f"PRG ROM             : {data['prg_rom_units']} x 16 KiB ({data['prg_rom_bytes']} bytes)",
    ]
    if summary.uses_chr_ram:
        lines.append("CHR ROM             : none (CHR RAM)")
    else:
        lines.append(
            f"CHR ROM             : {data['chr_rom_units']} x 8 KiB ({data['chr_rom_bytes']} bytes)"
        )
    lines += [
        f"Battery-backed RAM  : {'yes' if summary.battery_backed else 'no'}",
        f"Trainer             : {'yes' if summary.has_trainer else 'no'}",
        f"Flags 6 / Flags 7   : 0b{summary.flags6:08b} / 0b{summary.flags7:08b}",
        f"PRG CRC32 / SHA-1   : {summary.prg_crc32} / {summary.prg_sha1}",
    ]
    if summary.chr_crc32 is not None:
        lines.append(f"CHR CRC32 / SHA-1   : {summary.chr_crc32} / {summary.chr_sha1}")
    if summary.image_crc32 is not None:
        lines.append(f"File CRC32 / SHA-1  : {summary.image_crc32} / {summary.image_sha1}")
    return "\n".join(lines)
