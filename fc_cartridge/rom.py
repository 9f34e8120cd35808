"""Cartridge loading for NES iNES images.

Everything here is pure: ``load`` takes the bytes of a ``.nes`` image and
returns a :class:`Cartridge` or raises a :class:`ROMLoadError` subclass.
Reading files is left to :mod:`fc_cartridge.files`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

INES_MAGIC = b"NES\x1a"
HEADER_SIZE = 16
TRAINER_SIZE = 512
PRG_BANK_SIZE = 16 * 1024
CHR_BANK_SIZE = 8 * 1024

FLAG6_VERTICAL = 0x01
FLAG6_BATTERY = 0x02
FLAG6_TRAINER = 0x04
FLAG6_FOUR_SCREEN = 0x08
FLAG7_VS_UNISYSTEM = 0x01
FLAG7_PLAYCHOICE10 = 0x02
NES2_SIGNATURE = 0b10

RawImage = bytes | bytearray | memoryview


class Mirroring(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    FOUR_SCREEN = "four_screen"


class FormatVersion(str, Enum):
    INES = "ines"
    NES2_0 = "nes2.0"


class LoadErrorKind(str, Enum):
    TRUNCATED = "truncated"
    INVALID_MAGIC = "invalid_magic"
    INVALID_HEADER = "invalid_header"
    IO = "io"


class ROMLoadError(RuntimeError):
    """Raised when ROM parsing fails."""

    kind: LoadErrorKind = LoadErrorKind.IO


class TruncatedROMError(ROMLoadError):
    """The image is shorter than its header (or the header itself) requires."""

    kind = LoadErrorKind.TRUNCATED

    def __init__(self, expected: int, actual: int, what: str = "image"):
        super().__init__(f"Truncated {what}: expected at least {expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual


class InvalidMagicError(ROMLoadError):
    """The first four bytes are not the iNES signature."""

    kind = LoadErrorKind.INVALID_MAGIC

    def __init__(self, found: bytes):
        super().__init__(f"Invalid iNES signature {found!r}, expected {INES_MAGIC!r}")
        self.found = found


class InvalidHeaderError(ROMLoadError):
    """The header is present but describes an impossible cartridge."""

    kind = LoadErrorKind.INVALID_HEADER


@dataclass(frozen=True, slots=True)
class Header:
    """Structured view of the iNES header."""

    prg_rom_units: int
    chr_rom_units: int
    mapper_number: int
    mirroring: Mirroring
    battery_backed: bool
    has_trainer: bool
    format_version: FormatVersion
    flags6: int = 0
    flags7: int = 0
    four_screen: bool = False
    vs_unisystem: bool = False
    playchoice10: bool = False
    magic: bytes = INES_MAGIC

    @property
    def prg_rom_size(self) -> int:
        return self.prg_rom_units * PRG_BANK_SIZE

    @property
    def chr_rom_size(self) -> int:
        return self.chr_rom_units * CHR_BANK_SIZE

    @property
    def uses_chr_ram(self) -> bool:
        return self.chr_rom_units == 0

    @property
    def prg_rom_offset(self) -> int:
        return HEADER_SIZE + (TRAINER_SIZE if self.has_trainer else 0)

    @property
    def chr_rom_offset(self) -> int:
        return self.prg_rom_offset + self.prg_rom_size

    @property
    def image_size(self) -> int:
        """Smallest image length that holds every region the header declares."""
        return self.chr_rom_offset + self.chr_rom_size


@dataclass(frozen=True, slots=True)
class Cartridge:
    """In-memory representation of an NES cartridge."""

    header: Header
    prg_rom: bytes
    chr_rom: bytes

    @property
    def mapper_number(self) -> int:
        return self.header.mapper_number

    @property
    def mirroring(self) -> Mirroring:
        return self.header.mirroring

    def __repr__(self) -> str:  # pragma: no cover - simple debug helper
        return (
            f"Cartridge(prg={len(self.prg_rom)} bytes, chr={len(self.chr_rom)} bytes, "
            f"mapper={self.header.mapper_number}, mirroring={self.header.mirroring.value})"
        )


def decode_mapper(flags6: int, flags7: int) -> int:
    """Combine the two mapper nibbles: flags6 holds the low half, flags7 the high."""
    mapper_low = (flags6 >> 4) & 0x0F
    mapper_high = flags7 & 0xF0
    return mapper_high | mapper_low


def decode_mirroring(flags6: int) -> Mirroring:
    if flags6 & FLAG6_FOUR_SCREEN:
        return Mirroring.FOUR_SCREEN
    if flags6 & FLAG6_VERTICAL:
        return Mirroring.VERTICAL
    return Mirroring.HORIZONTAL


def decode_format_version(flags7: int) -> FormatVersion:
    # NES 2.0 extension bytes are detected here but not decoded.
    if (flags7 >> 2) & 0b11 == NES2_SIGNATURE:
        return FormatVersion.NES2_0
    return FormatVersion.INES


def parse_header(raw: RawImage) -> Header:
    """Validate and decode the first 16 bytes of ``raw``."""
    if len(raw) < HEADER_SIZE:
        raise TruncatedROMError(HEADER_SIZE, len(raw), what="header")

    header = bytes(raw[:HEADER_SIZE])
    if header[:4] != INES_MAGIC:
        raise InvalidMagicError(header[:4])

    flags6 = header[6]
    flags7 = header[7]

    return Header(
        prg_rom_units=header[4],
        chr_rom_units=header[5],
        mapper_number=decode_mapper(flags6, flags7),
        mirroring=decode_mirroring(flags6),
        battery_backed=bool(flags6 & FLAG6_BATTERY),
        has_trainer=bool(flags6 & FLAG6_TRAINER),
        format_version=decode_format_version(flags7),
        flags6=flags6,
        flags7=flags7,
        four_screen=bool(flags6 & FLAG6_FOUR_SCREEN),
        vs_unisystem=bool(flags7 & FLAG7_VS_UNISYSTEM),
        playchoice10=bool(flags7 & FLAG7_PLAYCHOICE10),
    )


def load(raw: RawImage) -> Cartridge:
    """Parse an iNES image into a :class:`Cartridge`.

    Raises :class:`TruncatedROMError`, :class:`InvalidMagicError` or
    :class:`InvalidHeaderError`. Bytes past the last declared region are
    ignored; missing bytes are never zero-filled.
    """
    header = parse_header(raw)

    required = header.image_size
    if len(raw) < required:
        raise TruncatedROMError(required, len(raw))

    if header.prg_rom_units == 0:
        raise InvalidHeaderError("PRG ROM size is 0; at least one 16 KiB bank is required")

    prg_start = header.prg_rom_offset
    chr_start = header.chr_rom_offset
    prg_rom = bytes(raw[prg_start:chr_start])
    chr_rom = bytes(raw[chr_start:chr_start + header.chr_rom_size])

    return Cartridge(header=header, prg_rom=prg_rom, chr_rom=chr_rom)
