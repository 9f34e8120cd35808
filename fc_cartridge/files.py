"""Read iNES images from disk."""
from __future__ import annotations

import logging
from pathlib import Path

from .rom import Cartridge, ROMLoadError, load

logger = logging.getLogger(__name__)


def read_rom_image(path: str | Path) -> tuple[Cartridge, bytes]:
    """Load the ``.nes`` file at ``path`` and also return its raw bytes."""
    path = Path(path)
    if not path.is_file():
        raise ROMLoadError(f"ROM file not found: {path}")

    raw = path.read_bytes()
    cartridge = load(raw)
    header = cartridge.header
    logger.debug(
        "Loaded %s: mapper=%d prg=%d bytes chr=%d bytes mirroring=%s format=%s",
        path,
        header.mapper_number,
        len(cartridge.prg_rom),
        len(cartridge.chr_rom),
        header.mirroring.value,
        header.format_version.value,
    )
    if len(raw) > header.image_size:
        logger.debug("%s: ignoring %d trailing bytes", path, len(raw) - header.image_size)
    return cartridge, raw


def read_rom(path: str | Path) -> Cartridge:
    """Load the ``.nes`` file at ``path``.

    Raises :class:`ROMLoadError` if the file is missing or malformed.
    """
    cartridge, _raw = read_rom_image(path)
    return cartridge
