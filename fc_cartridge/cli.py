"""Command line entry point for inspecting iNES images."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from .analysis import format_summary, summarise_cartridge
from .files import read_rom_image
from .rom import ROMLoadError

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect the header and banks of NES ROM files")
    parser.add_argument("roms", nargs="+", type=Path, help="Path to one or more .nes ROM files")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the summaries as JSON instead of human-readable text",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    summaries: dict[str, dict] = {}
    failures = 0
    for path in args.roms:
        try:
            cartridge, raw = read_rom_image(path)
        except (ROMLoadError, OSError) as exc:
            failures += 1
            print(f"{path}: {exc}", file=sys.stderr)
            continue

        summary = summarise_cartridge(cartridge, raw=raw)
        if args.json:
            summaries[str(path)] = summary.as_dict()
            continue
        print(f"== {path}")
        print(format_summary(summary))

    if args.json:
        print(json.dumps(summaries, ensure_ascii=False, indent=2))
    if failures:
        logger.info("%d of %d ROM files failed to load", failures, len(args.roms))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
