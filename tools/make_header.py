"""Write a synthetic ``.nes`` file for exercising the decoder.

The file holds a 16-byte iNES header, optionally followed by zero-filled
PRG/CHR banks so its size matches what the header declares.

Usage:
    python -m tools.make_header <out_file> [--prg N] [--chr N] [--flags6 N] ...

Examples:
    python -m tools.make_header test.nes --prg 2 --chr 1 --flags6 0x01
    python -m tools.make_header mmc1.nes --prg 8 --chr 0 --flags6 0x12 --banks
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from nesheader.core.decoder import encode
from nesheader.models.header import (
    CHR_ROM_UNIT_KB,
    INES_MAGIC,
    PRG_ROM_UNIT_KB,
    CartridgeHeader,
)


def _byte(text: str) -> int:
    value = int(text, 0)
    if not 0 <= value <= 0xFF:
        raise argparse.ArgumentTypeError(f"{text} does not fit in one byte")
    return value


def build_header(args: argparse.Namespace) -> CartridgeHeader:
    return CartridgeHeader(
        magic=INES_MAGIC,
        prg_rom_units=args.prg,
        chr_rom_units=args.chr,
        flags6=args.flags6,
        flags7=args.flags7,
        prg_ram_units=args.prg_ram,
        flags9=args.flags9,
        flags10=args.flags10,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Write a synthetic iNES header file.",
    )
    parser.add_argument("out_file", help="Path of the .nes file to write")
    parser.add_argument("--prg", type=_byte, default=1, help="16 KB PRG ROM banks")
    parser.add_argument("--chr", type=_byte, default=1, help="8 KB CHR ROM banks")
    parser.add_argument("--flags6", type=_byte, default=0)
    parser.add_argument("--flags7", type=_byte, default=0)
    parser.add_argument("--prg-ram", type=_byte, default=0, help="8 KB PRG RAM banks")
    parser.add_argument("--flags9", type=_byte, default=0)
    parser.add_argument("--flags10", type=_byte, default=0)
    parser.add_argument(
        "--banks",
        action="store_true",
        help="Append zero-filled PRG/CHR banks after the header",
    )
    args = parser.parse_args(argv)

    header = build_header(args)
    data = encode(header)
    if args.banks:
        body_kb = header.prg_rom_units * PRG_ROM_UNIT_KB + header.chr_rom_units * CHR_ROM_UNIT_KB
        data += bytes(body_kb * 1024)

    out_path = Path(args.out_file)
    out_path.write_bytes(data)
    print(f"Wrote {len(data)} bytes to {out_path}")
    print(f"  Mapper: {header.mapper_number()}  Mirroring: {header.mirroring_mode()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
