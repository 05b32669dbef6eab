"""iNES header decoder — read the 16-byte header from a byte source."""

from __future__ import annotations

import io
from typing import BinaryIO

from nesheader.errors import InvalidMagic, SourceReadFailure, TruncatedInput
from nesheader.models.header import HEADER_SIZE, INES_MAGIC, CartridgeHeader

# iNES header layout (16 bytes)
# 0x00 - 0x03 : Magic "NES\x1A"
# 0x04        : PRG ROM size in 16 KB units
# 0x05        : CHR ROM size in 8 KB units
# 0x06        : Flags 6: mapper (low nibble), mirroring, battery, trainer
# 0x07        : Flags 7: mapper (high nibble), VS/Playchoice, NES 2.0
# 0x08        : Flags 8: PRG RAM size (rarely used in iNES 1.0)
# 0x09        : Flags 9: TV system (0 = NTSC, 1 = PAL)
# 0x0A        : Flags 10: TV system, PRG RAM presence (unofficial)
# 0x0B - 0x0F : Padding (should be zero)

_MAGIC = slice(0x00, 0x04)
_PRG_ROM = 0x04
_CHR_ROM = 0x05
_FLAGS6 = 0x06
_FLAGS7 = 0x07
_PRG_RAM = 0x08
_FLAGS9 = 0x09
_FLAGS10 = 0x0A
_PADDING = slice(0x0B, 0x10)


def _read_header_bytes(source: BinaryIO) -> bytes:
    """Read up to HEADER_SIZE bytes, tolerating short reads from the stream."""
    buf = bytearray()
    while len(buf) < HEADER_SIZE:
        try:
            chunk = source.read(HEADER_SIZE - len(buf))
        except OSError as e:
            raise SourceReadFailure(e) from e
        if not chunk:
            break
        buf += chunk
    return bytes(buf)


def decode(source: BinaryIO) -> CartridgeHeader:
    """
    Decode the iNES header from *source*, positioned at offset 0.

    The source is borrowed: it is never closed and never read past the
    header. Raises ``TruncatedInput``, ``InvalidMagic`` or
    ``SourceReadFailure``; a header is returned only when all 16 bytes
    were read and the magic matched.
    """
    raw = _read_header_bytes(source)
    if len(raw) < HEADER_SIZE:
        raise TruncatedInput(len(raw), HEADER_SIZE)

    magic = raw[_MAGIC]
    if magic != INES_MAGIC:
        raise InvalidMagic(INES_MAGIC, magic)

    return CartridgeHeader(
        magic=magic,
        prg_rom_units=raw[_PRG_ROM],
        chr_rom_units=raw[_CHR_ROM],
        flags6=raw[_FLAGS6],
        flags7=raw[_FLAGS7],
        prg_ram_units=raw[_PRG_RAM],
        flags9=raw[_FLAGS9],
        flags10=raw[_FLAGS10],
        padding=raw[_PADDING],
    )


def decode_bytes(data: bytes) -> CartridgeHeader:
    """Decode a header from in-memory data; only the first 16 bytes are used."""
    return decode(io.BytesIO(data))


def encode(header: CartridgeHeader) -> bytes:
    """Serialize *header* back into its 16 raw bytes."""
    return (
        header.magic
        + bytes(
            [
                header.prg_rom_units,
                header.chr_rom_units,
                header.flags6,
                header.flags7,
                header.prg_ram_units,
                header.flags9,
                header.flags10,
            ]
        )
        + header.padding
    )
