"""Cartridge header model — the decoded iNES header and its derived values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

INES_MAGIC = b"NES\x1a"
HEADER_SIZE = 16
PADDING_SIZE = 5

PRG_ROM_UNIT_KB = 16
CHR_ROM_UNIT_KB = 8
PRG_RAM_UNIT_KB = 8


class Mirroring(StrEnum):
    """Nametable mirroring arrangement."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    FOUR_SCREEN = "four-screen"


class TvSystem(StrEnum):
    """TV system declared in Flags 9."""

    NTSC = "NTSC"
    PAL = "PAL"


class HeaderFormat(StrEnum):
    """Header dialect, identified from Flags 7 bits 2-3."""

    INES = "iNES"
    NES2 = "NES 2.0"
    ARCHAIC = "archaic iNES"


@dataclass(frozen=True)
class CartridgeHeader:
    """Decoded iNES header.

    Only the raw header bytes are stored; sizes, the mapper number and the
    capability flags are computed from them on demand.
    """

    magic: bytes
    prg_rom_units: int
    chr_rom_units: int
    flags6: int
    flags7: int
    prg_ram_units: int
    flags9: int
    flags10: int
    padding: bytes = bytes(PADDING_SIZE)

    def __post_init__(self) -> None:
        if self.magic != INES_MAGIC:
            raise ValueError(f"Not an iNES header: magic {self.magic!r}")
        if len(self.padding) != PADDING_SIZE:
            raise ValueError(f"Padding must be {PADDING_SIZE} bytes, got {len(self.padding)}")
        for name in (
            "prg_rom_units",
            "chr_rom_units",
            "flags6",
            "flags7",
            "prg_ram_units",
            "flags9",
            "flags10",
        ):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} must fit in one byte, got {value}")

    # ── Sizes ──

    def program_rom_size_kb(self) -> int:
        return self.prg_rom_units * PRG_ROM_UNIT_KB

    def graphics_rom_size_kb(self) -> int:
        return self.chr_rom_units * CHR_ROM_UNIT_KB

    def program_ram_size_kb(self) -> int:
        # 0 is reported as 0 KB, not as the "assume one bank" convention
        return self.prg_ram_units * PRG_RAM_UNIT_KB

    def uses_chr_ram(self) -> bool:
        return self.chr_rom_units == 0

    # ── Flags 6 ──

    def mapper_number(self) -> int:
        """Mapper: low nibble from Flags 6 high bits, high nibble from Flags 7 high bits."""
        return (self.flags6 >> 4) | (self.flags7 & 0xF0)

    def mirroring_mode(self) -> Mirroring:
        # Bit 3 (four-screen) overrides bit 0
        if self.four_screen_vram():
            return Mirroring.FOUR_SCREEN
        if self.flags6 & 0x01:
            return Mirroring.VERTICAL
        return Mirroring.HORIZONTAL

    def has_battery_backed_ram(self) -> bool:
        return bool(self.flags6 & 0x02)

    def has_trainer(self) -> bool:
        return bool(self.flags6 & 0x04)

    def four_screen_vram(self) -> bool:
        return bool(self.flags6 & 0x08)

    # ── Flags 7 ──

    def is_vs_unisystem(self) -> bool:
        return bool(self.flags7 & 0x01)

    def is_playchoice10(self) -> bool:
        return bool(self.flags7 & 0x02)

    def header_format(self) -> HeaderFormat:
        bits = self.flags7 & 0x0C
        if bits == 0x08:
            return HeaderFormat.NES2
        if bits == 0x00:
            return HeaderFormat.INES
        return HeaderFormat.ARCHAIC

    # ── Flags 9 / 10 ──

    def tv_system(self) -> TvSystem:
        """Informational only; most dumps leave Flags 9 at zero."""
        return TvSystem.PAL if self.flags9 & 0x01 else TvSystem.NTSC

    def has_prg_ram_hint(self) -> bool:
        """Unofficial Flags 10 bit 4: clear means PRG RAM is present."""
        return not self.flags10 & 0x10

    # ── Padding ──

    def padding_is_clean(self) -> bool:
        return not any(self.padding)
