"""Text rendering of a decoded header."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from nesheader.models.header import CartridgeHeader


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def _format_magic(magic: bytes) -> str:
    # Three printable letters, then the 0x1A terminator as hex
    return f"{magic[:3].decode('ascii', errors='replace')} x{magic[3]:02x}"


def render_report(header: CartridgeHeader) -> list[str]:
    """Return the report lines for *header*, one field per line."""
    chr_note = " - (CHR RAM)" if header.uses_chr_ram() else ""
    return [
        f"Magic:    {_format_magic(header.magic)}",
        f"PRG ROM:  {header.program_rom_size_kb()} KB",
        f"CHR ROM:  {header.graphics_rom_size_kb()} KB{chr_note}",
        f"Flags 6:  {header.flags6:08b}",
        f"Flags 7:  {header.flags7:08b} - (Mapper)",
        f"Flags 8:  {header.program_ram_size_kb()} KB - (PRG RAM Size)",
        f"Flags 9:  {header.flags9:08b}",
        f"Flags 10: {header.flags10:08b}",
        f"Mapper:   {header.mapper_number()}",
        f"Mirroring: {header.mirroring_mode()}",
        f"Battery:  {_yes_no(header.has_battery_backed_ram())}",
        f"Trainer:  {_yes_no(header.has_trainer())}",
        f"TV System: {header.tv_system()}",
        f"Format:   {header.header_format()}",
    ]


def header_to_dict(header: CartridgeHeader) -> dict[str, Any]:
    """Raw header fields as JSON-friendly values (byte strings become int lists)."""
    data = asdict(header)
    data["magic"] = list(header.magic)
    data["padding"] = list(header.padding)
    return data


def render_debug_dump(header: CartridgeHeader) -> str:
    """Indented JSON of the raw fields, every line prefixed with ``*``."""
    text = json.dumps(header_to_dict(header), indent=4)
    return "\n".join(f"*{line}" for line in text.splitlines())
