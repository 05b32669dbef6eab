"""Shared utility functions."""

from __future__ import annotations

KB = 1024


def format_size(size_bytes: int) -> str:
    """Format byte count to human-readable string, e.g. ``40.0 KB``."""
    if size_bytes < KB:
        return f"{size_bytes} B"
    size = size_bytes / KB
    for unit in ("KB", "MB"):
        if size < KB:
            return f"{size:.1f} {unit}"
        size /= KB
    return f"{size:.2f} GB"
