"""Presentation helpers shared by the CLI and session summaries."""

from __future__ import annotations

_KB = 1024
_MB = _KB * 1024
_GB = _MB * 1024


def format_file_size(size: int) -> str:
    """Return ``size`` bytes in a human readable form such as ``1.5 KB``."""
    if size >= _GB:
        return f"{size / _GB:.1f} GB"
    if size >= _MB:
        return f"{size / _MB:.1f} MB"
    if size >= _KB:
        return f"{size / _KB:.1f} KB"
    return f"{size} B"


def calculate_progress(current: int, total: int) -> float:
    """Return ``current`` as a percentage of ``total``; 0.0 when total is zero."""
    if total == 0:
        return 0.0
    return current / total * 100.0


__all__ = ["format_file_size", "calculate_progress"]
