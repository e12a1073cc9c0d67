"""Discovery errors."""

from __future__ import annotations

from pathlib import Path


class DiscoveryError(Exception):
    """Base exception for discovery operations."""


class FilesystemError(DiscoveryError):
    """Raised when the target directory cannot be opened or read."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
