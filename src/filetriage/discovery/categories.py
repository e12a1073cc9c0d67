"""Extension-based file categorization."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class FileCategory(str, Enum):
    """Coarse classification of a file derived from its extension."""

    TEXT = "text"
    IMAGE = "image"
    PDF = "pdf"
    BINARY = "binary"


_TEXT_EXTENSIONS = frozenset(
    {
        "txt", "md", "rs", "py", "js", "ts", "jsx", "tsx", "json", "yaml", "yml",
        "toml", "xml", "html", "css", "sh", "bash", "c", "cpp", "h", "hpp",
        "java", "go", "rb", "php", "swift", "kt", "cs", "sql",
    }
)  # fmt: skip
_IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif", "bmp", "webp", "svg", "ico"})

_EXTENSION_MAP: dict[str, FileCategory] = {
    **{ext: FileCategory.TEXT for ext in _TEXT_EXTENSIONS},
    **{ext: FileCategory.IMAGE for ext in _IMAGE_EXTENSIONS},
    "pdf": FileCategory.PDF,
}


def category_from_extension(extension: str) -> FileCategory:
    """Return the category for a file extension.

    Matching is case-insensitive and a single leading dot is ignored, so both
    ``"PNG"`` and ``".png"`` resolve to :attr:`FileCategory.IMAGE`. Unknown or
    empty extensions resolve to :attr:`FileCategory.BINARY`.

    Args:
        extension: Extension with or without its leading dot.

    Returns:
        FileCategory: Category associated with the extension.
    """
    normalized = extension.lower()
    if normalized.startswith("."):
        normalized = normalized[1:]
    return _EXTENSION_MAP.get(normalized, FileCategory.BINARY)


def category_for_path(path: Path) -> FileCategory:
    """Return the category implied by the final suffix of ``path``."""
    return category_from_extension(path.suffix)


__all__ = ["FileCategory", "category_from_extension", "category_for_path"]
