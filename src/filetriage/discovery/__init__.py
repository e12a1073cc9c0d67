"""Directory discovery producing ordered file records."""

from .categories import FileCategory, category_for_path, category_from_extension
from .errors import DiscoveryError, FilesystemError
from .models import DiscoveryOptions, FileRecord, SortKey
from .scanner import DirectoryScanner, discover, sort_records

__all__ = [
    "DirectoryScanner",
    "DiscoveryError",
    "DiscoveryOptions",
    "FileCategory",
    "FileRecord",
    "FilesystemError",
    "SortKey",
    "category_for_path",
    "category_from_extension",
    "discover",
    "sort_records",
]
