"""Discovery data models."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field

from .categories import FileCategory, category_for_path


class SortKey(str, Enum):
    """Ordering applied to discovered files."""

    MODIFIED = "modified"
    NAME = "name"
    SIZE = "size"
    CATEGORY = "category"


class FileRecord(BaseModel):
    """Immutable snapshot of one file captured at discovery time.

    Attributes:
        path: Filesystem path of the file; unique within one discovery run.
        name: Final path component used for display.
        size: Size of the file in bytes.
        modified_at: Last modification timestamp in UTC.
        category: Category derived from the file extension.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    name: str
    size: int = Field(ge=0)
    modified_at: datetime
    category: FileCategory

    @classmethod
    def from_path(cls, path: Path) -> "FileRecord":
        """Build a record from filesystem metadata.

        Args:
            path: File to describe.

        Returns:
            FileRecord: Snapshot of the file's metadata.

        Raises:
            OSError: If the file metadata cannot be read.
        """
        stat = path.stat()
        return cls(
            path=path,
            name=path.name,
            size=stat.st_size,
            modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            category=category_for_path(path),
        )


class DiscoveryOptions(BaseModel):
    """Filters and ordering for a single discovery run.

    Attributes:
        categories: Allowed categories; ``None`` allows every category.
        show_hidden: Whether entries whose name starts with ``.`` are included.
        min_size: Inclusive lower bound on file size in bytes.
        max_size: Inclusive upper bound on file size in bytes.
        sort_by: Key used to order the results.
        reverse: Whether the sorted results are reversed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    categories: Optional[FrozenSet[FileCategory]] = None
    show_hidden: bool = False
    min_size: Optional[int] = Field(default=None, ge=0)
    max_size: Optional[int] = Field(default=None, ge=0)
    sort_by: SortKey = SortKey.MODIFIED
    reverse: bool = False

    def allows(self, record: FileRecord) -> bool:
        """Return whether ``record`` passes the category and size filters."""
        if self.categories is not None and record.category not in self.categories:
            return False
        if self.min_size is not None and record.size < self.min_size:
            return False
        if self.max_size is not None and record.size > self.max_size:
            return False
        return True


__all__ = ["SortKey", "FileRecord", "DiscoveryOptions"]
