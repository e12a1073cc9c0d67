"""File discovery utilities."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, List

from .errors import FilesystemError
from .models import DiscoveryOptions, FileRecord, SortKey

LOGGER = logging.getLogger(__name__)

_SORT_KEYS: dict[SortKey, Callable[[FileRecord], Any]] = {
    SortKey.MODIFIED: lambda record: record.modified_at,
    SortKey.NAME: lambda record: record.name,
    SortKey.SIZE: lambda record: record.size,
    SortKey.CATEGORY: lambda record: record.category.value,
}


def _is_hidden(path: Path) -> bool:
    return path.name.startswith(".")


def sort_records(
    records: Iterable[FileRecord],
    sort_by: SortKey,
    reverse: bool = False,
) -> List[FileRecord]:
    """Return records ordered by ``sort_by``.

    Sorting is stable, so records with equal keys keep their incoming order.
    Reversal happens after sorting and therefore also flips the order of ties.

    Args:
        records: Records to order.
        sort_by: Key to order by.
        reverse: Whether to reverse the sorted sequence.

    Returns:
        List[FileRecord]: Newly ordered list of records.
    """
    ordered = sorted(records, key=_SORT_KEYS[sort_by])
    if reverse:
        ordered.reverse()
    return ordered


class DirectoryScanner:
    """Discover files directly inside a directory subject to filters."""

    def __init__(self, options: DiscoveryOptions | None = None) -> None:
        self.options = options or DiscoveryOptions()

    def scan(self, root: Path) -> List[FileRecord]:
        """Return the filtered, ordered files found directly under ``root``.

        Args:
            root: Directory to enumerate. Subdirectories are never descended.

        Returns:
            List[FileRecord]: Files that passed every active filter, ordered
            according to the scanner options.

        Raises:
            FilesystemError: If ``root`` cannot be opened or listed.
        """
        root = root.expanduser()
        LOGGER.info("Scanning %s", root)
        records = list(self._iter_records(root))
        ordered = sort_records(records, self.options.sort_by, self.options.reverse)
        LOGGER.info("Discovered %d file(s) in %s", len(ordered), root)
        return ordered

    def _iter_records(self, root: Path) -> Iterator[FileRecord]:
        for path in self._list_directory(root):
            if path.is_dir():
                continue
            if not self.options.show_hidden and _is_hidden(path):
                continue
            try:
                record = FileRecord.from_path(path)
            except OSError as exc:
                LOGGER.debug("Skipping %s: %s", path, exc)
                continue
            if not self.options.allows(record):
                continue
            yield record

    def _list_directory(self, root: Path) -> List[Path]:
        try:
            return list(root.iterdir())
        except OSError as exc:
            raise FilesystemError(root, exc.strerror or str(exc)) from exc


def discover(directory: Path | str, options: DiscoveryOptions | None = None) -> List[FileRecord]:
    """Discover files in ``directory`` using ``options`` or the defaults.

    Args:
        directory: Directory whose direct children are enumerated.
        options: Filters and ordering; defaults to :class:`DiscoveryOptions`.

    Returns:
        List[FileRecord]: Ordered file records.

    Raises:
        FilesystemError: If the directory cannot be read.
    """
    return DirectoryScanner(options).scan(Path(directory))


__all__ = ["DirectoryScanner", "discover", "sort_records"]
