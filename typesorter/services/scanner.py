"""Directory scanning service."""
from __future__ import annotations

from pathlib import Path
from typing import Iterator

from ..core.errors import ScanIOError, SourceNotFoundError
from ..core.models import FileEntry


class DirectoryScanner:
    """Lists the immediate entries of a source directory.

    Never descends into subdirectories. Order is whatever the filesystem
    yields.
    """

    def scan(self, source: Path) -> Iterator[FileEntry]:
        """Validate the source and return a lazy iterator over its entries.

        Args:
            source: Directory to scan.

        Returns:
            One-shot iterator of FileEntry.

        Raises:
            SourceNotFoundError: Immediately, if source is not a directory.
            ScanIOError: While iterating, if listing fails.
        """
        if not source.is_dir():
            raise SourceNotFoundError(f"Source directory does not exist: {source}")
        return self._iter_entries(source)

    def _iter_entries(self, source: Path) -> Iterator[FileEntry]:
        try:
            entries = source.iterdir()
            for entry in entries:
                yield FileEntry(path=entry, is_dir=entry.is_dir())
        except OSError as e:
            raise ScanIOError(f"Failed to read directory {source}: {e}") from e
