"""Main organizer - orchestrates scanning, classification and moving."""
from __future__ import annotations

import time
from dataclasses import dataclass

from ..core.config import SorterConfig
from ..core.models import FileEntry, MoveAction, ProcessingStats
from ..core.protocols import ProgressReporter
from .classifier import ExtensionClassifier
from .file_ops import FileManager
from .scanner import DirectoryScanner


@dataclass
class OrganizerDependencies:
    """All dependencies needed by the organizer.

    This is explicitly passed in - no globals or singletons.
    """
    scanner: DirectoryScanner
    classifier: ExtensionClassifier
    file_manager: FileManager
    progress: ProgressReporter


class Organizer:
    """Runs one pass over the source directory.

    Single-threaded and sequential. The first error aborts the run and
    propagates to the caller; files moved before it stay moved.
    """

    def __init__(self, config: SorterConfig, deps: OrganizerDependencies):
        """Initialize organizer with config and dependencies.

        Args:
            config: Run configuration.
            deps: All required dependencies.
        """
        self._config = config
        self._deps = deps
        self._stats = ProcessingStats()

    @property
    def stats(self) -> ProcessingStats:
        return self._stats

    def process(self) -> ProcessingStats:
        """Scan the source directory and move every classified file.

        Returns:
            Statistics about what was processed.

        Raises:
            SourceNotFoundError: Before anything is moved.
            ScanIOError: If listing the source fails mid-scan.
            MoveIOError: If a move fails.
        """
        start = time.monotonic()
        entries = self._deps.scanner.scan(self._config.source)

        try:
            for entry in entries:
                self._stats.entries_seen += 1
                self._process_entry(entry)
        finally:
            self._stats.elapsed_seconds = time.monotonic() - start

        return self._stats

    def _process_entry(self, entry: FileEntry) -> None:
        progress = self._deps.progress

        if entry.is_dir:
            self._stats.directories_skipped += 1
            progress.debug(f"Skipping directory: {entry.path}")
            return

        if entry.extension is None:
            self._stats.no_extension += 1
            progress.debug(f"No extension, leaving in place: {entry.path}")
            return

        category = self._deps.classifier.classify_entry(entry)
        if category is None:
            self._stats.unclassified += 1
            progress.debug(f"Unknown type, leaving in place: {entry.path}")
            return

        target_dir = self._config.destinations.for_category(category)
        result = self._deps.file_manager.move_file(entry.path, target_dir)
        self._stats.record(result, category)

        match result.action:
            case MoveAction.MOVED:
                progress.success(f"Moved: {entry.path} -> {target_dir}")
            case MoveAction.RENAMED:
                progress.success(f"Moved: {entry.path} -> {result.target_path}")
            case MoveAction.REPLACED:
                progress.warning(f"Replaced existing file: {result.target_path}")
                progress.success(f"Moved: {entry.path} -> {target_dir}")
            case MoveAction.SKIPPED_EXISTS:
                progress.warning(
                    f"Skipped {entry.path}: {entry.name} already exists in {target_dir}"
                )
            case MoveAction.ALREADY_IN_PLACE:
                progress.debug(f"Already in destination: {entry.path}")
