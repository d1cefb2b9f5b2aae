"""Domain models - immutable data classes."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from .config import Category


class MoveAction(Enum):
    """What happened to a classified file."""
    MOVED = "moved"
    RENAMED = "renamed"
    REPLACED = "replaced"
    SKIPPED_EXISTS = "skipped_exists"
    ALREADY_IN_PLACE = "already_in_place"


@dataclass(frozen=True, slots=True)
class FileEntry:
    """A single entry of the source directory."""
    path: Path
    is_dir: bool = False

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def extension(self) -> Optional[str]:
        """Lower-cased extension without the dot, or None."""
        name = self.path.name
        stem, dot, ext = name.rpartition(".")
        # Dotfiles like ".bashrc" have no extension
        if not dot or not stem:
            return None
        return ext.lower() or None


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Result of moving a single file."""
    source: Path
    target_dir: Path
    action: MoveAction
    target_path: Optional[Path] = None

    @property
    def is_moved(self) -> bool:
        return self.action not in (MoveAction.SKIPPED_EXISTS, MoveAction.ALREADY_IN_PLACE)


@dataclass(slots=True)
class ProcessingStats:
    """Mutable statistics for a run."""
    entries_seen: int = 0
    directories_skipped: int = 0
    no_extension: int = 0
    unclassified: int = 0
    moved: int = 0
    renamed: int = 0
    replaced: int = 0
    collisions_skipped: int = 0
    already_in_place: int = 0
    by_category: dict[Category, int] = field(default_factory=dict)
    elapsed_seconds: float = 0.0

    @property
    def files_moved(self) -> int:
        return self.moved + self.renamed + self.replaced

    def record(self, result: MoveResult, category: Category) -> None:
        """Record the outcome of a move."""
        match result.action:
            case MoveAction.MOVED:
                self.moved += 1
            case MoveAction.RENAMED:
                self.renamed += 1
            case MoveAction.REPLACED:
                self.replaced += 1
            case MoveAction.SKIPPED_EXISTS:
                self.collisions_skipped += 1
            case MoveAction.ALREADY_IN_PLACE:
                self.already_in_place += 1
        if result.is_moved:
            self.by_category[category] = self.by_category.get(category, 0) + 1

    def summary(self) -> dict[str, int]:
        return {
            "entries": self.entries_seen,
            "moved": self.files_moved,
            "renamed": self.renamed,
            "replaced": self.replaced,
            "collisions_skipped": self.collisions_skipped,
            "already_in_place": self.already_in_place,
            "directories_skipped": self.directories_skipped,
            "no_extension": self.no_extension,
            "unclassified": self.unclassified,
        }
