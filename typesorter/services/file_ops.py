"""File operations service."""
from __future__ import annotations

from pathlib import Path

from ..core.config import CollisionPolicy
from ..core.errors import MoveIOError
from ..core.models import MoveAction, MoveResult


class FileManager:
    """Moves files into destination directories."""

    def __init__(self, collision_policy: CollisionPolicy = CollisionPolicy.SKIP):
        """Initialize file manager.

        Args:
            collision_policy: What to do when the target name is taken.
        """
        self._collision_policy = collision_policy

    def ensure_directory(self, path: Path) -> None:
        """Create a directory and any missing parents.

        Raises:
            MoveIOError: If the directory cannot be created.
        """
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MoveIOError(f"Cannot create directory {path}: {e}") from e

    def move_file(self, source: Path, target_dir: Path) -> MoveResult:
        """Move a file into target_dir, keeping its name.

        The move is a plain rename, so it fails across filesystems.

        Args:
            source: File to move.
            target_dir: Destination directory, created if missing.

        Returns:
            MoveResult describing what was done.

        Raises:
            MoveIOError: If the directory cannot be created or the rename fails.
        """
        self.ensure_directory(target_dir)
        target = target_dir / source.name
        action = MoveAction.MOVED

        if target.exists():
            # Destination is the source folder itself
            if target.samefile(source):
                return MoveResult(
                    source=source,
                    target_dir=target_dir,
                    action=MoveAction.ALREADY_IN_PLACE,
                    target_path=source,
                )
            if self._collision_policy == CollisionPolicy.SKIP:
                return MoveResult(
                    source=source,
                    target_dir=target_dir,
                    action=MoveAction.SKIPPED_EXISTS,
                )
            if self._collision_policy == CollisionPolicy.RENAME:
                target = self.find_unique_path(target)
                action = MoveAction.RENAMED
            else:
                action = MoveAction.REPLACED

        try:
            if action == MoveAction.REPLACED:
                source.replace(target)
            else:
                source.rename(target)
        except OSError as e:
            raise MoveIOError(f"Cannot move {source} to {target}: {e}") from e

        return MoveResult(
            source=source,
            target_dir=target_dir,
            action=action,
            target_path=target,
        )

    def find_unique_path(self, target: Path) -> Path:
        """Find a free name next to target by appending ``_1``, ``_2``, ...

        Args:
            target: Preferred path, already taken.

        Returns:
            First path of the form ``<stem>_<n><suffix>`` that does not exist.
        """
        counter = 1
        while True:
            candidate = target.with_name(f"{target.stem}_{counter}{target.suffix}")
            if not candidate.exists():
                return candidate
            counter += 1
