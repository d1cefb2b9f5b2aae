"""Exception hierarchy.

Services raise these; only the CLI catches them and turns them into an
exit status.
"""
from __future__ import annotations


class OrganizerError(Exception):
    """Base class for every error that aborts a run."""


class ConfigError(OrganizerError):
    """Config file unreadable, not valid TOML, or missing required keys."""


class SourceNotFoundError(OrganizerError):
    """Source directory does not exist."""


class ScanIOError(OrganizerError):
    """Listing the source directory failed mid-scan."""


class MoveIOError(OrganizerError):
    """Creating a destination directory or moving a file failed."""
