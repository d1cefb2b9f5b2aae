"""Core domain models, configuration and protocols."""
from .config import (
    Category,
    CollisionPolicy,
    DestinationMap,
    SorterConfig,
    EXTENSION_TABLE,
    build_extension_table,
    load_destination_map,
)
from .errors import (
    OrganizerError,
    ConfigError,
    SourceNotFoundError,
    ScanIOError,
    MoveIOError,
)
from .models import FileEntry, MoveAction, MoveResult, ProcessingStats
from .protocols import ProgressReporter

__all__ = [
    # Config
    "Category",
    "CollisionPolicy",
    "DestinationMap",
    "SorterConfig",
    "EXTENSION_TABLE",
    "build_extension_table",
    "load_destination_map",
    # Errors
    "OrganizerError",
    "ConfigError",
    "SourceNotFoundError",
    "ScanIOError",
    "MoveIOError",
    # Models
    "FileEntry",
    "MoveAction",
    "MoveResult",
    "ProcessingStats",
    # Protocols
    "ProgressReporter",
]
