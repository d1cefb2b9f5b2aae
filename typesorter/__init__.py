"""Sort files into Images, Documents and Audio folders by extension.

Services are wired together explicitly by the CLI; nothing is global.
"""

__version__ = "1.0.0"

# Core exports
from .core.config import (
    Category,
    CollisionPolicy,
    DestinationMap,
    SorterConfig,
    EXTENSION_TABLE,
    build_extension_table,
    load_destination_map,
)
from .core.errors import (
    OrganizerError,
    ConfigError,
    SourceNotFoundError,
    ScanIOError,
    MoveIOError,
)
from .core.models import FileEntry, MoveAction, MoveResult, ProcessingStats
from .core.protocols import ProgressReporter

# Service exports
from .services.classifier import ExtensionClassifier
from .services.scanner import DirectoryScanner
from .services.file_ops import FileManager
from .services.processor import Organizer, OrganizerDependencies

# Logging exports
from .logging.rich_logger import RichProgressReporter, QuietProgressReporter

__all__ = [
    # Core
    "Category",
    "CollisionPolicy",
    "DestinationMap",
    "SorterConfig",
    "EXTENSION_TABLE",
    "build_extension_table",
    "load_destination_map",
    "OrganizerError",
    "ConfigError",
    "SourceNotFoundError",
    "ScanIOError",
    "MoveIOError",
    "FileEntry",
    "MoveAction",
    "MoveResult",
    "ProcessingStats",
    "ProgressReporter",
    # Services
    "ExtensionClassifier",
    "DirectoryScanner",
    "FileManager",
    "Organizer",
    "OrganizerDependencies",
    # Logging
    "RichProgressReporter",
    "QuietProgressReporter",
]
