"""Service layer - classification, scanning, moving and orchestration."""
from .classifier import ExtensionClassifier
from .scanner import DirectoryScanner
from .file_ops import FileManager
from .processor import Organizer, OrganizerDependencies

__all__ = [
    "ExtensionClassifier",
    "DirectoryScanner",
    "FileManager",
    "Organizer",
    "OrganizerDependencies",
]
