"""Extension-based classification."""
from __future__ import annotations

from typing import Optional

from ..core.config import Category, EXTENSION_TABLE, ExtensionTable
from ..core.models import FileEntry


class ExtensionClassifier:
    """Maps lower-cased extensions to categories."""

    def __init__(self, table: ExtensionTable = EXTENSION_TABLE):
        self._table = table

    def classify(self, extension: str) -> Optional[Category]:
        """Return the first category whose set contains the extension.

        The extension must already be lower-cased; the comparison itself is
        case-sensitive.
        """
        for extensions, category in self._table:
            if extension in extensions:
                return category
        return None

    def classify_entry(self, entry: FileEntry) -> Optional[Category]:
        extension = entry.extension
        if extension is None:
            return None
        return self.classify(extension)
