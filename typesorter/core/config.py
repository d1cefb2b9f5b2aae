"""Configuration: categories, extension table and destination resolution."""
from __future__ import annotations

import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, StrictStr, ValidationError

from .errors import ConfigError


class Category(Enum):
    """File categories. The value doubles as the destination folder name."""
    IMAGES = "Images"
    DOCUMENTS = "Documents"
    AUDIO = "Audio"

    @property
    def config_key(self) -> str:
        """Key naming this category in the ``[directories]`` config table."""
        return self.value.lower()


class CollisionPolicy(Enum):
    """What to do when the destination already holds a file of the same name."""
    SKIP = "skip"            # Leave the source in place, warn
    OVERWRITE = "overwrite"  # Replace the existing file
    RENAME = "rename"        # photo.jpg -> photo_1.jpg


ExtensionTable = tuple[tuple[frozenset[str], Category], ...]


def build_extension_table() -> ExtensionTable:
    """Build the extension lookup table. First matching entry wins."""
    return (
        (frozenset({"jpg", "jpeg", "png", "gif", "bmp", "tiff", "webp"}), Category.IMAGES),
        (
            frozenset({
                "pdf", "doc", "docx", "txt", "rtf", "odt",
                "xls", "xlsx", "ppt", "pptx",
            }),
            Category.DOCUMENTS,
        ),
        (frozenset({"mp3", "wav", "ogg", "flac", "aac", "wma"}), Category.AUDIO),
    )


EXTENSION_TABLE: ExtensionTable = build_extension_table()


@dataclass(frozen=True, slots=True)
class DestinationMap:
    """Destination directory for each category."""
    images: Path
    documents: Path
    audio: Path

    @classmethod
    def from_base(cls, base: Path) -> "DestinationMap":
        """Derive ``<base>/<CategoryName>`` for every category."""
        return cls(
            images=base / Category.IMAGES.value,
            documents=base / Category.DOCUMENTS.value,
            audio=base / Category.AUDIO.value,
        )

    def for_category(self, category: Category) -> Path:
        return getattr(self, category.config_key)

    def as_dict(self) -> dict[Category, Path]:
        return {category: self.for_category(category) for category in Category}


class DirectoriesSection(BaseModel):
    """The ``[directories]`` table of the config file."""
    images: StrictStr = Field(..., description="Destination for image files")
    documents: StrictStr = Field(..., description="Destination for document files")
    audio: StrictStr = Field(..., description="Destination for audio files")


class ConfigFile(BaseModel):
    """Top level of the config file."""
    directories: DirectoriesSection


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"])
        problems.append(f"{location}: {err['msg']}")
    return "; ".join(problems)


def load_destination_map(config_path: Path) -> DestinationMap:
    """Read destination directories from a TOML config file.

    Expected layout::

        [directories]
        images = "/path/to/images"
        documents = "/path/to/documents"
        audio = "/path/to/audio"

    Args:
        config_path: Path to the config file.

    Returns:
        DestinationMap bound to the three configured paths.

    Raises:
        ConfigError: If the file cannot be read or parsed, or a required
            section/key is missing or not a string.
    """
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot parse config file {config_path}: {e}") from e

    try:
        parsed = ConfigFile.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid config file {config_path}: {_describe_validation_error(e)}"
        ) from e

    dirs = parsed.directories
    return DestinationMap(
        images=Path(dirs.images).expanduser(),
        documents=Path(dirs.documents).expanduser(),
        audio=Path(dirs.audio).expanduser(),
    )


@dataclass(slots=True)
class SorterConfig:
    """Everything a run needs, resolved once at startup."""
    source: Path
    destinations: DestinationMap
    collision_policy: CollisionPolicy = CollisionPolicy.SKIP
