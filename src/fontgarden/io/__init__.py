"""Storage and source I/O layer for fontgarden.

This module handles reading and writing Fontgarden directories, and
reading and writing UFO sources using ufoLib2. It provides a clean
abstraction layer between the on-disk formats and the domain models.

Key responsibilities:
- Map names to case-collision-free filenames
- Load and save set manifests and layer files
- Convert ufoLib2 glyphs to domain layers and back
- Load and save UFO sources keyed by style name

Key classes:
- FontgardenReader: Load a Fontgarden directory
- FontgardenWriter: Save a Fontgarden directory
"""

from pathlib import Path

from fontgarden.domain import Fontgarden
from fontgarden.io.filenames import filename_to_name, name_to_filename
from fontgarden.io.reader import FontgardenReader
from fontgarden.io.sources import load_sources, save_sources, style_name_of
from fontgarden.io.writer import FontgardenWriter


def load_fontgarden(path: Path, max_workers: int | None = None) -> Fontgarden:
    """Load the Fontgarden at path with all its layers."""
    return FontgardenReader(path, max_workers=max_workers).load()


def save_fontgarden(
    fontgarden: Fontgarden,
    path: Path,
    max_workers: int | None = None,
    staged: bool = False,
) -> None:
    """Save a Fontgarden to path, replacing whatever is there."""
    FontgardenWriter(fontgarden, path, max_workers=max_workers, staged=staged).save()


__all__ = [
    "FontgardenReader",
    "FontgardenWriter",
    "filename_to_name",
    "load_fontgarden",
    "load_sources",
    "name_to_filename",
    "save_fontgarden",
    "save_sources",
    "style_name_of",
]
