"""Fontgarden reader for loading a project directory.

This module provides the FontgardenReader class, which rebuilds the
in-memory model from the set manifests and the per-layer JSON files.
"""

import csv
import json
from pathlib import Path

import structlog

from fontgarden.domain import Fontgarden, Glyph, Layer, set_label, set_value
from fontgarden.exceptions import (
    DuplicateGlyphError,
    InvalidCodepointsError,
    LayerDataError,
    NotAFontgardenError,
    SetDataError,
    StorageIOError,
)
from fontgarden.io.filenames import filename_to_name, name_to_filename
from fontgarden.io.manifest import read_set_file, set_name_from_path
from fontgarden.utils.parallel import parallel_map

GLYPHS_DIR = "glyphs"
LAYER_SUFFIX = ".json"

logger = structlog.get_logger(__name__)


class FontgardenReader:
    """Loads a Fontgarden directory.

    Loading happens in two passes: the manifests are read first and define
    the universe of glyphs with their metadata, then the layer files of
    every glyph that has a directory are read in parallel.

    Example:
        reader = FontgardenReader(Path("MyFamily.fontgarden"))
        fontgarden = reader.load()
        print(len(fontgarden))
    """

    def __init__(self, path: Path, max_workers: int | None = None) -> None:
        """Initialize the reader.

        Args:
            path: Root directory of the Fontgarden
            max_workers: Maximum worker threads for reading layers
        """
        self._path = path
        self._max_workers = max_workers

    def load(self) -> Fontgarden:
        """Load manifests and all layers.

        Returns:
            The loaded Fontgarden

        Raises:
            NotAFontgardenError: If the path is not a directory
            DuplicateGlyphError: If a glyph is listed in two manifests
            SetDataError: If a manifest is malformed
            LayerDataError: If a layer file is malformed
            StorageIOError: If the filesystem cannot be read
        """
        fontgarden = self.load_metadata()

        glyphs_dir = self._path / GLYPHS_DIR
        tasks = [
            (glyph_name, glyph, glyphs_dir / name_to_filename(glyph_name))
            for glyph_name, glyph in fontgarden.glyphs.items()
        ]
        tasks = [task for task in tasks if task[2].is_dir()]

        parallel_map(self._load_glyph_layers, tasks, max_workers=self._max_workers)

        logger.info(
            "Fontgarden loaded",
            path=str(self._path),
            glyph_count=len(fontgarden),
            glyphs_with_layers=len(tasks),
        )
        return fontgarden

    def load_metadata(self) -> Fontgarden:
        """Load only the manifests, leaving every glyph without layers.

        Returns:
            Fontgarden holding glyph metadata only

        Raises:
            Same as load(), except LayerDataError
        """
        if not self._path.is_dir():
            raise NotAFontgardenError(self._path)

        glyphs: dict[str, Glyph] = {}
        for manifest_path, set_name in self._iter_manifests():
            self._load_manifest(manifest_path, set_name, glyphs)

        return Fontgarden(glyphs=glyphs)

    def _iter_manifests(self) -> list[tuple[Path, str]]:
        try:
            entries = sorted(self._path.iterdir())
        except OSError as e:
            raise StorageIOError(self._path, str(e)) from e

        manifests = []
        for entry in entries:
            set_name = set_name_from_path(entry)
            if set_name is not None and entry.is_file():
                manifests.append((entry, set_name))
        return manifests

    def _load_manifest(self, path: Path, set_name: str, glyphs: dict[str, Glyph]) -> None:
        try:
            for record in read_set_file(path):
                existing = glyphs.get(record.name)
                if existing is not None:
                    raise DuplicateGlyphError(set_name, record.name, set_label(existing.set))
                glyphs[record.name] = Glyph(
                    codepoints=record.codepoints,
                    opentype_category=record.opentype_category,
                    postscript_name=record.postscript_name,
                    set=set_value(set_name),
                )
        except OSError as e:
            raise StorageIOError(path, str(e)) from e
        except (csv.Error, InvalidCodepointsError, UnicodeDecodeError, ValueError) as e:
            raise SetDataError(path, str(e)) from e

        logger.debug("Set loaded", set=set_name, path=str(path))

    def _load_glyph_layers(self, task: tuple[str, Glyph, Path]) -> None:
        glyph_name, glyph, glyph_dir = task
        try:
            entries = sorted(glyph_dir.iterdir())
        except OSError as e:
            raise StorageIOError(glyph_dir, str(e)) from e

        for layer_path in entries:
            if not layer_path.is_file() or layer_path.suffix != LAYER_SUFFIX:
                continue
            try:
                with layer_path.open(encoding="utf-8") as f:
                    data = json.load(f)
            except OSError as e:
                raise StorageIOError(layer_path, str(e)) from e
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise LayerDataError(layer_path, glyph_name, str(e)) from e

            try:
                layer = Layer.from_dict(data)
            except (KeyError, TypeError, ValueError) as e:
                raise LayerDataError(layer_path, glyph_name, repr(e)) from e

            layer_name = filename_to_name(layer_path.stem)
            glyph.layers[layer_name] = layer

