"""Fontgarden writer for saving a project directory.

This module provides the FontgardenWriter class. Saving fully rewrites
the target directory: one CSV manifest per set and one JSON file per
non-empty layer of every glyph.
"""

import json
import shutil
import uuid
from pathlib import Path

import structlog

from fontgarden.domain import Fontgarden, Glyph
from fontgarden.exceptions import (
    CleanupError,
    CreateDirError,
    CreateGlyphDirError,
    SaveLayerError,
    SaveSetDataError,
)
from fontgarden.io.filenames import name_to_filename
from fontgarden.io.manifest import SetRecord, set_filename, write_set_file
from fontgarden.io.reader import GLYPHS_DIR, LAYER_SUFFIX
from fontgarden.utils.parallel import parallel_map

logger = structlog.get_logger(__name__)


class FontgardenWriter:
    """Writes a Fontgarden to a directory.

    By default the target directory is removed and rebuilt in place, which
    is not atomic: a crash mid-save leaves a partial directory behind. With
    staged=True everything is written to a temporary sibling directory first
    and swapped into place with renames once complete.

    Example:
        writer = FontgardenWriter(fontgarden, Path("MyFamily.fontgarden"))
        writer.save()
    """

    def __init__(
        self,
        fontgarden: Fontgarden,
        path: Path,
        max_workers: int | None = None,
        staged: bool = False,
    ) -> None:
        """Initialize the writer.

        Args:
            fontgarden: The Fontgarden to write
            path: Target directory
            max_workers: Maximum worker threads for writing glyphs
            staged: Write to a temporary sibling and rename into place
        """
        self._fontgarden = fontgarden
        self._path = path
        self._max_workers = max_workers
        self._staged = staged

    def save(self) -> None:
        """Write the Fontgarden, replacing anything at the target path.

        Raises:
            CleanupError: If the existing target cannot be removed
            CreateDirError: If the target directory cannot be created
            CreateGlyphDirError: If a glyph directory cannot be created
            SaveLayerError: If a layer cannot be written or serialized
            SaveSetDataError: If a manifest cannot be written
        """
        if self._staged:
            self._save_staged()
        else:
            self._remove_existing(self._path)
            try:
                self._path.mkdir()
            except OSError as e:
                raise CreateDirError(self._path, str(e)) from e
            self._write_contents(self._path)

        logger.info(
            "Fontgarden saved",
            path=str(self._path),
            glyph_count=len(self._fontgarden),
            staged=self._staged,
        )

    def _save_staged(self) -> None:
        staging = self._path.with_name(f".{self._path.name}.{uuid.uuid4().hex}")
        try:
            # Umask default mode, or the mode of the directory being replaced.
            staging.mkdir()
            if self._path.is_dir():
                shutil.copymode(self._path, staging)
        except OSError as e:
            shutil.rmtree(staging, ignore_errors=True)
            raise CreateDirError(staging, str(e)) from e

        try:
            self._write_contents(staging)
        except BaseException:
            shutil.rmtree(staging, ignore_errors=True)
            raise

        backup: Path | None = None
        if self._path.exists():
            backup = staging.with_name(staging.name + ".old")
            try:
                self._path.rename(backup)
            except OSError as e:
                shutil.rmtree(staging, ignore_errors=True)
                raise CleanupError(self._path, str(e)) from e

        try:
            staging.rename(self._path)
        except OSError as e:
            if backup is not None:
                backup.rename(self._path)
            raise CreateDirError(self._path, str(e)) from e

        if backup is not None:
            self._remove_existing(backup)

    @staticmethod
    def _remove_existing(path: Path) -> None:
        if not path.exists() and not path.is_symlink():
            return
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
        except OSError as e:
            raise CleanupError(path, str(e)) from e

    def _write_contents(self, root: Path) -> None:
        sets = list(self._fontgarden.glyphs_by_set().items())
        parallel_map(
            lambda item: self._write_set(root, *item),
            sets,
            max_workers=self._max_workers,
        )

        glyphs_dir = root / GLYPHS_DIR
        non_empty = [
            (name, glyph)
            for name, glyph in self._fontgarden.glyphs.items()
            if not glyph.is_empty()
        ]
        parallel_map(
            lambda item: self._write_glyph(glyphs_dir, *item),
            non_empty,
            max_workers=self._max_workers,
        )

        logger.debug("Glyphs written", sets=len(sets), glyph_dirs=len(non_empty))

    def _write_set(self, root: Path, set_name: str, glyph_names: list[str]) -> None:
        glyphs = self._fontgarden.glyphs
        records = [
            SetRecord(
                name=name,
                postscript_name=glyphs[name].postscript_name,
                codepoints=glyphs[name].codepoints,
                opentype_category=glyphs[name].opentype_category,
            )
            for name in glyph_names
        ]
        try:
            write_set_file(root / set_filename(set_name), records)
        except OSError as e:
            raise SaveSetDataError(set_name, str(e)) from e

    @staticmethod
    def _write_glyph(glyphs_dir: Path, glyph_name: str, glyph: Glyph) -> None:
        glyph_dir = glyphs_dir / name_to_filename(glyph_name)
        try:
            glyph_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CreateGlyphDirError(glyph_name, str(e)) from e

        for layer_name, layer in glyph.layers.items():
            if layer.is_empty():
                continue
            # Not with_suffix(): it would replace ".background" in "Bold.background".
            layer_path = glyph_dir / f"{name_to_filename(layer_name)}{LAYER_SUFFIX}"
            try:
                payload = json.dumps(layer.to_dict(), indent=2, ensure_ascii=False)
            except (TypeError, ValueError) as e:
                raise SaveLayerError(glyph_name, layer_name, str(e)) from e
            try:
                layer_path.write_text(payload, encoding="utf-8")
            except OSError as e:
                raise SaveLayerError(glyph_name, layer_name, str(e)) from e
