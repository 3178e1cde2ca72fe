"""Import and export orchestration.

This module coordinates the two end-to-end workflows:

- import: load UFO sources, load (or start) a Fontgarden, compute the
  import diff, merge, and save
- export: load a Fontgarden, rebuild one UFO per style, and write them

Key components:
- FontgardenProcessor: Main orchestrator class
"""

import time
from collections.abc import Sequence
from pathlib import Path

import structlog

from fontgarden.config import FontgardenSettings
from fontgarden.core.categorize import Categorizer
from fontgarden.core.diff import SelectiveImporter
from fontgarden.core.exporter import SourceExporter
from fontgarden.core.merger import SourceMerger
from fontgarden.domain import Fontgarden
from fontgarden.exceptions import NoSourcesError
from fontgarden.io import FontgardenReader, FontgardenWriter, load_sources, save_sources
from fontgarden.utils import OperationStats


class FontgardenProcessor:
    """Orchestrates imports into and exports out of a Fontgarden.

    Example:
        settings = FontgardenSettings()
        processor = FontgardenProcessor(settings)
        stats = processor.import_sources(
            target=Path("MyFamily.fontgarden"),
            source_paths=[Path("MyFamily-Regular.ufo"), Path("MyFamily-Bold.ufo")],
        )
    """

    def __init__(
        self,
        config: FontgardenSettings,
        categorizer: Categorizer | None = None,
    ) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Fontgarden settings
            categorizer: Script lookup for new glyphs (default: glyphsLib data)
        """
        self.config = config
        self.logger = structlog.get_logger("fontgarden")
        self.merger = SourceMerger(
            categorizer=categorizer,
            default_style_name=config.imports.default_style_name,
        )

    @property
    def max_workers(self) -> int | None:
        return self.config.processing.max_workers

    def import_sources(
        self,
        target: Path,
        source_paths: Sequence[Path],
        target_sets: Sequence[str] = (),
    ) -> OperationStats:
        """Import UFO sources into the Fontgarden at target.

        If target does not exist yet, a new Fontgarden is created.

        Args:
            target: Fontgarden directory to update or create
            source_paths: UFO sources to import
            target_sets: Sets the import is limited to; empty means all

        Returns:
            OperationStats with the import diff and timing

        Raises:
            NoSourcesError: If no source paths are given
            FontgardenError: For any load, merge or save failure
        """
        stats = OperationStats()
        stats.start_time = time.time()

        if not source_paths:
            raise NoSourcesError()

        self.logger.info(
            "Starting import",
            target=str(target),
            sources=[str(p) for p in source_paths],
            target_sets=list(target_sets),
        )

        sources = load_sources(source_paths, self.config.imports.default_style_name)
        stats.sources_read = len(sources)

        if target.exists():
            fontgarden = FontgardenReader(target, max_workers=self.max_workers).load()
        else:
            fontgarden = Fontgarden()

        diff = SelectiveImporter(self.merger).apply(fontgarden, sources, target_sets)
        stats.added = sorted(diff.added)
        stats.modified = sorted(diff.modified)
        stats.removed = sorted(diff.removed)

        FontgardenWriter(
            fontgarden,
            target,
            max_workers=self.max_workers,
            staged=self.config.storage.staged_save,
        ).save()
        stats.glyph_count = len(fontgarden)
        stats.output_paths = [target]

        stats.end_time = time.time()
        self.logger.info(
            "Import complete",
            glyph_count=stats.glyph_count,
            added=len(stats.added),
            modified=len(stats.modified),
            removed=len(stats.removed),
            duration_seconds=round(stats.duration_seconds, 2),
        )
        return stats

    def export_sources(
        self,
        fontgarden_path: Path,
        output_dir: Path | None = None,
        style_names: Sequence[str] = (),
    ) -> OperationStats:
        """Export the Fontgarden at fontgarden_path to UFO sources.

        Args:
            fontgarden_path: Fontgarden directory to read
            output_dir: Directory for the UFOs (default: the Fontgarden's parent)
            style_names: Styles to export; empty means all

        Returns:
            OperationStats with written paths and timing

        Raises:
            FontgardenError: For any load, naming or write failure
        """
        stats = OperationStats()
        stats.start_time = time.time()

        if output_dir is None:
            output_dir = fontgarden_path.resolve().parent

        self.logger.info(
            "Starting export",
            fontgarden=str(fontgarden_path),
            output_dir=str(output_dir),
            styles=list(style_names),
        )

        fontgarden = FontgardenReader(fontgarden_path, max_workers=self.max_workers).load()
        stats.glyph_count = len(fontgarden)

        fonts = SourceExporter(max_workers=self.max_workers).export(fontgarden, style_names)
        stats.output_paths = save_sources(fonts, output_dir, max_workers=self.max_workers)
        stats.sources_written = len(stats.output_paths)

        stats.end_time = time.time()
        self.logger.info(
            "Export complete",
            sources=[str(p) for p in stats.output_paths],
            duration_seconds=round(stats.duration_seconds, 2),
        )
        return stats
