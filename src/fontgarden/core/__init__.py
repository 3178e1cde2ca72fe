"""Core algorithms for fontgarden.

This module contains the core algorithms for:

- Merging UFO sources into a Fontgarden (layer naming, metadata sourcing)
- Computing which glyphs an import adds, modifies or removes
- Exporting a Fontgarden back to one UFO per style
- Guessing the set (script) of newly imported glyphs

Key classes:
- SourceMerger: Folds UFO sources into a Fontgarden
- SelectiveImporter: Merges and drops stale layers, scoped by sets
- SourceExporter: Rebuilds UFO sources from a Fontgarden
- GlyphDataCategorizer: Default script lookup backed by glyphsLib data
- FontgardenProcessor: Import and export orchestration
"""

from fontgarden.core.categorize import Categorizer, GlyphDataCategorizer, categorize_glyph
from fontgarden.core.diff import (
    ImportDiff,
    SelectiveImporter,
    component_closure,
    compute_import_diff,
    source_glyph_names,
)
from fontgarden.core.exporter import SourceExporter
from fontgarden.core.merger import SourceMerger, select_default_style
from fontgarden.core.processor import FontgardenProcessor

__all__ = [
    # Categorization
    "Categorizer",
    "GlyphDataCategorizer",
    "categorize_glyph",
    # Diff
    "ImportDiff",
    "SelectiveImporter",
    "component_closure",
    "compute_import_diff",
    "source_glyph_names",
    # Export
    "SourceExporter",
    # Merge
    "SourceMerger",
    "select_default_style",
    # Orchestration
    "FontgardenProcessor",
]
