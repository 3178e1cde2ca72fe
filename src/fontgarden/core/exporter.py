"""Source exporter rebuilding UFO sources from a Fontgarden.

This module provides the SourceExporter class, the inverse of the
SourceMerger: one UFO font per style, with every sublayer restored as a
UFO layer and glyph metadata written back to the font lib.
"""

from collections.abc import Collection

import structlog
from ufoLib2 import Font

from fontgarden.core.merger import (
    BACKGROUND_SUBLAYER,
    BACKGROUND_UFO_LAYER,
    OPENTYPE_CATEGORIES_KEY,
    POSTSCRIPT_NAMES_KEY,
)
from fontgarden.domain import Fontgarden, OpenTypeCategory, split_layer_name
from fontgarden.io.converter import check_name, layer_to_ufo_glyph
from fontgarden.utils.parallel import parallel_map

logger = structlog.get_logger(__name__)


def ufo_layer_name_for(sublayer_name: str) -> str:
    """UFO layer name a sublayer is written to."""
    if sublayer_name == BACKGROUND_SUBLAYER:
        return BACKGROUND_UFO_LAYER
    return sublayer_name


class SourceExporter:
    """Builds one UFO font per style from a Fontgarden.

    Primary layers go to the font's default layer and carry the glyph's
    code points; sublayers go to a UFO layer of the same name, without
    code points. Export names and non-default OpenType categories of all
    exported glyphs are attached to every produced font.

    Example:
        exporter = SourceExporter()
        fonts = exporter.export(fontgarden, style_names={"Bold"})
        fonts["Bold"].save("Bold.ufo")
    """

    def __init__(self, max_workers: int | None = None) -> None:
        """Initialize the exporter.

        Args:
            max_workers: Maximum worker threads, one output font per task
        """
        self._max_workers = max_workers

    def export(
        self,
        fontgarden: Fontgarden,
        style_names: Collection[str] = (),
    ) -> dict[str, Font]:
        """Export UFO fonts for the requested styles.

        Args:
            fontgarden: Fontgarden to export
            style_names: Styles to export; empty means every style

        Returns:
            Mapping from style name to newly built font

        Raises:
            NamingError: If a glyph, layer, anchor or component name breaks
                UFO naming rules
        """
        wanted = set(style_names)
        styles = sorted(
            style for style in fontgarden.style_names() if not wanted or style in wanted
        )

        for glyph_name in fontgarden.glyphs:
            check_name("glyph", glyph_name, glyph_name)

        postscript_names, categories = self._collect_lib_data(fontgarden, set(styles))

        fonts = parallel_map(
            lambda style: self._build_source(fontgarden, style),
            styles,
            max_workers=self._max_workers,
        )

        sources: dict[str, Font] = {}
        for style_name, font in zip(styles, fonts):
            font.info.styleName = style_name
            if postscript_names:
                font.lib[POSTSCRIPT_NAMES_KEY] = dict(postscript_names)
            if categories:
                font.lib[OPENTYPE_CATEGORIES_KEY] = dict(categories)
            sources[style_name] = font

        logger.info("Sources exported", styles=styles, glyph_count=len(fontgarden))
        return sources

    @staticmethod
    def _collect_lib_data(
        fontgarden: Fontgarden, styles: set[str]
    ) -> tuple[dict[str, str], dict[str, str]]:
        postscript_names: dict[str, str] = {}
        categories: dict[str, str] = {}
        for glyph_name in sorted(fontgarden.glyphs):
            glyph = fontgarden.glyphs[glyph_name]
            if not any(layer_name in styles for layer_name in glyph.layers):
                continue
            if glyph.postscript_name is not None:
                postscript_names[glyph_name] = glyph.postscript_name
            if glyph.opentype_category != OpenTypeCategory.UNASSIGNED:
                categories[glyph_name] = glyph.opentype_category.value
        return postscript_names, categories

    @staticmethod
    def _build_source(fontgarden: Fontgarden, style_name: str) -> Font:
        font = Font()
        for glyph_name in sorted(fontgarden.glyphs):
            glyph = fontgarden.glyphs[glyph_name]
            for layer_name in sorted(glyph.layers):
                style, sublayer_name = split_layer_name(layer_name)
                if style != style_name:
                    continue

                if sublayer_name is None:
                    ufo_layer = font.layers.defaultLayer
                    codepoints = glyph.codepoints
                else:
                    check_name("layer", glyph_name, sublayer_name)
                    ufo_layer_name = ufo_layer_name_for(sublayer_name)
                    if ufo_layer_name in font.layers:
                        ufo_layer = font.layers[ufo_layer_name]
                    else:
                        ufo_layer = font.layers.newLayer(ufo_layer_name)
                    codepoints = None

                ufo_glyph = ufo_layer.newGlyph(glyph_name)
                layer_to_ufo_glyph(glyph.layers[layer_name], ufo_glyph, codepoints)
        return font
