"""Source merger folding UFO sources into a Fontgarden.

This module provides the SourceMerger class. Every layer of every source
becomes a compound-named layer on the glyphs it contains; glyph-level
metadata (code points, set, export names, categories) is taken from the
default source only.
"""

from collections.abc import Collection, Mapping

import structlog
from ufoLib2 import Font
from ufoLib2.objects import Layer as UfoLayer

from fontgarden.core.categorize import Categorizer, GlyphDataCategorizer, categorize_glyph
from fontgarden.domain import Fontgarden, Glyph, OpenTypeCategory, layer_name_for
from fontgarden.exceptions import NoSourcesError
from fontgarden.io.converter import ufo_glyph_to_layer
from fontgarden.io.sources import DEFAULT_STYLE_NAME

BACKGROUND_UFO_LAYER = "public.background"
BACKGROUND_SUBLAYER = "background"
POSTSCRIPT_NAMES_KEY = "public.postscriptNames"
OPENTYPE_CATEGORIES_KEY = "public.openTypeCategories"

logger = structlog.get_logger(__name__)


def select_default_style(
    style_names: Collection[str],
    default_style_name: str = DEFAULT_STYLE_NAME,
) -> str:
    """Pick the style that supplies glyph-level metadata.

    The default style name wins if present; otherwise the lexicographically
    smallest style name, so the choice does not depend on input order.

    Raises:
        NoSourcesError: If there are no styles
    """
    if not style_names:
        raise NoSourcesError()
    if default_style_name in style_names:
        return default_style_name
    return min(style_names)


def sublayer_name_for(font: Font, layer: UfoLayer) -> str | None:
    """Sublayer part of the compound layer name, or None for the default layer."""
    if layer.name == font.layers.defaultLayer.name:
        return None
    if layer.name == BACKGROUND_UFO_LAYER:
        return BACKGROUND_SUBLAYER
    return layer.name


class SourceMerger:
    """Merges UFO sources, keyed by style name, into a Fontgarden.

    Layers are stored or overwritten per compound layer name. Only the
    default source's default layer sets code points, and only for glyphs
    without a set does it ask the categorizer for one. Afterwards the
    default source's public.postscriptNames and public.openTypeCategories
    lib entries override the matching glyphs.

    Example:
        merger = SourceMerger()
        fontgarden = Fontgarden()
        merger.merge(fontgarden, {"Regular": regular, "Bold": bold})
    """

    def __init__(
        self,
        categorizer: Categorizer | None = None,
        default_style_name: str = DEFAULT_STYLE_NAME,
    ) -> None:
        """Initialize the merger.

        Args:
            categorizer: Script lookup for new glyphs (default: glyphsLib data)
            default_style_name: Style whose source supplies glyph metadata
        """
        self.categorizer: Categorizer = categorizer or GlyphDataCategorizer()
        self.default_style_name = default_style_name

    def merge(self, fontgarden: Fontgarden, sources: Mapping[str, Font]) -> int:
        """Merge sources into the Fontgarden in place.

        Args:
            fontgarden: Target Fontgarden
            sources: Mapping from style name to UFO font

        Returns:
            Number of glyph layers stored

        Raises:
            NoSourcesError: If sources is empty
        """
        default_style = select_default_style(sources, self.default_style_name)
        layer_count = 0

        for style_name, font in sources.items():
            is_default_source = style_name == default_style
            for ufo_layer in font.layers:
                sublayer_name = sublayer_name_for(font, ufo_layer)
                layer_name = layer_name_for(style_name, sublayer_name)
                takes_metadata = is_default_source and sublayer_name is None

                for ufo_glyph in ufo_layer:
                    glyph = fontgarden.glyphs.setdefault(ufo_glyph.name, Glyph())
                    if takes_metadata:
                        glyph.codepoints = set(ufo_glyph.unicodes)
                        if glyph.set is None:
                            glyph.set = categorize_glyph(
                                ufo_glyph.name, list(ufo_glyph.unicodes), self.categorizer
                            )
                    glyph.layers[layer_name] = ufo_glyph_to_layer(ufo_glyph)
                    layer_count += 1

        self._apply_lib_overrides(fontgarden, sources[default_style])

        logger.info(
            "Sources merged",
            styles=sorted(sources),
            default_style=default_style,
            layers=layer_count,
            glyph_count=len(fontgarden),
        )
        return layer_count

    @staticmethod
    def _apply_lib_overrides(fontgarden: Fontgarden, font: Font) -> None:
        postscript_names = font.lib.get(POSTSCRIPT_NAMES_KEY)
        if isinstance(postscript_names, Mapping):
            for glyph_name, postscript_name in postscript_names.items():
                glyph = fontgarden.glyphs.get(glyph_name)
                if glyph is not None:
                    glyph.postscript_name = (
                        postscript_name if isinstance(postscript_name, str) else None
                    )

        categories = font.lib.get(OPENTYPE_CATEGORIES_KEY)
        if isinstance(categories, Mapping):
            for glyph_name, category in categories.items():
                glyph = fontgarden.glyphs.get(glyph_name)
                if glyph is None:
                    continue
                try:
                    glyph.opentype_category = OpenTypeCategory.parse(category)
                except ValueError:
                    logger.warning(
                        "Unknown OpenType category, using unassigned",
                        glyph=glyph_name,
                        category=category,
                    )
                    glyph.opentype_category = OpenTypeCategory.UNASSIGNED
