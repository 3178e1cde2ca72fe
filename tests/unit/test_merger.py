"""Tests for merging UFO sources into a Fontgarden."""

import pytest
from ufoLib2 import Font

from conftest import StubCategorizer, add_glyph, make_source, square
from fontgarden.core.merger import (
    OPENTYPE_CATEGORIES_KEY,
    POSTSCRIPT_NAMES_KEY,
    SourceMerger,
    select_default_style,
)
from fontgarden.domain import Fontgarden, Glyph, Layer, OpenTypeCategory
from fontgarden.exceptions import NoSourcesError


class TestSelectDefaultStyle:
    """Tests for picking the metadata source."""

    def test_regular_preferred(self) -> None:
        assert select_default_style(["Bold", "Regular", "Black"]) == "Regular"

    def test_smallest_name_otherwise(self) -> None:
        assert select_default_style(["Light", "Bold", "Black"]) == "Black"

    def test_configured_default(self) -> None:
        assert select_default_style(["Bold", "Regular"], default_style_name="Bold") == "Bold"

    def test_no_styles(self) -> None:
        with pytest.raises(NoSourcesError):
            select_default_style([])


class TestSourceMerger:
    """Tests for SourceMerger."""

    @pytest.mark.parametrize("order", [("Bold", "Regular"), ("Regular", "Bold")])
    def test_layers_from_every_style_codepoints_from_regular(
        self, categorizer: StubCategorizer, order: tuple[str, str]
    ) -> None:
        """Test one glyph collects all styles, and Regular supplies code points."""
        bold = make_source("Bold")
        add_glyph(bold, "A", unicodes=[0x41, 0xC0], width=600, contours=[square()])
        regular = make_source("Regular")
        add_glyph(regular, "A", unicodes=[0x41], width=500, contours=[square()])
        by_style = {"Bold": bold, "Regular": regular}

        fontgarden = Fontgarden()
        SourceMerger(categorizer=categorizer).merge(
            fontgarden, {style: by_style[style] for style in order}
        )

        glyph = fontgarden.glyphs["A"]
        assert set(glyph.layers) == {"Regular", "Bold"}
        assert glyph.codepoints == {0x41}
        assert glyph.layers["Bold"].x_advance == 600.0
        assert glyph.layers["Regular"].x_advance == 500.0

    def test_layer_count(self, categorizer: StubCategorizer) -> None:
        sources = {
            "Regular": make_source("Regular", ["a", "b"]),
            "Bold": make_source("Bold", ["a"]),
        }
        assert SourceMerger(categorizer=categorizer).merge(Fontgarden(), sources) == 3

    def test_sublayer_names(self, categorizer: StubCategorizer) -> None:
        """Test background and other UFO layers get compound names."""
        font = make_source("Bold", ["a"])
        add_glyph(font, "a", width=0, layer_name="public.background")
        add_glyph(font, "a", width=0, layer_name="sketch")

        fontgarden = Fontgarden()
        SourceMerger(categorizer=categorizer).merge(fontgarden, {"Bold": font})
        assert set(fontgarden.glyphs["a"].layers) == {"Bold", "Bold.background", "Bold.sketch"}

    def test_glyph_only_in_sublayer(self, categorizer: StubCategorizer) -> None:
        """Test a glyph present only in a secondary layer gets no metadata."""
        font = make_source("Regular")
        add_glyph(font, "b", unicodes=[0x62], layer_name="public.background")

        fontgarden = Fontgarden()
        SourceMerger(categorizer=categorizer).merge(fontgarden, {"Regular": font})
        glyph = fontgarden.glyphs["b"]
        assert glyph.codepoints == set()
        assert glyph.set is None
        assert list(glyph.layers) == ["Regular.background"]

    def test_new_glyphs_categorized(self, categorizer: StubCategorizer) -> None:
        font = make_source("Regular", ["a", "space"])
        add_glyph(font, "alpha", unicodes=[0x3B1])

        fontgarden = Fontgarden()
        SourceMerger(categorizer=categorizer).merge(fontgarden, {"Regular": font})
        assert fontgarden.glyphs["a"].set == "Latin"
        assert fontgarden.glyphs["alpha"].set == "Greek"
        assert fontgarden.glyphs["space"].set is None

    def test_existing_set_kept(self, categorizer: StubCategorizer) -> None:
        """Test a glyph that already has a set is not recategorized."""
        fontgarden = Fontgarden(glyphs={"a": Glyph(set="Custom")})
        SourceMerger(categorizer=categorizer).merge(
            fontgarden, {"Regular": make_source("Regular", ["a"])}
        )
        assert fontgarden.glyphs["a"].set == "Custom"

    def test_existing_layers_of_other_styles_kept(self, categorizer: StubCategorizer) -> None:
        fontgarden = Fontgarden(
            glyphs={"a": Glyph(codepoints={0x61}, layers={"Light": Layer(x_advance=400.0)})}
        )
        SourceMerger(categorizer=categorizer).merge(
            fontgarden, {"Regular": make_source("Regular", ["a"])}
        )
        assert set(fontgarden.glyphs["a"].layers) == {"Light", "Regular"}

    def test_codepoints_replaced(self, categorizer: StubCategorizer) -> None:
        fontgarden = Fontgarden(glyphs={"a": Glyph(codepoints={0x61, 0x251})})
        SourceMerger(categorizer=categorizer).merge(
            fontgarden, {"Regular": make_source("Regular", ["a"])}
        )
        assert fontgarden.glyphs["a"].codepoints == {0x61}

    def test_lib_overrides_from_default_source(self, categorizer: StubCategorizer) -> None:
        """Test export names and categories come from the default source lib."""
        regular = make_source("Regular", ["a", "b"])
        regular.lib[POSTSCRIPT_NAMES_KEY] = {"a": "uni0061", "missing": "x"}
        regular.lib[OPENTYPE_CATEGORIES_KEY] = {"a": "base", "b": "mark"}
        bold = make_source("Bold", ["a"])
        bold.lib[POSTSCRIPT_NAMES_KEY] = {"a": "ignored"}

        fontgarden = Fontgarden()
        SourceMerger(categorizer=categorizer).merge(fontgarden, {"Bold": bold, "Regular": regular})

        assert fontgarden.glyphs["a"].postscript_name == "uni0061"
        assert fontgarden.glyphs["a"].opentype_category == OpenTypeCategory.BASE
        assert fontgarden.glyphs["b"].opentype_category == OpenTypeCategory.MARK
        assert fontgarden.glyphs["b"].postscript_name is None
        assert "missing" not in fontgarden.glyphs

    def test_unknown_category_becomes_unassigned(self, categorizer: StubCategorizer) -> None:
        regular = make_source("Regular", ["a"])
        regular.lib[OPENTYPE_CATEGORIES_KEY] = {"a": "spacing"}

        fontgarden = Fontgarden(glyphs={"a": Glyph(opentype_category=OpenTypeCategory.MARK)})
        SourceMerger(categorizer=categorizer).merge(fontgarden, {"Regular": regular})
        assert fontgarden.glyphs["a"].opentype_category == OpenTypeCategory.UNASSIGNED

    def test_style_name_is_mapping_key(self, categorizer: StubCategorizer) -> None:
        """Test layers are named after the key, not the font info."""
        font: Font = make_source("Whatever", ["a"])
        fontgarden = Fontgarden()
        SourceMerger(categorizer=categorizer).merge(fontgarden, {"Regular": font})
        assert list(fontgarden.glyphs["a"].layers) == ["Regular"]

    def test_no_sources(self, categorizer: StubCategorizer) -> None:
        with pytest.raises(NoSourcesError):
            SourceMerger(categorizer=categorizer).merge(Fontgarden(), {})
