"""Tests for script lookup of newly imported glyphs."""

import pytest

from conftest import StubCategorizer
from fontgarden.core.categorize import GlyphDataCategorizer, categorize_glyph


class TestCategorizeGlyph:
    """Tests for the lookup order of categorize_glyph."""

    def test_first_codepoint_decides(self) -> None:
        categorizer = StubCategorizer(by_codepoint={0x41: "Latin", 0x391: "Greek"})
        assert categorize_glyph("A", [0x391, 0x41], categorizer) == "Greek"
        assert categorize_glyph("A", [0x41, 0x391], categorizer) == "Latin"

    def test_codepoint_miss_does_not_fall_through(self) -> None:
        """Test names are not consulted when the glyph has code points."""
        categorizer = StubCategorizer(by_name={"A": "Latin"})
        assert categorize_glyph("A", [0xE000], categorizer) is None
        assert categorizer.calls == [("codepoint", 0xE000)]

    def test_full_name(self) -> None:
        categorizer = StubCategorizer(by_name={"a.sc": "Latin", "a": "Cyrillic"})
        assert categorize_glyph("a.sc", [], categorizer) == "Latin"

    def test_base_name_fallback(self) -> None:
        """Test the part before the first dot is tried when the full name is unknown."""
        categorizer = StubCategorizer(by_name={"alpha": "Greek"})
        assert categorize_glyph("alpha.ss01.alt", [], categorizer) == "Greek"
        assert categorizer.calls == [("name", "alpha.ss01.alt"), ("name", "alpha")]

    def test_no_match(self) -> None:
        categorizer = StubCategorizer()
        assert categorize_glyph("foo", [], categorizer) is None
        assert categorizer.calls == [("name", "foo")]

    def test_no_match_with_suffix(self) -> None:
        assert categorize_glyph("foo.bar", [], StubCategorizer()) is None


class TestGlyphDataCategorizer:
    """Tests against the GlyphData tables shipped with glyphsLib."""

    @pytest.fixture(scope="class")
    def glyph_data(self) -> GlyphDataCategorizer:
        return GlyphDataCategorizer()

    @pytest.mark.parametrize(
        ("codepoint", "script"),
        [(0x0041, "Latin"), (0x0061, "Latin"), (0x03B1, "Greek"), (0x0430, "Cyrillic")],
    )
    def test_lookup_by_codepoint(
        self, glyph_data: GlyphDataCategorizer, codepoint: int, script: str
    ) -> None:
        assert glyph_data.lookup_by_codepoint(codepoint) == script

    def test_lookup_by_name(self, glyph_data: GlyphDataCategorizer) -> None:
        assert glyph_data.lookup_by_name("A") == "Latin"
        assert glyph_data.lookup_by_name("alpha") == "Greek"

    def test_unknown(self, glyph_data: GlyphDataCategorizer) -> None:
        assert glyph_data.lookup_by_name("definitely-not-a-glyph") is None

    def test_no_script_for_common_glyphs(self, glyph_data: GlyphDataCategorizer) -> None:
        """Test glyphs without a script attribute are left uncategorized."""
        assert glyph_data.lookup_by_codepoint(0x0030) is None
