"""Script lookup used to file new glyphs into sets.

The lookup is a pluggable capability: anything with lookup_by_codepoint
and lookup_by_name satisfies the Categorizer protocol. The default
implementation reads the GlyphData tables bundled with glyphsLib.
"""

import threading
from collections.abc import Sequence
from importlib.resources import files
from typing import Protocol

from glyphsLib.glyphdata import GlyphData

GLYPHDATA_PACKAGE = "glyphsLib.data"
GLYPHDATA_FILES = ("GlyphData.xml", "GlyphData_Ideographs.xml")


class Categorizer(Protocol):
    """Maps code points and glyph names to a script name."""

    def lookup_by_codepoint(self, codepoint: int) -> str | None: ...

    def lookup_by_name(self, name: str) -> str | None: ...


class GlyphDataCategorizer:
    """Categorizer backed by glyphsLib's GlyphData XML tables.

    The tables are parsed on first use. Script names are title-cased, so
    "latin" becomes "Latin".

    Example:
        categorizer = GlyphDataCategorizer()
        categorizer.lookup_by_codepoint(0x0041)  # "Latin"
        categorizer.lookup_by_name("a-cy")  # "Cyrillic"
    """

    def __init__(self, data: GlyphData | None = None) -> None:
        self._data = data
        self._lock = threading.Lock()

    @property
    def data(self) -> GlyphData:
        with self._lock:
            if self._data is None:
                self._data = _load_glyph_data()
            return self._data

    def lookup_by_codepoint(self, codepoint: int) -> str | None:
        attributes = self.data.unicodes.get(f"{codepoint:04X}")
        return _script_of(attributes)

    def lookup_by_name(self, name: str) -> str | None:
        attributes = self.data.names.get(name)
        return _script_of(attributes)


def _load_glyph_data() -> GlyphData:
    package = files(GLYPHDATA_PACKAGE)
    handles = [package.joinpath(name).open("rb") for name in GLYPHDATA_FILES]
    try:
        return GlyphData.from_files(*handles)
    finally:
        for handle in handles:
            handle.close()


def _script_of(attributes: dict[str, str] | None) -> str | None:
    if not attributes:
        return None
    script = attributes.get("script")
    if not script:
        return None
    return script[0].upper() + script[1:]


def categorize_glyph(
    name: str,
    codepoints: Sequence[int],
    categorizer: Categorizer,
) -> str | None:
    """Guess the set (script) a glyph belongs to.

    The first code point decides if there is one. Otherwise the full glyph
    name is looked up, then the part of the name before the first ".".

    Args:
        name: Glyph name
        codepoints: Code points in source order
        categorizer: Script lookup

    Returns:
        Script name, or None if nothing matched
    """
    if codepoints:
        return categorizer.lookup_by_codepoint(codepoints[0])
    script = categorizer.lookup_by_name(name)
    if script is not None:
        return script
    # FIXME: this files danda-deva.loclBENG under Devanagari because its base
    # glyph is. Localized variants should stay with their own script.
    base_name, separator, _ = name.partition(".")
    if separator:
        return categorizer.lookup_by_name(base_name)
    return None
