"""The Fontgarden project model."""

from collections import defaultdict
from dataclasses import dataclass, field

from fontgarden.domain.glyph import Glyph, split_layer_name

COMMON_SET_NAME = "Common"


def set_label(set_name: str | None) -> str:
    """Name of the set a glyph is filed under, with None as "Common"."""
    return set_name if set_name is not None else COMMON_SET_NAME


def set_value(label: str) -> str | None:
    """Inverse of set_label: "Common" is stored as None."""
    return None if label == COMMON_SET_NAME else label


@dataclass
class Fontgarden:
    """A font project: all glyphs, keyed by their unique name.

    Relationships between glyphs (components) and between layers and styles
    are plain name lookups into this mapping.

    Attributes:
        glyphs: Glyphs keyed by glyph name
    """

    glyphs: dict[str, Glyph] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.glyphs)

    def __contains__(self, glyph_name: object) -> bool:
        return glyph_name in self.glyphs

    def glyphs_by_set(self) -> dict[str, list[str]]:
        """Group glyph names by set label, sorted by name within each set."""
        grouped: dict[str, list[str]] = defaultdict(list)
        for name in sorted(self.glyphs):
            grouped[set_label(self.glyphs[name].set)].append(name)
        return dict(grouped)

    def style_names(self) -> set[str]:
        """All style names that have at least one layer in any glyph."""
        return {
            split_layer_name(layer_name)[0]
            for glyph in self.glyphs.values()
            for layer_name in glyph.layers
        }
