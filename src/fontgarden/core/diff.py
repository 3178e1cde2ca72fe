"""Selective re-import of sources into an existing Fontgarden.

When sources are re-imported for only some sets, the glyphs of those sets
(plus every glyph they use as a component, transitively) form the
reference set. Comparing it with the glyphs present in the sources tells
which glyphs were added, modified or removed.
"""

from collections.abc import Collection, Iterable, Mapping
from dataclasses import dataclass, field

import structlog
from ufoLib2 import Font

from fontgarden.core.merger import SourceMerger
from fontgarden.domain import Fontgarden, set_label, set_value

logger = structlog.get_logger(__name__)


@dataclass
class ImportDiff:
    """Glyph-name sets describing what an import changes.

    Attributes:
        added: Glyphs in the sources that the Fontgarden does not have yet
        modified: Reference glyphs that the sources also contain
        removed: Reference glyphs missing from the sources
    """

    added: set[str] = field(default_factory=set)
    modified: set[str] = field(default_factory=set)
    removed: set[str] = field(default_factory=set)


def source_glyph_names(sources: Mapping[str, Font]) -> set[str]:
    """Names of all glyphs in any layer of any source."""
    names: set[str] = set()
    for font in sources.values():
        for layer in font.layers:
            names.update(layer.keys())
    return names


def component_closure(fontgarden: Fontgarden, glyph_names: Iterable[str]) -> set[str]:
    """Extend glyph names with every stored glyph they reference as a component.

    References are followed transitively across all layers. Names that the
    Fontgarden does not contain are not added. Reference cycles are fine.
    """
    closure = {name for name in glyph_names if name in fontgarden.glyphs}
    pending = list(closure)
    while pending:
        glyph = fontgarden.glyphs[pending.pop()]
        for base_name in glyph.component_names():
            if base_name in fontgarden.glyphs and base_name not in closure:
                closure.add(base_name)
                pending.append(base_name)
    return closure


def compute_import_diff(
    fontgarden: Fontgarden,
    import_names: set[str],
    target_sets: Collection[str] = (),
) -> ImportDiff:
    """Compare the glyphs being imported with the ones in scope.

    Args:
        fontgarden: Fontgarden before the import, with layers loaded
        import_names: Names of all glyphs in the sources
        target_sets: Set labels the import is limited to; empty means all glyphs

    Returns:
        ImportDiff with added, modified and removed glyph names
    """
    all_names = set(fontgarden.glyphs)
    if not target_sets:
        reference = all_names
    else:
        targets = set(target_sets)
        in_targets = [
            name for name, glyph in fontgarden.glyphs.items() if set_label(glyph.set) in targets
        ]
        reference = component_closure(fontgarden, in_targets)

    return ImportDiff(
        added=import_names - all_names,
        modified=reference & import_names,
        removed=reference - import_names,
    )


class SelectiveImporter:
    """Imports sources into an existing Fontgarden, limited to target sets.

    The merge itself always covers everything in the sources. Afterwards,
    glyphs in the reference set that the sources no longer contain lose
    the layers of the imported styles; layers of other styles stay. With
    exactly one target set, newly added glyphs are filed into it.

    Example:
        importer = SelectiveImporter(SourceMerger())
        diff = importer.apply(fontgarden, sources, target_sets=["Latin"])
    """

    def __init__(self, merger: SourceMerger) -> None:
        self.merger = merger

    def apply(
        self,
        fontgarden: Fontgarden,
        sources: Mapping[str, Font],
        target_sets: Collection[str] = (),
    ) -> ImportDiff:
        """Merge sources and drop stale layers.

        Args:
            fontgarden: Fontgarden to update in place
            sources: Mapping from style name to UFO font
            target_sets: Set labels the import is limited to

        Returns:
            The ImportDiff computed before merging
        """
        diff = compute_import_diff(fontgarden, source_glyph_names(sources), target_sets)

        self.merger.merge(fontgarden, sources)

        for glyph_name in diff.removed:
            glyph = fontgarden.glyphs[glyph_name]
            for style_name in sources:
                glyph.remove_style_layers(style_name)

        if len(target_sets) == 1:
            (target,) = target_sets
            for glyph_name in diff.added:
                fontgarden.glyphs[glyph_name].set = set_value(target)

        logger.info(
            "Import applied",
            target_sets=sorted(target_sets),
            added=len(diff.added),
            modified=len(diff.modified),
            removed=len(diff.removed),
        )
        return diff
