"""Exception hierarchy for Fontgarden."""

from pathlib import Path


class FontgardenError(Exception):
    """Base exception for all Fontgarden errors."""

    pass


class LoadError(FontgardenError):
    """Errors related to loading a Fontgarden from disk."""

    pass


class NotAFontgardenError(LoadError):
    """The path to load is not a directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"A fontgarden must be a directory: '{path}'")


class StorageIOError(LoadError):
    """Filesystem access failed while loading."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read '{path}': {reason}")


class DuplicateGlyphError(LoadError):
    """A glyph name appears in more than one set manifest."""

    def __init__(self, set_name: str, glyph_name: str, other_set_name: str) -> None:
        self.set_name = set_name
        self.glyph_name = glyph_name
        self.other_set_name = other_set_name
        super().__init__(
            f"Cannot load set '{set_name}' as a glyph it contains is in set "
            f"'{other_set_name}' already: {glyph_name}"
        )


class SetDataError(LoadError):
    """A set manifest could not be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load set data '{path}': {reason}")


class InvalidCodepointsError(ValueError):
    """Code point text in a manifest is not a list of hexadecimal scalar values."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid codepoints '{value}': {reason}")


class LayerDataError(LoadError):
    """A layer payload file is malformed."""

    def __init__(self, path: Path, glyph_name: str, reason: str) -> None:
        self.path = path
        self.glyph_name = glyph_name
        self.reason = reason
        super().__init__(
            f"Failed to load layer data '{path}' of glyph '{glyph_name}': {reason}"
        )


class SaveError(FontgardenError):
    """Errors related to writing a Fontgarden to disk."""

    pass


class CleanupError(SaveError):
    """The pre-existing target directory could not be removed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(
            f"Failed to remove target directory '{path}' before overwriting: {reason}"
        )


class CreateDirError(SaveError):
    """The target Fontgarden directory could not be created."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to create target fontgarden directory '{path}': {reason}")


class CreateGlyphDirError(SaveError):
    """A glyph directory could not be created."""

    def __init__(self, glyph_name: str, reason: str) -> None:
        self.glyph_name = glyph_name
        self.reason = reason
        super().__init__(f"Failed to create directory for glyph '{glyph_name}': {reason}")


class SaveLayerError(SaveError):
    """A layer payload could not be written or serialized."""

    def __init__(self, glyph_name: str, layer_name: str, reason: str) -> None:
        self.glyph_name = glyph_name
        self.layer_name = layer_name
        self.reason = reason
        super().__init__(
            f"Failed to save glyph '{glyph_name}', layer '{layer_name}': {reason}"
        )


class SaveSetDataError(SaveError):
    """A set manifest could not be written."""

    def __init__(self, set_name: str, reason: str) -> None:
        self.set_name = set_name
        self.reason = reason
        super().__init__(f"Failed to save set data '{set_name}': {reason}")


class SourceError(FontgardenError):
    """Errors related to external UFO sources."""

    pass


class SourceLoadError(SourceError):
    """A UFO source could not be loaded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load UFO source '{path}': {reason}")


class DuplicateStyleError(SourceError):
    """Two sources resolve to the same style name."""

    def __init__(self, style_name: str, path: Path) -> None:
        self.style_name = style_name
        self.path = path
        super().__init__(
            f"More than one source uses the same style name '{style_name}', "
            f"last seen in '{path}'"
        )


class NoSourcesError(SourceError):
    """An import was requested without any sources."""

    def __init__(self) -> None:
        super().__init__("At least one source is required")


class SourceSaveError(SourceError):
    """Errors related to building or writing UFO sources."""

    pass


class NamingError(SourceSaveError):
    """A name is rejected by the UFO naming rules.

    Attributes:
        kind: What the name belongs to ("glyph", "anchor", "component", "layer")
        glyph_name: Glyph in which the offending name was found
        name: The offending name
    """

    def __init__(self, kind: str, glyph_name: str, name: str, reason: str) -> None:
        self.kind = kind
        self.glyph_name = glyph_name
        self.name = name
        self.reason = reason
        super().__init__(
            f"Invalid {kind} name {name!r} in glyph '{glyph_name}': {reason}"
        )


class SourceWriteError(SourceSaveError):
    """A UFO source could not be written to disk."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save UFO source '{path}': {reason}")
