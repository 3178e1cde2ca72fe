"""Fontgarden - A diff-friendly interchange format for multi-source font data.

Fontgarden stores the glyphs of a font project (outlines, anchors, components
and per-style metrics) in a directory layout that is stable under version
control, and keeps it synchronized with externally edited UFO sources.

Example:
    $ fontgarden import MyFamily.fontgarden MyFamily-Regular.ufo MyFamily-Bold.ufo
    $ fontgarden export MyFamily.fontgarden --output-dir build/

The first command writes MyFamily.fontgarden with one layer per style for every
glyph; the second writes Regular.ufo and Bold.ufo back out.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
