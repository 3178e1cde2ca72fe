"""Reading and writing UFO sources.

Each UFO source is one style of the family. Its style name comes from the
font info's styleName, defaulting to "Regular".
"""

from collections.abc import Iterable, Mapping
from pathlib import Path

import structlog
from ufoLib2 import Font

from fontgarden.exceptions import DuplicateStyleError, SourceLoadError, SourceWriteError
from fontgarden.utils.parallel import parallel_map

DEFAULT_STYLE_NAME = "Regular"
UFO_SUFFIX = ".ufo"

logger = structlog.get_logger(__name__)


def style_name_of(font: Font, default: str = DEFAULT_STYLE_NAME) -> str:
    """Style name of a source, falling back to the default style name."""
    return font.info.styleName or default


def load_sources(
    paths: Iterable[Path],
    default_style_name: str = DEFAULT_STYLE_NAME,
) -> dict[str, Font]:
    """Load UFO sources and key them by style name.

    Args:
        paths: Paths to UFO directories
        default_style_name: Style name for sources that carry none

    Returns:
        Mapping from style name to loaded font, in the order given

    Raises:
        SourceLoadError: If a UFO cannot be loaded
        DuplicateStyleError: If two sources share a style name
    """
    sources: dict[str, Font] = {}
    for path in paths:
        try:
            font = Font.open(path)
        except Exception as e:
            raise SourceLoadError(path, str(e)) from e

        style_name = style_name_of(font, default_style_name)
        if style_name in sources:
            raise DuplicateStyleError(style_name, path)
        sources[style_name] = font
        logger.debug("Source loaded", path=str(path), style=style_name)

    return sources


def source_path_for(output_dir: Path, style_name: str) -> Path:
    """Path a style's UFO is written to inside the output directory."""
    return output_dir / f"{style_name}{UFO_SUFFIX}"


def save_sources(
    sources: Mapping[str, Font],
    output_dir: Path,
    max_workers: int | None = None,
) -> list[Path]:
    """Write every source to "<output_dir>/<style>.ufo", replacing existing ones.

    Args:
        sources: Mapping from style name to font
        output_dir: Directory to write into (created if missing)
        max_workers: Maximum worker threads, one source per task

    Returns:
        Paths written, in the order of the mapping

    Raises:
        SourceWriteError: If a UFO cannot be written
    """
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SourceWriteError(output_dir, str(e)) from e

    def write(item: tuple[str, Font]) -> Path:
        style_name, font = item
        path = source_path_for(output_dir, style_name)
        try:
            font.save(path, overwrite=True)
        except Exception as e:
            raise SourceWriteError(path, str(e)) from e
        logger.debug("Source written", path=str(path), style=style_name)
        return path

    return parallel_map(write, list(sources.items()), max_workers=max_workers)
