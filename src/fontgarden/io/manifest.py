"""Set manifest files.

Each set of glyphs is listed in one CSV file, "set.<set name>.csv" (run
through the filename codec), with the header:

    name,postscript_name,codepoints,opentype_category

Code points are written as space-separated uppercase hexadecimal numbers
with at least four digits, e.g. "0041 00C0".
"""

import csv
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from fontgarden.domain import OpenTypeCategory
from fontgarden.exceptions import InvalidCodepointsError
from fontgarden.io.filenames import filename_to_name, name_to_filename

SET_FILE_PREFIX = "set."
SET_FILE_SUFFIX = ".csv"
FIELDNAMES = ["name", "postscript_name", "codepoints", "opentype_category"]

_HEX_RE = re.compile(r"[0-9A-Fa-f]+")
MAX_CODEPOINT = 0x10FFFF


@dataclass
class SetRecord:
    """One row of a set manifest."""

    name: str
    postscript_name: str | None = None
    codepoints: set[int] = field(default_factory=set)
    opentype_category: OpenTypeCategory = OpenTypeCategory.UNASSIGNED


def format_codepoints(codepoints: Iterable[int]) -> str:
    """Format code points as sorted, space-joined, 4-digit-minimum uppercase hex."""
    return " ".join(f"{codepoint:04X}" for codepoint in sorted(codepoints))


def parse_codepoints(value: str) -> set[int]:
    """Parse a space-separated list of hexadecimal code points.

    Raises:
        InvalidCodepointsError: If an entry is not hex or not a Unicode scalar value
    """
    codepoints: set[int] = set()
    for token in value.split():
        if not _HEX_RE.fullmatch(token):
            raise InvalidCodepointsError(value, f"'{token}' is not a hexadecimal number")
        codepoint = int(token, 16)
        if codepoint > MAX_CODEPOINT or 0xD800 <= codepoint <= 0xDFFF:
            raise InvalidCodepointsError(value, f"'{token}' is not a Unicode scalar value")
        codepoints.add(codepoint)
    return codepoints


def set_filename(set_name: str) -> str:
    """Filename of the manifest for a set."""
    return name_to_filename(f"{SET_FILE_PREFIX}{set_name}{SET_FILE_SUFFIX}")


def set_name_from_path(path: Path) -> str | None:
    """Set name encoded in a manifest path, or None if it is not a manifest."""
    if path.suffix != SET_FILE_SUFFIX:
        return None
    stem = filename_to_name(path.stem)
    if not stem.startswith(SET_FILE_PREFIX):
        return None
    return stem[len(SET_FILE_PREFIX):]


def read_set_file(path: Path) -> Iterator[SetRecord]:
    """Read the records of a manifest.

    Raises:
        OSError: If the file cannot be read
        csv.Error: If the CSV structure is broken
        ValueError: If the header or a field is invalid
    """
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        missing = [name for name in ("name", "codepoints") if name not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"missing column(s): {', '.join(missing)}")

        for row in reader:
            name = row["name"]
            if not name:
                raise ValueError(f"line {reader.line_num}: empty glyph name")
            category = row.get("opentype_category") or OpenTypeCategory.UNASSIGNED.value
            yield SetRecord(
                name=name,
                postscript_name=row.get("postscript_name") or None,
                codepoints=parse_codepoints(row["codepoints"] or ""),
                opentype_category=OpenTypeCategory.parse(category),
            )


def write_set_file(path: Path, records: Iterable[SetRecord]) -> None:
    """Write the records of a manifest in the given order.

    Raises:
        OSError: If the file cannot be written
    """
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(FIELDNAMES)
        for record in records:
            writer.writerow(
                [
                    record.name,
                    record.postscript_name or "",
                    format_codepoints(record.codepoints),
                    record.opentype_category.value,
                ]
            )
