"""Name <-> filename mapping safe for case-insensitive filesystems.

Every uppercase or titlecase character is followed by an underscore and
every literal underscore is doubled, so "A" becomes "A_" and "a_" becomes
"a__". The two can then live side by side even where the filesystem folds
case. An uppercase letter and its titlecase form (e.g. "Ǆ" and "ǅ") still
fold to the same filename.
"""

ESCAPE = "_"


def _is_cased_capital(char: str) -> bool:
    return char.isupper() or char.istitle()


def name_to_filename(name: str) -> str:
    """Transform a name so it cannot collide with a differently-cased name on disk.

    Args:
        name: Glyph, layer or set name

    Returns:
        Filesystem-safe filename (without extension)
    """
    parts: list[str] = []
    for char in name:
        if _is_cased_capital(char):
            parts.append(char)
            parts.append(ESCAPE)
        elif char == ESCAPE:
            parts.append(ESCAPE * 2)
        else:
            parts.append(char)
    return "".join(parts)


def filename_to_name(filename: str) -> str:
    """Recover the name a filename was produced from by name_to_filename.

    Args:
        filename: Filename (without extension)

    Returns:
        The original name
    """
    parts: list[str] = []
    previous_was_upper = False
    previous_was_escape = False
    for char in filename:
        if char == ESCAPE and (previous_was_upper or previous_was_escape):
            # The escape after an uppercase char or a kept underscore is dropped.
            previous_was_upper = False
            previous_was_escape = False
            continue
        parts.append(char)
        previous_was_upper = _is_cased_capital(char)
        previous_was_escape = char == ESCAPE
    return "".join(parts)
