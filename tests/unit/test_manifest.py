"""Tests for set manifest reading and writing."""

from pathlib import Path

import pytest

from fontgarden.domain import OpenTypeCategory
from fontgarden.exceptions import InvalidCodepointsError
from fontgarden.io.manifest import (
    SetRecord,
    format_codepoints,
    parse_codepoints,
    read_set_file,
    set_filename,
    set_name_from_path,
    write_set_file,
)


class TestCodepoints:
    """Tests for code point text."""

    def test_format_sorted_and_padded(self) -> None:
        """Test code points are sorted, uppercase and at least four digits."""
        assert format_codepoints({0x1F600, 0x41, 0xC0}) == "0041 00C0 1F600"

    def test_format_empty(self) -> None:
        assert format_codepoints(set()) == ""

    def test_parse(self) -> None:
        assert parse_codepoints("0041 00c0") == {0x41, 0xC0}
        assert parse_codepoints("") == set()
        assert parse_codepoints("  ") == set()

    @pytest.mark.parametrize("value", ["XYZ", "0x41", "41,42", "110000", "D800"])
    def test_parse_rejects_invalid(self, value: str) -> None:
        """Test non-hex entries and non-scalar values are rejected."""
        with pytest.raises(InvalidCodepointsError):
            parse_codepoints(value)

    def test_invalid_codepoints_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_codepoints("nope")


class TestSetFilenames:
    """Tests for manifest file naming."""

    def test_set_filename_encoded(self) -> None:
        assert set_filename("Latin") == "set.L_atin.csv"
        assert set_filename("Common") == "set.C_ommon.csv"

    def test_set_name_from_path(self) -> None:
        assert set_name_from_path(Path("set.L_atin.csv")) == "Latin"
        assert set_name_from_path(Path("set.my__set.csv")) == "my_set"

    def test_non_manifests_ignored(self) -> None:
        assert set_name_from_path(Path("glyphs")) is None
        assert set_name_from_path(Path("notes.csv")) is None
        assert set_name_from_path(Path("set.L_atin.txt")) is None


class TestReadWrite:
    """Tests for manifest files on disk."""

    def test_write_format(self, tmp_path: Path) -> None:
        """Test the exact text written for a manifest."""
        path = tmp_path / "set.L_atin.csv"
        write_set_file(
            path,
            [
                SetRecord("A", "A", {0x41}, OpenTypeCategory.BASE),
                SetRecord("a.sc", None, set(), OpenTypeCategory.UNASSIGNED),
            ],
        )
        assert path.read_text(encoding="utf-8") == (
            "name,postscript_name,codepoints,opentype_category\n"
            "A,A,0041,base\n"
            "a.sc,,,unassigned\n"
        )

    def test_read_back(self, tmp_path: Path) -> None:
        path = tmp_path / "set.L_atin.csv"
        records = [
            SetRecord("A", "A", {0x41, 0xC0}, OpenTypeCategory.BASE),
            SetRecord("acutecomb", None, {0x301}, OpenTypeCategory.MARK),
        ]
        write_set_file(path, records)
        assert list(read_set_file(path)) == records

    def test_missing_optional_columns_default(self, tmp_path: Path) -> None:
        """Test blank postscript name and category become defaults."""
        path = tmp_path / "set.C_ommon.csv"
        path.write_text(
            "name,postscript_name,codepoints,opentype_category\na,,0061,\n", encoding="utf-8"
        )
        (record,) = read_set_file(path)
        assert record == SetRecord("a", None, {0x61}, OpenTypeCategory.UNASSIGNED)

    def test_missing_required_column(self, tmp_path: Path) -> None:
        path = tmp_path / "set.C_ommon.csv"
        path.write_text("name,postscript_name\na,\n", encoding="utf-8")
        with pytest.raises(ValueError, match="codepoints"):
            list(read_set_file(path))

    def test_unknown_category(self, tmp_path: Path) -> None:
        path = tmp_path / "set.C_ommon.csv"
        path.write_text(
            "name,postscript_name,codepoints,opentype_category\na,,0061,spacing\n",
            encoding="utf-8",
        )
        with pytest.raises(ValueError, match="Category must be"):
            list(read_set_file(path))

    def test_quoted_names(self, tmp_path: Path) -> None:
        """Test names needing CSV quoting survive a round trip."""
        path = tmp_path / "set.C_ommon.csv"
        records = [SetRecord('comma,"quote"')]
        write_set_file(path, records)
        assert list(read_set_file(path)) == records
