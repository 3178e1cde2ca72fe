"""Tests for the command-line interface."""

from pathlib import Path

from typer.testing import CliRunner

from conftest import make_source
from fontgarden import __version__
from fontgarden.cli import app
from fontgarden.io import load_fontgarden

runner = CliRunner()


def _write_sources(tmp_path: Path) -> list[Path]:
    paths = []
    for style in ("Regular", "Bold"):
        path = tmp_path / f"Family-{style}.ufo"
        make_source(style, ["a", "b"]).save(path)
        paths.append(path)
    return paths


class TestCli:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "import" in result.output
        assert "export" in result.output

    def test_import_then_export(self, tmp_path: Path) -> None:
        target = tmp_path / "Family.fontgarden"
        sources = _write_sources(tmp_path)

        result = runner.invoke(app, ["import", str(target), *map(str, sources), "-q"])
        assert result.exit_code == 0, result.output
        assert sorted(load_fontgarden(target).glyphs) == ["a", "b"]

        out = tmp_path / "out"
        result = runner.invoke(app, ["export", str(target), "-o", str(out), "--style", "Bold"])
        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in out.iterdir()) == ["Bold.ufo"]

    def test_import_summary(self, tmp_path: Path) -> None:
        target = tmp_path / "Family.fontgarden"
        sources = _write_sources(tmp_path)
        result = runner.invoke(app, ["import", str(target), *map(str, sources), "--verbose"])
        assert result.exit_code == 0, result.output
        assert "2 added" in result.output
        assert "added: a, b" in result.output

    def test_missing_source(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["import", str(tmp_path / "Family.fontgarden"), str(tmp_path / "nope.ufo")]
        )
        assert result.exit_code == 1
        assert "Source not found" in result.output

    def test_verbose_and_quiet_conflict(self, tmp_path: Path) -> None:
        sources = _write_sources(tmp_path)
        result = runner.invoke(
            app, ["import", str(tmp_path / "F.fontgarden"), str(sources[0]), "-v", "-q"]
        )
        assert result.exit_code == 1

    def test_export_error_exit_code(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["export", str(tmp_path / "missing.fontgarden"), "-q"])
        assert result.exit_code == 1
        assert "must be a directory" in result.output

    def test_duplicate_styles_error(self, tmp_path: Path) -> None:
        first = tmp_path / "One.ufo"
        second = tmp_path / "Two.ufo"
        make_source("Regular", ["a"]).save(first)
        make_source("Regular", ["a"]).save(second)

        result = runner.invoke(
            app, ["import", str(tmp_path / "F.fontgarden"), str(first), str(second), "-q"]
        )
        assert result.exit_code == 1
        assert "same style name" in result.output
