"""CLI application entry point for fontgarden.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from fontgarden import __version__
from fontgarden.cli.output import (
    console,
    print_error,
    print_export_summary,
    print_header,
    print_import_summary,
    print_step,
)
from fontgarden.config import (
    FontgardenSettings,
    LoggingConfig,
    ProcessingConfig,
    StorageConfig,
)
from fontgarden.core import FontgardenProcessor
from fontgarden.exceptions import FontgardenError
from fontgarden.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="fontgarden",
    help="Keep font sources in a diff-friendly directory format and sync them with UFOs.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Fontgarden[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Fontgarden: a diff-friendly interchange format for font sources."""


WorkersOption = Annotated[
    int | None,
    typer.Option(
        "--workers",
        "-j",
        help="Number of parallel worker threads (default: auto)",
        min=1,
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def _build_settings(
    workers: int | None,
    log_file: Path | None,
    log_level: str,
    quiet: bool,
    staged_save: bool = False,
) -> FontgardenSettings:
    settings = FontgardenSettings(
        processing=ProcessingConfig(max_workers=workers),
        storage=StorageConfig(staged_save=staged_save),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    return settings


@app.command("import")
def import_command(
    target: Annotated[
        Path,
        typer.Argument(
            help="Fontgarden directory to create or update",
            show_default=False,
        ),
    ],
    sources: Annotated[
        list[Path],
        typer.Argument(
            help="UFO sources to import",
            show_default=False,
        ),
    ],
    sets: Annotated[
        list[str] | None,
        typer.Option(
            "--set",
            "-s",
            help="Limit the import to glyphs of this set (repeatable)",
        ),
    ] = None,
    staged_save: Annotated[
        bool,
        typer.Option(
            "--staged-save",
            help="Write to a temporary directory and swap it into place",
        ),
    ] = False,
    workers: WorkersOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="List added, modified and removed glyphs",
        ),
    ] = False,
    quiet: QuietOption = False,
) -> None:
    """Import UFO sources into a Fontgarden.

    Example:
        fontgarden import MyFamily.fontgarden Regular.ufo Bold.ufo --set Latin
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    for source in sources:
        if not source.is_dir():
            print_error(
                f"Source not found: {source}",
                details="Please provide paths to UFO source directories.",
            )
            raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = _build_settings(workers, log_file, log_level, quiet, staged_save)

    try:
        if not quiet:
            print_step(f"Importing {len(sources)} source(s) into {target}")

        stats = FontgardenProcessor(settings).import_sources(
            target=target,
            source_paths=sources,
            target_sets=sets or [],
        )
    except FontgardenError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not quiet:
        print_import_summary(
            target=str(target),
            total_time_s=stats.duration_seconds,
            glyph_count=stats.glyph_count,
            added=stats.added,
            modified=stats.modified,
            removed=stats.removed,
            verbose=verbose,
        )


@app.command("export")
def export_command(
    fontgarden: Annotated[
        Path,
        typer.Argument(
            help="Fontgarden directory to export",
            show_default=False,
        ),
    ],
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for the UFO sources (default: next to the Fontgarden)",
        ),
    ] = None,
    styles: Annotated[
        list[str] | None,
        typer.Option(
            "--style",
            help="Export only this style (repeatable)",
        ),
    ] = None,
    workers: WorkersOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Export a Fontgarden to one UFO source per style.

    Example:
        fontgarden export MyFamily.fontgarden --output-dir build --style Bold
    """
    if not quiet:
        print_header(__version__)

    settings = _build_settings(workers, log_file, log_level, quiet)

    try:
        if not quiet:
            print_step(f"Exporting {fontgarden}")

        stats = FontgardenProcessor(settings).export_sources(
            fontgarden_path=fontgarden,
            output_dir=output_dir,
            style_names=styles or [],
        )
    except FontgardenError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not quiet:
        print_export_summary(
            output_paths=[str(p) for p in stats.output_paths],
            total_time_s=stats.duration_seconds,
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
