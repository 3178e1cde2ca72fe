"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted step, summary and error messages.
"""

from rich.console import Console
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Fontgarden[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def _format_names(names: list[str], limit: int = 20) -> str:
    shown = ", ".join(names[:limit])
    if len(names) > limit:
        shown += f" {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(names) - limit} more)"
    return shown


def print_import_summary(
    target: str,
    total_time_s: float,
    glyph_count: int,
    added: list[str],
    modified: list[str],
    removed: list[str],
    verbose: bool,
) -> None:
    """Print the result of an import.

    Args:
        target: Path of the written Fontgarden
        total_time_s: Total time in seconds
        glyph_count: Number of glyphs in the Fontgarden
        added: Names of newly added glyphs
        modified: Names of re-imported glyphs
        removed: Names of glyphs whose imported layers were dropped
        verbose: Whether to list glyph names
    """
    console.print(f"\n[bold green]{SYM_OK} Imported[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(target, style="bold")
    line.append(f" ({glyph_count:,} glyphs)")
    console.print(line)

    console.print(
        f"  [green]{len(added)} added[/green] {SYM_DOT} {len(modified)} modified "
        f"{SYM_DOT} [yellow]{len(removed)} removed[/yellow]"
    )
    if verbose:
        for label, names in (("added", added), ("modified", modified), ("removed", removed)):
            if names:
                console.print(f"  {label}: {_format_names(names)}")


def print_export_summary(output_paths: list[str], total_time_s: float) -> None:
    """Print the result of an export.

    Args:
        output_paths: Paths of the written UFO sources
        total_time_s: Total time in seconds
    """
    console.print(f"\n[bold green]{SYM_OK} Exported[/bold green] in {_format_time(total_time_s)}")
    for path in output_paths:
        line = Text("  ")
        line.append(path, style="bold")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
