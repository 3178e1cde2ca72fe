"""Command-line interface for fontgarden.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- import: create or update a Fontgarden from UFO sources, optionally
  limited to some sets
- export: write one UFO per style from a Fontgarden
- Verbose/quiet output modes
"""

from fontgarden.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
