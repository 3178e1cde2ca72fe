"""Utility functions for fontgarden.

This module provides utility functions including:

- Logging setup and configuration
- Run statistics for the CLI
- Parallel fan-out over independent glyphs
"""

from fontgarden.utils.logging import OperationStats, configure_logging
from fontgarden.utils.parallel import parallel_map

__all__ = [
    "OperationStats",
    "configure_logging",
    "parallel_map",
]
