"""Configuration management for fontgarden.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ProcessingConfig: Worker pool settings
- StorageConfig: On-disk write settings
- ImportConfig: UFO import settings
- LoggingConfig: Logging settings
- FontgardenSettings: Main application settings
"""

from fontgarden.config.settings import (
    FontgardenSettings,
    ImportConfig,
    LoggingConfig,
    ProcessingConfig,
    StorageConfig,
    get_default_settings,
)

__all__ = [
    "FontgardenSettings",
    "ImportConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "StorageConfig",
    "get_default_settings",
]
