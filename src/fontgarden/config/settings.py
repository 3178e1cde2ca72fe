"""Configuration settings for Fontgarden."""

from pathlib import Path

from pydantic import BaseModel, Field


class ProcessingConfig(BaseModel):
    """Configuration for parallel glyph processing."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker threads (None = auto)",
    )


class StorageConfig(BaseModel):
    """Configuration for writing a Fontgarden to disk."""

    staged_save: bool = Field(
        default=False,
        description="Write into a temporary sibling directory and rename it into place",
    )


class ImportConfig(BaseModel):
    """Configuration for importing UFO sources."""

    default_style_name: str = Field(
        default="Regular",
        min_length=1,
        description="Style name of the source that supplies glyph metadata",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FontgardenSettings(BaseModel):
    """Main application settings."""

    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    imports: ImportConfig = Field(default_factory=ImportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FontgardenSettings:
    """Get default application settings."""
    return FontgardenSettings()
