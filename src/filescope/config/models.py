"""Configuration models describing filescope settings."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from filescope.inspection.reader import CHUNK_SIZE


class FilescopeBaseModel(BaseModel):
    """Shared configuration for filescope Pydantic models."""

    model_config = ConfigDict(extra="forbid")


class InspectionOptions(FilescopeBaseModel):
    """Options governing the per-file inspection pass.

    Attributes:
        chunk_size: Bytes per read; the first chunk is also the classifier sample.
        fallback_label: Label reported when a classifier has no confident answer.
    """

    chunk_size: int = Field(default=CHUNK_SIZE, gt=0)
    fallback_label: str = Field(default="unknown", min_length=1)


class TraversalOptions(FilescopeBaseModel):
    """Options controlling how patterns are expanded into files.

    Attributes:
        recursive: Whether to descend into subdirectories of matched directories.
        include_hidden: Whether dot-files found inside directories are inspected.
        follow_symlinks: Whether symlinked files and directories are followed.
    """

    recursive: bool = False
    include_hidden: bool = True
    follow_symlinks: bool = True


class OutputOptions(FilescopeBaseModel):
    """CLI presentation defaults.

    Attributes:
        show_sha256: Whether the SHA-256 line is printed by default.
        show_md5: Whether the MD5 line is printed by default.
        quiet_default: Whether per-file output is suppressed by default.
    """

    show_sha256: bool = False
    show_md5: bool = False
    quiet_default: bool = False


class LoggingSettings(FilescopeBaseModel):
    """Runtime logging configuration.

    Attributes:
        level: Logging verbosity level.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


class FilescopeConfig(FilescopeBaseModel):
    """Top-level configuration struct for filescope.

    Attributes:
        inspection: Inspection pass settings.
        traversal: Pattern expansion settings.
        output: CLI presentation defaults.
        logging: Logging configuration.
    """

    inspection: InspectionOptions = Field(default_factory=InspectionOptions)
    traversal: TraversalOptions = Field(default_factory=TraversalOptions)
    output: OutputOptions = Field(default_factory=OutputOptions)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


__all__ = [
    "FilescopeBaseModel",
    "InspectionOptions",
    "TraversalOptions",
    "OutputOptions",
    "LoggingSettings",
    "FilescopeConfig",
]
