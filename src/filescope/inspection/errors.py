"""Inspection errors."""

from __future__ import annotations

from pathlib import Path


class InspectionError(Exception):
    """Base exception for a failed file inspection.

    Attributes:
        path: File whose inspection failed.
        kind: Short tag identifying the failing stage.
    """

    kind = "inspection"

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class OpenError(InspectionError):
    """Raised when a file cannot be opened for reading."""

    kind = "open"


class MetadataError(InspectionError):
    """Raised when file metadata cannot be read from an open handle."""

    kind = "metadata"


class ReadError(InspectionError):
    """Raised when a chunked read fails partway through a file."""

    kind = "read"


class DigestFinalizedError(RuntimeError):
    """Raised when a digest accumulator is used after finalization."""


__all__ = [
    "InspectionError",
    "OpenError",
    "MetadataError",
    "ReadError",
    "DigestFinalizedError",
]
