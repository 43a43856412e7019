"""Data models produced by the inspection pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FileInspectionResult(BaseModel):
    """Everything reported about one inspected file.

    Attributes:
        path: Inspected file.
        size_bytes: Size captured from metadata when the file was opened.
        size_display: Human-readable rendering of ``size_bytes``.
        content_type: MIME type inferred from the first chunk.
        encoding: Text encoding inferred from the first chunk.
        sha256: Lowercase hex SHA-256 of the bytes actually read.
        md5: Lowercase hex MD5 of the bytes actually read.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    size_bytes: int = Field(ge=0)
    size_display: str
    content_type: str
    encoding: str
    sha256: str = Field(pattern=r"^[0-9a-f]{64}$")
    md5: str = Field(pattern=r"^[0-9a-f]{32}$")


class InspectionOutcome(BaseModel):
    """Result or failure for one path handed out by traversal."""

    model_config = ConfigDict(frozen=True)

    path: Path
    result: Optional[FileInspectionResult] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @model_validator(mode="after")
    def check_result_or_error(self) -> "InspectionOutcome":
        if (self.result is None) == (self.error is None):
            raise ValueError("an outcome carries either a result or an error, not both or neither")
        return self

    @property
    def ok(self) -> bool:
        return self.result is not None


class InspectionReport(BaseModel):
    """Ordered outcomes for a whole traversal."""

    outcomes: List[InspectionOutcome] = Field(default_factory=list)

    @property
    def processed(self) -> List[FileInspectionResult]:
        return [outcome.result for outcome in self.outcomes if outcome.result is not None]

    @property
    def errors(self) -> List[InspectionOutcome]:
        return [outcome for outcome in self.outcomes if outcome.result is None]


__all__ = ["FileInspectionResult", "InspectionOutcome", "InspectionReport"]
