"""File inspection package."""

from .errors import InspectionError, MetadataError, OpenError, ReadError
from .inspector import FileInspector
from .models import FileInspectionResult, InspectionOutcome, InspectionReport
from .pipeline import InspectionPipeline
from .sizes import format_size

__all__ = [
    "FileInspector",
    "FileInspectionResult",
    "InspectionOutcome",
    "InspectionReport",
    "InspectionPipeline",
    "InspectionError",
    "OpenError",
    "MetadataError",
    "ReadError",
    "format_size",
]
