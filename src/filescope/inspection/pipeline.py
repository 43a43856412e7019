"""Drive inspection across every file a set of patterns expands to."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from .discovery import PathExpander
from .errors import InspectionError
from .inspector import FileInspector
from .models import InspectionOutcome, InspectionReport

LOGGER = logging.getLogger(__name__)


class InspectionPipeline:
    """Inspect discovered files one at a time, isolating per-file failures."""

    def __init__(
        self,
        expander: PathExpander,
        inspector: FileInspector,
        *,
        on_directory: Optional[Callable[[Path], None]] = None,
    ) -> None:
        self.expander = expander
        self.inspector = inspector
        self.on_directory = on_directory

    def iter_outcomes(self, patterns: Iterable[str]) -> Iterator[InspectionOutcome]:
        """Yield one outcome per discovered file, in traversal order.

        An :class:`InspectionError` for one file becomes a failed outcome and
        traversal continues with the next file.
        """
        for pattern in patterns:
            for discovered in self.expander.expand(pattern):
                if discovered.is_directory:
                    if self.on_directory is not None:
                        self.on_directory(discovered.path)
                    continue
                yield self._inspect_one(discovered.path)

    def run(self, patterns: Iterable[str]) -> InspectionReport:
        """Process every pattern and return the aggregated report."""
        return InspectionReport(outcomes=list(self.iter_outcomes(patterns)))

    def _inspect_one(self, path: Path) -> InspectionOutcome:
        try:
            result = self.inspector.inspect(path)
        except InspectionError as exc:
            LOGGER.info("Inspection of %s failed (%s): %s", path, exc.kind, exc)
            return InspectionOutcome(path=path, error=str(exc), error_kind=exc.kind)
        return InspectionOutcome(path=path, result=result)


__all__ = ["InspectionPipeline"]
