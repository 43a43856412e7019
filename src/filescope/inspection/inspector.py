"""Single-pass file inspection.

Each file is opened once and read front to back exactly once. The first chunk
is shared: it is the only input the classifiers ever see, and it is also the
first input to the digest accumulator. Every later chunk goes to the
accumulator alone, so memory stays bounded by the chunk size no matter how
large the file is.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import BinaryIO, Callable, Optional

from .classifiers import (
    DEFAULT_FALLBACK_LABEL,
    CharsetClassifier,
    Classifier,
    FiletypeClassifier,
    InferenceSampler,
)
from .errors import MetadataError, OpenError, ReadError
from .hashing import DigestAccumulator
from .models import FileInspectionResult
from .reader import CHUNK_SIZE, ChunkedReader
from .sizes import format_size

LOGGER = logging.getLogger(__name__)

Opener = Callable[[Path], BinaryIO]


def open_binary(path: Path) -> BinaryIO:
    """Open ``path`` for binary reading."""
    return path.open("rb")


class FileInspector:
    """Report size, content type, encoding, and digests for one file at a time.

    Instances hold configuration only; every call to :meth:`inspect` builds its
    own reader and accumulator, so one inspector can serve many files (or
    threads working on different files).
    """

    def __init__(
        self,
        *,
        chunk_size: int = CHUNK_SIZE,
        content_classifier: Classifier | None = None,
        encoding_classifier: Classifier | None = None,
        fallback_label: str = DEFAULT_FALLBACK_LABEL,
        opener: Optional[Opener] = None,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.chunk_size = chunk_size
        self.sampler = InferenceSampler(
            content_classifier or FiletypeClassifier(),
            encoding_classifier or CharsetClassifier(),
            max_sample_size=chunk_size,
            fallback=fallback_label,
        )
        self._opener = opener or open_binary

    def inspect(self, path: Path | str) -> FileInspectionResult:
        """Inspect ``path`` in a single streaming pass.

        Args:
            path: Regular file to inspect.

        Returns:
            FileInspectionResult: Size, labels, and digests for the file.

        Raises:
            OpenError: If the file cannot be opened or is not a regular file.
            MetadataError: If the size cannot be read from the open handle.
            ReadError: If any chunked read fails; no partial result is kept.
        """
        path = Path(path)
        try:
            handle = self._opener(path)
        except OSError as exc:
            raise OpenError(path, f"Failed to open file: {exc}") from exc

        with handle:
            size_bytes = self._read_size(path, handle)
            reader = ChunkedReader(handle, self.chunk_size)
            accumulator = DigestAccumulator()

            first_chunk = self._next_chunk(reader, path, "inference")
            labels = self.sampler.classify(first_chunk)
            accumulator.update(first_chunk)

            while True:
                chunk = self._next_chunk(reader, path, "hashing")
                if not chunk:
                    break
                accumulator.update(chunk)

        digests = accumulator.finalize()
        if reader.bytes_read != size_bytes:
            LOGGER.debug(
                "%s changed during inspection: %d bytes at open, %d bytes hashed.",
                path,
                size_bytes,
                reader.bytes_read,
            )

        return FileInspectionResult(
            path=path,
            size_bytes=size_bytes,
            size_display=format_size(size_bytes),
            content_type=labels.content_type,
            encoding=labels.encoding,
            sha256=digests.sha256,
            md5=digests.md5,
        )

    def _read_size(self, path: Path, handle: BinaryIO) -> int:
        try:
            info = os.fstat(handle.fileno())
        except (OSError, ValueError) as exc:
            raise MetadataError(path, f"Failed to read metadata: {exc}") from exc
        if not stat.S_ISREG(info.st_mode):
            raise OpenError(path, "Failed to open file: not a regular file")
        return info.st_size

    def _next_chunk(self, reader: ChunkedReader, path: Path, purpose: str) -> bytes:
        try:
            return reader.read_chunk()
        except OSError as exc:
            raise ReadError(path, f"Failed to read file chunk for {purpose}: {exc}") from exc


__all__ = ["FileInspector", "Opener", "open_binary"]
