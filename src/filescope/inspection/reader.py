"""Sequential fixed-size reads over an open binary handle."""

from __future__ import annotations

from typing import BinaryIO

CHUNK_SIZE = 4096


class ChunkedReader:
    """Hand out consecutive chunks of at most ``chunk_size`` bytes.

    The reader does not own the handle; whoever opened it closes it.
    """

    def __init__(self, handle: BinaryIO, chunk_size: int = CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._handle = handle
        self.chunk_size = chunk_size
        self.bytes_read = 0

    def read_chunk(self) -> bytes:
        """Return the next chunk, or ``b""`` once the stream is exhausted.

        Raises:
            OSError: Propagated unchanged from the underlying handle.
        """
        chunk = self._handle.read(self.chunk_size)
        if not chunk:
            return b""
        self.bytes_read += len(chunk)
        return bytes(chunk)


__all__ = ["CHUNK_SIZE", "ChunkedReader"]
