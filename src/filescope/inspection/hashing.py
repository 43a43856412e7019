"""Incremental SHA-256 and MD5 accumulation."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from .errors import DigestFinalizedError


@dataclass(frozen=True, slots=True)
class DigestPair:
    """Lowercase hex digests for one byte stream."""

    sha256: str
    md5: str


class DigestAccumulator:
    """Feed chunks into running SHA-256 and MD5 states.

    Chunks must arrive in file order; chunk boundaries do not affect the
    result. ``finalize`` consumes the accumulator.
    """

    def __init__(self) -> None:
        self._sha256 = hashlib.sha256()
        self._md5 = hashlib.md5(usedforsecurity=False)
        self._finalized = False
        self.bytes_consumed = 0

    @property
    def finalized(self) -> bool:
        return self._finalized

    def update(self, chunk: bytes) -> None:
        """Append ``chunk`` to both digest states.

        Raises:
            DigestFinalizedError: If ``finalize`` has already been called.
        """
        if self._finalized:
            raise DigestFinalizedError("cannot update a finalized digest accumulator")
        self._sha256.update(chunk)
        self._md5.update(chunk)
        self.bytes_consumed += len(chunk)

    def finalize(self) -> DigestPair:
        """Return the hex digests of everything fed so far.

        Raises:
            DigestFinalizedError: If called more than once.
        """
        if self._finalized:
            raise DigestFinalizedError("digest accumulator was already finalized")
        self._finalized = True
        return DigestPair(sha256=self._sha256.hexdigest(), md5=self._md5.hexdigest())


__all__ = ["DigestAccumulator", "DigestPair"]
