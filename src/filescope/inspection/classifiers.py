"""Content-type and encoding inference over a bounded byte sample.

Classifiers are small objects exposing ``classify(sample) -> str | None``. They
never touch the filesystem, so tests can swap in stubs and the sampler can
guarantee that inference only ever sees the first chunk of a file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import filetype
from charset_normalizer import from_bytes

LOGGER = logging.getLogger(__name__)

DEFAULT_FALLBACK_LABEL = "unknown"


class Classifier(Protocol):
    """Label a byte sample, returning None when no confident answer exists."""

    def classify(self, sample: bytes) -> Optional[str]: ...


class FiletypeClassifier:
    """Identify a MIME type from magic bytes using the ``filetype`` package."""

    def classify(self, sample: bytes) -> Optional[str]:
        if not sample:
            return None
        kind = filetype.guess(sample)
        if kind is None:
            return None
        return kind.mime or None


class CharsetClassifier:
    """Guess a text encoding from byte statistics using ``charset-normalizer``."""

    def classify(self, sample: bytes) -> Optional[str]:
        best = from_bytes(sample).best()
        if best is None:
            return None
        return best.encoding


@dataclass(frozen=True, slots=True)
class SampleLabels:
    """Labels inferred from one sample."""

    content_type: str
    encoding: str


class InferenceSampler:
    """Run the content-type and encoding classifiers over one sample.

    The sampler refuses samples larger than ``max_sample_size`` so memory used
    for inference stays bounded regardless of file size.
    """

    def __init__(
        self,
        content_classifier: Classifier,
        encoding_classifier: Classifier,
        *,
        max_sample_size: int,
        fallback: str = DEFAULT_FALLBACK_LABEL,
    ) -> None:
        self.content_classifier = content_classifier
        self.encoding_classifier = encoding_classifier
        self.max_sample_size = max_sample_size
        self.fallback = fallback

    def classify(self, sample: bytes) -> SampleLabels:
        """Return content-type and encoding labels for ``sample``.

        Args:
            sample: The first chunk of a file, possibly empty.

        Returns:
            SampleLabels: Labels, with the fallback substituted for misses.

        Raises:
            ValueError: If the sample exceeds ``max_sample_size``.
        """
        if len(sample) > self.max_sample_size:
            raise ValueError(
                f"sample of {len(sample)} bytes exceeds the {self.max_sample_size}-byte bound"
            )
        content_type = self.content_classifier.classify(sample) or self.fallback
        encoding = self.encoding_classifier.classify(sample) or self.fallback
        LOGGER.debug(
            "Classified %d-byte sample as %s (%s).", len(sample), content_type, encoding
        )
        return SampleLabels(content_type=content_type, encoding=encoding)


__all__ = [
    "Classifier",
    "FiletypeClassifier",
    "CharsetClassifier",
    "InferenceSampler",
    "SampleLabels",
    "DEFAULT_FALLBACK_LABEL",
]
