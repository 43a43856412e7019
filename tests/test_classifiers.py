"""Tests for sample classifiers and the inference sampler."""

import io
from typing import Optional

import pytest
from PIL import Image

from filescope.inspection.classifiers import (
    CharsetClassifier,
    FiletypeClassifier,
    InferenceSampler,
)


class StaticClassifier:
    def __init__(self, label: Optional[str]) -> None:
        self.label = label
        self.samples: list[bytes] = []

    def classify(self, sample: bytes) -> Optional[str]:
        self.samples.append(sample)
        return self.label


def _png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), color="blue").save(buffer, format="PNG")
    return buffer.getvalue()


def test_filetype_classifier_detects_png() -> None:
    assert FiletypeClassifier().classify(_png_bytes()) == "image/png"


def test_filetype_classifier_has_no_opinion_on_plain_text() -> None:
    assert FiletypeClassifier().classify(b"just some words\n") is None


def test_filetype_classifier_ignores_empty_sample() -> None:
    assert FiletypeClassifier().classify(b"") is None


def test_charset_classifier_detects_utf8_text() -> None:
    text = "Grüße aus Köln. Ça va très bien, merci! Señor Muñoz está aquí. " * 8

    assert CharsetClassifier().classify(text.encode("utf-8")) == "utf_8"


def test_sampler_passes_sample_to_both_classifiers() -> None:
    content = StaticClassifier("image/png")
    encoding = StaticClassifier("ascii")
    sampler = InferenceSampler(content, encoding, max_sample_size=16)

    labels = sampler.classify(b"sample")

    assert labels.content_type == "image/png"
    assert labels.encoding == "ascii"
    assert content.samples == [b"sample"]
    assert encoding.samples == [b"sample"]


@pytest.mark.parametrize("miss", [None, ""])
def test_sampler_substitutes_fallback_for_misses(miss: Optional[str]) -> None:
    sampler = InferenceSampler(
        StaticClassifier(miss), StaticClassifier(miss), max_sample_size=16, fallback="n/a"
    )

    labels = sampler.classify(b"")

    assert labels.content_type == "n/a"
    assert labels.encoding == "n/a"


def test_sampler_default_fallback_is_unknown() -> None:
    sampler = InferenceSampler(StaticClassifier(None), StaticClassifier("ascii"), max_sample_size=4)

    assert sampler.classify(b"abc").content_type == "unknown"


def test_sampler_rejects_oversized_samples() -> None:
    content = StaticClassifier("x")
    sampler = InferenceSampler(content, StaticClassifier("y"), max_sample_size=4)

    with pytest.raises(ValueError):
        sampler.classify(b"12345")
    assert content.samples == []
