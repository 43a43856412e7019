"""Tests for human-readable size formatting."""

import pytest

from filescope.inspection.sizes import format_size

UNITS = ["KB", "MB", "GB", "TB", "PB", "EB"]


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0 bytes"),
        (100, "100 bytes"),
        (1023, "1023 bytes"),
        (1024, "1.00 KB"),
        (1536, "1.50 KB"),
        (2**64 - 1, "16.00 EB"),
    ],
)
def test_format_size_known_values(size: int, expected: str) -> None:
    assert format_size(size) == expected


@pytest.mark.parametrize("tier", range(1, 7))
def test_exact_powers_open_their_tier(tier: int) -> None:
    assert format_size(1024**tier) == f"1.00 {UNITS[tier - 1]}"


@pytest.mark.parametrize("tier", range(2, 7))
def test_one_below_power_rounds_up_in_lower_tier(tier: int) -> None:
    assert format_size(1024**tier - 1) == f"1024.00 {UNITS[tier - 2]}"


def test_exabyte_range_is_never_promoted() -> None:
    assert format_size(1024**7) == "1024.00 EB"


def test_negative_size_rejected() -> None:
    with pytest.raises(ValueError):
        format_size(-1)
