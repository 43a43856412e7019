"""Human-readable byte counts."""

from __future__ import annotations

_UNITS = ("KB", "MB", "GB", "TB", "PB", "EB")
_STEP = 1024


def format_size(size_bytes: int) -> str:
    """Render a byte count using binary (1024) magnitude steps.

    Counts below 1 KB are printed as whole bytes. Larger counts use the
    highest tier whose base does not exceed the value, with two decimals, so
    ``1024**n`` reads ``1.00`` of tier ``n`` while ``1024**n - 1`` may round
    up to ``1024.00`` of the tier below. Nothing is promoted past EB.

    Args:
        size_bytes: Non-negative byte count.

    Returns:
        str: Display string such as ``"512 bytes"`` or ``"1.50 KB"``.

    Raises:
        ValueError: If ``size_bytes`` is negative.
    """
    if size_bytes < 0:
        raise ValueError(f"size_bytes must be non-negative, got {size_bytes}")
    if size_bytes < _STEP:
        return f"{size_bytes} bytes"

    tier = 0
    base = _STEP
    while tier < len(_UNITS) - 1 and size_bytes >= base * _STEP:
        base *= _STEP
        tier += 1
    return f"{size_bytes / base:.2f} {_UNITS[tier]}"


__all__ = ["format_size"]
