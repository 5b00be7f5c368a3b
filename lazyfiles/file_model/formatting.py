"""Human-readable size labels for listing rows and preview placeholders."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")
_ONE_DECIMAL = Decimal("0.1")


def format_size(size: int) -> str:
    """Format ``size`` bytes with one decimal in base-1024 units.

    The unit index is ``floor(log1024(size))``, clamped to ``TB``. Sizes below
    one byte render as ``"0 B"``. Halves round up, so 1280 bytes is ``"1.3 KB"``.
    """
    if size < 1:
        return "0 B"
    # integer floor(log1024(size)); math.log is inexact at exact powers
    unit_idx = 0
    while unit_idx + 1 < len(SIZE_UNITS) and size >= 1024 ** (unit_idx + 1):
        unit_idx += 1
    scaled = (Decimal(size) / Decimal(1024**unit_idx)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    return f"{scaled} {SIZE_UNITS[unit_idx]}"


__all__ = ["SIZE_UNITS", "format_size"]
