"""Numeric and color helpers shared across the figura modules."""
from __future__ import annotations

from typing import Tuple


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    """Clamp ``value`` between ``lo`` and ``hi``; NaN maps to ``lo``."""

    if value != value:
        return lo
    return max(lo, min(hi, value))


def hex_to_rgb(color: str) -> Tuple[float, float, float]:
    """Convert a hex color string into an RGB tuple with floats in ``[0, 1]``."""

    color = color.strip()
    if color.startswith("#"):
        color = color[1:]
    if len(color) not in (3, 6):
        raise ValueError(f"Unsupported color format: {color!r}")
    if len(color) == 3:
        color = "".join(ch * 2 for ch in color)
    try:
        r = int(color[0:2], 16)
        g = int(color[2:4], 16)
        b = int(color[4:6], 16)
    except ValueError:
        raise ValueError(f"Unsupported color format: {color!r}") from None
    return (r / 255.0, g / 255.0, b / 255.0)


def to_byte(channel: float) -> int:
    """Map a normalized channel to ``0..255`` by truncating ``channel * 255``."""

    return int(clamp(channel) * 255.0)


__all__ = ["clamp", "hex_to_rgb", "to_byte"]
