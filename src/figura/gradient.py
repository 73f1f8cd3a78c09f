"""Demonstration buffers for exercising the encoder."""
from __future__ import annotations

from typing import List, Optional

from .color import RGB


def vertical_gradient(
    width: int,
    height: int,
    top: Optional[RGB] = None,
    bottom: Optional[RGB] = None,
    gamma: bool = False,
) -> List[RGB]:
    """Return a row-major buffer fading from ``top`` to ``bottom``.

    Row ``y`` is ``top * (1 - t) + bottom * t`` with ``t = y / height``, so the
    first row is exactly ``top`` and the last row stops one step short of
    ``bottom``. The defaults fade from green to red.
    """

    top = RGB.green() if top is None else top
    bottom = RGB.red() if bottom is None else bottom
    colors: List[RGB] = []
    for y in range(height):
        t = y / height
        row_color = top * (1.0 - t) + bottom * t
        if gamma:
            row_color.gamma()
        colors.extend(row_color.copy() for _ in range(width))
    return colors


__all__ = ["vertical_gradient"]
