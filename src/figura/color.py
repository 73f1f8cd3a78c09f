"""Clamped linear RGB color values."""
from __future__ import annotations

import math
import sys
from numbers import Real
from typing import Iterator, Protocol, Tuple

from .utils import clamp, hex_to_rgb, to_byte


class Color(Protocol):
    """Anything the encoder can turn into one RGBA pixel."""

    def r(self) -> int: ...

    def g(self) -> int: ...

    def b(self) -> int: ...

    def a(self) -> int: ...


class RGB:
    """An RGB triple with every channel held in ``[0, 1]``.

    Channels are clamped on construction and after each in-place operation,
    so a value can never leave the unit cube. The binary operators return new
    values; ``scale``, ``multiply``, ``add`` and ``gamma`` (and the augmented
    assignments built on them) update the color and return it.
    """

    __slots__ = ("_r", "_g", "_b")

    def __init__(self, r: float = 0.0, g: float = 0.0, b: float = 0.0) -> None:
        self._r = float(clamp(r))
        self._g = float(clamp(g))
        self._b = float(clamp(b))

    @classmethod
    def from_hex(cls, color: str) -> "RGB":
        return cls(*hex_to_rgb(color))

    # Named colors ------------------------------------------------------

    @classmethod
    def white(cls) -> "RGB":
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def red(cls) -> "RGB":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def green(cls) -> "RGB":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def blue(cls) -> "RGB":
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def black(cls) -> "RGB":
        return cls(0.0, 0.0, 0.0)

    # Channel access ----------------------------------------------------

    @property
    def channels(self) -> Tuple[float, float, float]:
        """The normalized ``(r, g, b)`` floats."""
        return (self._r, self._g, self._b)

    def r(self) -> int:
        return to_byte(self._r)

    def g(self) -> int:
        return to_byte(self._g)

    def b(self) -> int:
        return to_byte(self._b)

    def a(self) -> int:
        return 255

    def rgba(self) -> Tuple[int, int, int, int]:
        """Return the 8-bit ``(r, g, b, a)`` export of this color."""
        return (self.r(), self.g(), self.b(), self.a())

    # In-place operations -----------------------------------------------

    def scale(self, factor: float) -> "RGB":
        factor = float(clamp(factor, -sys.float_info.max, sys.float_info.max))
        self._r = clamp(self._r * factor)
        self._g = clamp(self._g * factor)
        self._b = clamp(self._b * factor)
        return self

    def multiply(self, other: "RGB") -> "RGB":
        self._r = clamp(self._r * other._r)
        self._g = clamp(self._g * other._g)
        self._b = clamp(self._b * other._b)
        return self

    def add(self, other: "RGB") -> "RGB":
        self._r = clamp(self._r + other._r)
        self._g = clamp(self._g + other._g)
        self._b = clamp(self._b + other._b)
        return self

    def gamma(self) -> "RGB":
        """Apply gamma 2.0 (square root per channel) and return ``self``."""
        self._r = math.sqrt(self._r)
        self._g = math.sqrt(self._g)
        self._b = math.sqrt(self._b)
        return self

    def copy(self) -> "RGB":
        return RGB(self._r, self._g, self._b)

    __copy__ = copy

    # Operators ---------------------------------------------------------

    def __imul__(self, other: object) -> "RGB":
        if isinstance(other, RGB):
            return self.multiply(other)
        if isinstance(other, Real):
            return self.scale(other)
        return NotImplemented

    def __mul__(self, other: object) -> "RGB":
        if not isinstance(other, (RGB, Real)):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __rmul__(self, other: object) -> "RGB":
        if not isinstance(other, Real):
            return NotImplemented
        return self.copy().scale(other)

    def __iadd__(self, other: object) -> "RGB":
        if not isinstance(other, RGB):
            return NotImplemented
        return self.add(other)

    def __add__(self, other: object) -> "RGB":
        if not isinstance(other, RGB):
            return NotImplemented
        return self.copy().add(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RGB):
            return NotImplemented
        return self.channels == other.channels

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        return iter(self.channels)

    def __repr__(self) -> str:
        return f"RGB(r={self._r!r}, g={self._g!r}, b={self._b!r})"

    def __str__(self) -> str:
        return f"{self._r}, {self._g}, {self._b}"


__all__ = ["Color", "RGB"]
