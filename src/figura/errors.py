"""Exceptions raised by the figura encoder."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class FiguraError(Exception):
    """Base class for every failure raised by figura."""


class OutputOpenError(FiguraError, OSError):
    """The destination file could not be opened for writing."""

    def __init__(self, path: Path | str, cause: Optional[BaseException] = None) -> None:
        self.path = Path(path)
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"could not open {self.path} for writing{detail}")


class WriteError(FiguraError, OSError):
    """Writing header, scanline or trailer bytes failed."""

    def __init__(self, path: Path | str, cause: Optional[BaseException] = None) -> None:
        self.path = Path(path)
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"failed writing PNG data to {self.path}{detail}")


class EncoderError(FiguraError):
    """The PNG header or compressor state could not be set up or driven."""


class SizeMismatchError(FiguraError, ValueError):
    """The pixel buffer does not hold exactly ``width * height`` colors."""

    def __init__(self, expected: int, actual: int, width: int, height: int) -> None:
        self.expected = expected
        self.actual = actual
        self.width = width
        self.height = height
        super().__init__(
            f"pixel buffer holds {actual} colors, expected {expected} for {width}x{height}"
        )


__all__ = [
    "FiguraError",
    "OutputOpenError",
    "WriteError",
    "EncoderError",
    "SizeMismatchError",
]
