"""Clamped RGB colors and a row-major buffer to PNG encoder."""

from .color import RGB, Color
from .errors import EncoderError, FiguraError, OutputOpenError, SizeMismatchError, WriteError
from .png import encode, write

__all__ = [
    "RGB",
    "Color",
    "encode",
    "write",
    "FiguraError",
    "OutputOpenError",
    "WriteError",
    "EncoderError",
    "SizeMismatchError",
]
