"""Row-major color buffer to PNG serialization."""
from __future__ import annotations

import io
import logging
import struct
import zlib
from pathlib import Path
from typing import BinaryIO, Iterator, Sequence

from .color import Color
from .errors import EncoderError, OutputOpenError, SizeMismatchError, WriteError

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
BIT_DEPTH = 8
COLOR_TYPE_RGBA = 6
BYTES_PER_PIXEL = 4
FILTER_NONE = 0
# Largest dimension the IHDR chunk accepts (2**31 - 1).
MAX_DIMENSION = 0x7FFFFFFF
# libpng's default IDAT size.
IDAT_SIZE = 8192


def chunk(tag: bytes, payload: bytes) -> bytes:
    """Frame ``payload`` as a PNG chunk: length, tag, data and CRC."""

    return (
        struct.pack(">I", len(payload))
        + tag
        + payload
        + struct.pack(">I", zlib.crc32(tag + payload) & 0xFFFFFFFF)
    )


def header(width: int, height: int) -> bytes:
    """Return the IHDR chunk for an 8-bit RGBA, non-interlaced image."""

    for name, value in (("width", width), ("height", height)):
        if not 0 < value <= MAX_DIMENSION:
            raise EncoderError(f"PNG {name} must be in 1..{MAX_DIMENSION}, got {value}")
    ihdr = struct.pack(">IIBBBBB", width, height, BIT_DEPTH, COLOR_TYPE_RGBA, 0, 0, 0)
    return chunk(b"IHDR", ihdr)


def check_size(colors: Sequence[Color], width: int, height: int) -> None:
    expected = width * height
    actual = len(colors)
    if actual != expected:
        raise SizeMismatchError(expected, actual, width, height)


class _Encoder:
    """Streams PNG chunks for one buffer, one scanline at a time."""

    def __init__(self, colors: Sequence[Color], width: int, height: int) -> None:
        self.colors = colors
        self.width = width
        self.height = height
        self.ihdr = header(width, height)
        try:
            self.compressor = zlib.compressobj(zlib.Z_DEFAULT_COMPRESSION)
        except (zlib.error, MemoryError) as exc:
            raise EncoderError(f"could not initialize zlib compressor: {exc}") from exc
        # Reused for every row; holds the filter byte plus one row of RGBA.
        self.row = bytearray(1 + BYTES_PER_PIXEL * width)

    def chunks(self) -> Iterator[bytes]:
        yield PNG_SIGNATURE
        yield self.ihdr
        pending = bytearray()
        for y in range(self.height):
            pending += self._compress(self._scanline(y))
            while len(pending) >= IDAT_SIZE:
                yield chunk(b"IDAT", bytes(pending[:IDAT_SIZE]))
                del pending[:IDAT_SIZE]
        try:
            pending += self.compressor.flush()
        except zlib.error as exc:
            raise EncoderError(f"could not finish zlib stream: {exc}") from exc
        for start in range(0, len(pending), IDAT_SIZE):
            yield chunk(b"IDAT", bytes(pending[start : start + IDAT_SIZE]))
        yield chunk(b"IEND", b"")

    def _scanline(self, y: int) -> bytearray:
        row = self.row
        row[0] = FILTER_NONE
        offset = 1
        base = y * self.width
        for x in range(self.width):
            color = self.colors[base + x]
            row[offset] = color.r()
            row[offset + 1] = color.g()
            row[offset + 2] = color.b()
            row[offset + 3] = color.a()
            offset += BYTES_PER_PIXEL
        return row

    def _compress(self, data: bytearray) -> bytes:
        try:
            return self.compressor.compress(data)
        except zlib.error as exc:
            raise EncoderError(f"zlib compression failed: {exc}") from exc


def _stream(colors: Sequence[Color], width: int, height: int, handle: BinaryIO) -> int:
    written = 0
    for block in _Encoder(colors, width, height).chunks():
        handle.write(block)
        written += len(block)
    return written


def encode(colors: Sequence[Color], width: int, height: int) -> bytes:
    """Return ``colors`` encoded as PNG bytes.

    ``colors`` is row-major: the color at ``y * width + x`` becomes the pixel
    in row ``y``, column ``x``, with row 0 at the top of the image.
    """

    check_size(colors, width, height)
    buffer = io.BytesIO()
    _stream(colors, width, height, buffer)
    return buffer.getvalue()


def write(path: Path | str, colors: Sequence[Color], width: int, height: int) -> Path:
    """Write ``colors`` to ``path`` as an 8-bit RGBA PNG.

    Each color contributes ``(r(), g(), b(), a())`` to its pixel. The buffer
    must hold exactly ``width * height`` colors in row-major order.

    Raises:
        SizeMismatchError: the buffer length is not ``width * height``. No
            file is created.
        EncoderError: the header fields are invalid or zlib fails.
        OutputOpenError: ``path`` cannot be opened for writing.
        WriteError: writing or closing the file fails.

    On any failure after the file is opened, the partial file is removed.
    """

    path = Path(path)
    check_size(colors, width, height)
    # Surface header problems before touching the destination.
    header(width, height)
    logger.debug(f"Encoding {width}x{height} PNG to {path}")
    try:
        handle = path.open("wb")
    except OSError as exc:
        raise OutputOpenError(path, exc) from exc

    try:
        with handle:
            written = _stream(colors, width, height, handle)
    except OSError as exc:
        _discard(path)
        raise WriteError(path, exc) from exc
    except BaseException:
        _discard(path)
        raise
    logger.debug(f"Wrote {written} bytes to {path}")
    return path


def _discard(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning(f"Could not remove partial PNG {path}: {exc}")


__all__ = ["encode", "write", "chunk", "header", "check_size", "PNG_SIGNATURE"]
