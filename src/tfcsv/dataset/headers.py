from __future__ import annotations

import struct
from pathlib import Path
from typing import BinaryIO, Callable

from tfcsv.errors import UnsupportedOrCorruptImage
from tfcsv.types import Dimensions, ImageFormat

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

_JPEG_SOF_MARKERS = {
    0xC0,
    0xC1,
    0xC2,
    0xC3,
    0xC5,
    0xC6,
    0xC7,
    0xC9,
    0xCA,
    0xCB,
    0xCD,
    0xCE,
    0xCF,
}
# Markers without a length field: TEM, RSTn, SOI.
_JPEG_STANDALONE_MARKERS = {0x01, 0xD8} | set(range(0xD0, 0xD8))
_JPEG_EOI = 0xD9
_JPEG_SOS = 0xDA


def _read_exact(handle: BinaryIO, size: int, what: str) -> bytes:
    data = handle.read(size)
    if len(data) < size:
        raise UnsupportedOrCorruptImage(f"truncated {what}: wanted {size} bytes, got {len(data)}")
    return data


def _checked(width: int, height: int) -> Dimensions:
    if width <= 0 or height <= 0:
        raise UnsupportedOrCorruptImage(f"invalid dimensions {width}x{height}")
    return Dimensions(width=int(width), height=int(height))


def _read_bmp(handle: BinaryIO) -> Dimensions:
    header = _read_exact(handle, 18, "BMP header")
    if header[:2] != b"BM":
        raise UnsupportedOrCorruptImage("missing BMP signature")

    dib_size = struct.unpack("<I", header[14:18])[0]
    if dib_size == 12:
        width, height = struct.unpack("<HH", _read_exact(handle, 4, "BMP core header"))
        return _checked(width, height)
    if dib_size < 40:
        raise UnsupportedOrCorruptImage(f"unknown BMP info header size {dib_size}")

    width, height = struct.unpack("<ii", _read_exact(handle, 8, "BMP info header"))
    # Negative height marks a top-down bitmap.
    return _checked(width, abs(height))


def _read_png(handle: BinaryIO) -> Dimensions:
    header = _read_exact(handle, 24, "PNG header")
    if header[:8] != _PNG_SIGNATURE:
        raise UnsupportedOrCorruptImage("missing PNG signature")
    if header[12:16] != b"IHDR":
        raise UnsupportedOrCorruptImage("first PNG chunk is not IHDR")

    width, height = struct.unpack(">II", header[16:24])
    return _checked(width, height)


def _next_jpeg_marker(handle: BinaryIO) -> int:
    byte = _read_exact(handle, 1, "JPEG marker")
    if byte != b"\xFF":
        raise UnsupportedOrCorruptImage(f"expected JPEG marker, found 0x{byte[0]:02X}")
    while byte == b"\xFF":
        byte = _read_exact(handle, 1, "JPEG marker")
    return byte[0]


def _read_jpeg(handle: BinaryIO) -> Dimensions:
    if _read_exact(handle, 2, "JPEG header") != b"\xFF\xD8":
        raise UnsupportedOrCorruptImage("missing JPEG start-of-image marker")

    while True:
        marker = _next_jpeg_marker(handle)
        if marker in _JPEG_STANDALONE_MARKERS:
            continue
        if marker in {_JPEG_EOI, _JPEG_SOS}:
            raise UnsupportedOrCorruptImage(
                f"JPEG marker 0x{marker:02X} reached before start-of-frame"
            )

        segment_length = struct.unpack(">H", _read_exact(handle, 2, "JPEG segment length"))[0]
        if segment_length < 2:
            raise UnsupportedOrCorruptImage(f"invalid JPEG segment length {segment_length}")
        payload = _read_exact(handle, segment_length - 2, f"JPEG segment 0x{marker:02X}")

        if marker in _JPEG_SOF_MARKERS:
            if len(payload) < 5:
                raise UnsupportedOrCorruptImage("JPEG start-of-frame segment too short")
            height, width = struct.unpack(">HH", payload[1:5])
            return _checked(width, height)


_READERS: dict[ImageFormat, Callable[[BinaryIO], Dimensions]] = {
    ImageFormat.BMP: _read_bmp,
    ImageFormat.PNG: _read_png,
    ImageFormat.JPEG: _read_jpeg,
}


def read_dimensions(path: Path, fmt: ImageFormat) -> Dimensions:
    """Read pixel width and height from the container header of ``path``.

    Only the bytes up to the dimension fields are consumed; pixel data is never
    decoded. Raises ``UnsupportedOrCorruptImage`` if the file does not match
    ``fmt`` or cannot be read.
    """
    reader = _READERS[fmt]
    try:
        with Path(path).open("rb") as handle:
            return reader(handle)
    except OSError as exc:
        raise UnsupportedOrCorruptImage(f"cannot read {path}: {exc}") from exc
