from __future__ import annotations

from pathlib import Path

from tfcsv.types import ImageFormat

_SUFFIX_FORMATS = {
    ".jpg": ImageFormat.JPEG,
    ".jpeg": ImageFormat.JPEG,
    ".png": ImageFormat.PNG,
    ".bmp": ImageFormat.BMP,
}


def classify(path: Path | str) -> ImageFormat | None:
    """Return the image format implied by the file extension, or None to skip."""
    return _SUFFIX_FORMATS.get(Path(path).suffix.lower())
