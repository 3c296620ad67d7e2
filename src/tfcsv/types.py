from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ImageFormat(Enum):
    JPEG = "jpeg"
    PNG = "png"
    BMP = "bmp"


@dataclass(frozen=True)
class Dimensions:
    width: int
    height: int


@dataclass(frozen=True)
class ImageRecord:
    """One whole-image bounding box row of the training CSV."""

    filename: str
    width: int
    height: int
    class_label: str

    @property
    def xmin(self) -> int:
        return 0

    @property
    def ymin(self) -> int:
        return 0

    @property
    def xmax(self) -> int:
        return self.width

    @property
    def ymax(self) -> int:
        return self.height

    def as_row(self) -> list[str]:
        return [
            self.filename,
            str(self.width),
            str(self.height),
            self.class_label,
            str(self.xmin),
            str(self.ymin),
            str(self.xmax),
            str(self.ymax),
        ]


@dataclass
class ConversionStats:
    files_seen: int = 0
    skipped_unsupported: int = 0
    skipped_corrupt: int = 0
    skipped_unmapped: int = 0
    skipped_bad_name: int = 0
    records: int = 0
