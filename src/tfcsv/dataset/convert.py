from __future__ import annotations

import logging
import time
from dataclasses import asdict
from pathlib import Path
from typing import Any

from tfcsv.dataset.csv_writer import write_records
from tfcsv.dataset.formats import classify
from tfcsv.dataset.headers import read_dimensions
from tfcsv.dataset.labels import LabelClassification
from tfcsv.dataset.walk import walk
from tfcsv.errors import UnsupportedOrCorruptImage
from tfcsv.types import ConversionStats, ImageRecord

OUTPUT_FILENAME = "tensorflow.csv"

_logger = logging.getLogger("tfcsv.convert")


def _utf8_encodable(text: str) -> bool:
    # Undecodable filesystem names arrive as lone surrogates.
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def collect_records(
    root: Path | str,
    label_map: LabelClassification | None = None,
) -> tuple[list[ImageRecord], ConversionStats]:
    """Walk ``root`` and build one record per readable image, in traversal order.

    Files with a supported extension but a bad header are logged and counted,
    never raised.
    """
    stats = ConversionStats()
    records: list[ImageRecord] = []

    for path, label in walk(root):
        stats.files_seen += 1

        fmt = classify(path)
        if fmt is None:
            stats.skipped_unsupported += 1
            _logger.debug("ignoring non-image file %s", path)
            continue

        if not (_utf8_encodable(path.name) and _utf8_encodable(label)):
            stats.skipped_bad_name += 1
            _logger.warning(
                "skipping file whose name is not valid UTF-8 file=%r label=%r",
                str(path),
                label,
                extra={"context": {"file": ascii(str(path))}},
            )
            continue

        class_label = label
        if label_map is not None:
            mapped = label_map.get_class(label)
            if mapped is None:
                stats.skipped_unmapped += 1
                _logger.info("skipping unmapped label=%s file=%s", label, path)
                continue
            class_label = mapped

        try:
            dims = read_dimensions(path, fmt)
        except UnsupportedOrCorruptImage as exc:
            stats.skipped_corrupt += 1
            _logger.warning(
                "skipping unreadable image file=%s format=%s error=%s",
                path,
                fmt.value,
                exc,
                extra={"context": {"file": str(path), "format": fmt.value}},
            )
            continue

        records.append(
            ImageRecord(
                filename=path.name,
                width=dims.width,
                height=dims.height,
                class_label=class_label,
            )
        )

    stats.records = len(records)
    return records, stats


def unique_classes(records: list[ImageRecord]) -> list[str]:
    return sorted({record.class_label for record in records})


def convert_directory(
    root: Path | str,
    output_path: Path | str = OUTPUT_FILENAME,
    label_map: LabelClassification | None = None,
) -> dict[str, Any]:
    """Scan ``root`` and write the whole-image box CSV to ``output_path``.

    Returns a summary with the record count, classes, skip counters and
    per-phase timings.
    """
    output_path = Path(output_path)

    started = time.monotonic()
    records, stats = collect_records(root, label_map=label_map)
    traversal_ms = (time.monotonic() - started) * 1000.0

    started = time.monotonic()
    written = write_records(records, output_path)
    export_ms = (time.monotonic() - started) * 1000.0

    classes = unique_classes(records)
    _logger.info(
        "converted root=%s records=%d classes=%d corrupt=%d",
        root,
        written,
        len(classes),
        stats.skipped_corrupt,
    )

    return {
        "output": str(output_path),
        "records": written,
        "classes": classes,
        "stats": asdict(stats),
        "timing_ms": {
            "traversal": round(traversal_ms, 3),
            "export": round(export_ms, 3),
        },
    }
