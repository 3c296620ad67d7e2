from __future__ import annotations

import csv
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable

from tfcsv.errors import IOWriteError
from tfcsv.types import ImageRecord

CSV_HEADER = ("filename", "width", "height", "class", "xmin", "ymin", "xmax", "ymax")

_logger = logging.getLogger("tfcsv.csv")


def _target_mode(output_path: Path) -> int:
    try:
        return stat.S_IMODE(output_path.stat().st_mode)
    except FileNotFoundError:
        pass
    # os.umask can only be read by setting it.
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_records(records: Iterable[ImageRecord], output_path: Path | str) -> int:
    """Write ``records`` to ``output_path`` and return the number of data rows.

    Rows go to a temporary file beside the destination which is then moved over
    it, so a failed write leaves any previous file untouched. The result keeps
    the mode of the file it replaces, or gets the umask default for a new file.
    """
    output_path = Path(output_path)
    tmp_name: str | None = None
    count = 0
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            dir=str(output_path.parent),
        )
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(CSV_HEADER)
            for record in records:
                writer.writerow(record.as_row())
                count += 1
        os.chmod(tmp_name, _target_mode(output_path))
        os.replace(tmp_name, output_path)
        tmp_name = None
    except (OSError, UnicodeError) as exc:
        raise IOWriteError(f"Cannot write {output_path}: {exc}") from exc
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)

    _logger.info("wrote %d rows to %s", count, output_path)
    return count


def read_records(path: Path | str) -> list[ImageRecord]:
    """Parse a CSV produced by ``write_records`` back into records."""
    with Path(path).open("r", encoding="utf-8", newline="") as handle:
        reader = csv.reader(handle)
        header = next(reader, None)
        if header is None or tuple(header) != CSV_HEADER:
            raise ValueError(f"Unexpected CSV header in {path}: {header}")

        records: list[ImageRecord] = []
        for row in reader:
            if not row:
                continue
            if len(row) != len(CSV_HEADER):
                raise ValueError(f"CSV row must have {len(CSV_HEADER)} fields: {row}")
            records.append(
                ImageRecord(
                    filename=row[0],
                    width=int(row[1]),
                    height=int(row[2]),
                    class_label=row[3],
                )
            )
    return records
