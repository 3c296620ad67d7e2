from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from tfcsv.errors import PathNotFound

_logger = logging.getLogger("tfcsv.walk")


def _sorted_entries(directory: Path) -> list[Path]:
    return sorted(directory.iterdir(), key=lambda p: p.name)


def _walk_entries(directory: Path, entries: list[Path]) -> Iterator[tuple[Path, str]]:
    for entry in entries:
        if entry.is_dir():
            try:
                children = _sorted_entries(entry)
            except OSError as exc:
                _logger.warning(
                    "skipping unreadable directory %s error=%s",
                    entry,
                    exc,
                    extra={"context": {"directory": ascii(str(entry))}},
                )
                continue
            yield from _walk_entries(entry, children)
        elif entry.is_file():
            yield entry, directory.name


def walk(root: Path | str) -> Iterator[tuple[Path, str]]:
    """Yield ``(file path, parent directory name)`` for every file under ``root``.

    The root is checked and listed up front so a bad path fails before iteration
    starts. Entries are visited depth-first in name order; a subdirectory that
    cannot be listed is logged and skipped. Files sitting directly in the root
    are labeled with the root directory's own name.
    """
    root_path = Path(root)
    if not root_path.exists():
        raise PathNotFound(f"Dataset root not found: {root_path}")
    if not root_path.is_dir():
        raise PathNotFound(f"Dataset root is not a directory: {root_path}")

    root_path = root_path.resolve()
    try:
        entries = _sorted_entries(root_path)
    except OSError as exc:
        raise PathNotFound(f"Dataset root is not readable: {root_path}: {exc}") from exc
    return _walk_entries(root_path, entries)
