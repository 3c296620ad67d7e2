from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from tfcsv.dataset.convert import OUTPUT_FILENAME, convert_directory
from tfcsv.dataset.labels import load_label_map
from tfcsv.errors import PathNotFound, TfcsvError


def run_convert(args: Any, cwd: Path) -> int:
    try:
        if not args.root:
            raise PathNotFound("Missing dataset root argument")

        label_map = load_label_map(args.label_map) if args.label_map else None
        summary = convert_directory(
            root=Path(args.root),
            output_path=cwd / OUTPUT_FILENAME,
            label_map=label_map,
        )
        print(json.dumps(summary, ensure_ascii=True, indent=2))
        return 0
    except TfcsvError as exc:
        print(f"tfcsv failed: {exc}", file=sys.stderr)
        return 2
    except Exception as exc:
        print(f"tfcsv failed: unexpected {type(exc).__name__}: {exc}", file=sys.stderr)
        return 2
