from __future__ import annotations

import argparse
from pathlib import Path

from tfcsv.monitoring import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tfcsv",
        description="Convert a class-per-directory image tree into tensorflow.csv",
    )
    parser.add_argument(
        "root",
        nargs="?",
        help="Dataset root; each subdirectory name is used as the class label",
    )
    parser.add_argument(
        "--label-map",
        help="Optional TOML/YAML/JSON file grouping directory labels into classes",
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit structured JSON logs")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Log level",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress non-warning logs")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    level = "WARNING" if args.quiet and args.log_level in {"DEBUG", "INFO"} else args.log_level
    configure_logging(level=level, json_logs=args.json_logs)

    from tfcsv.commands.convert import run_convert

    return run_convert(args, Path.cwd())


if __name__ == "__main__":
    raise SystemExit(main())
