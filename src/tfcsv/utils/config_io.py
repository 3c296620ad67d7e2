from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable


def _parse_toml(raw: str) -> Any:
    try:
        import tomllib
    except ImportError:  # pragma: no cover
        import tomli as tomllib  # type: ignore

    return tomllib.loads(raw)


def _parse_yaml(raw: str) -> Any:
    import yaml

    try:
        return yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid YAML: {exc}") from exc


_PARSERS: dict[str, Callable[[str], Any]] = {
    ".json": json.loads,
    ".toml": _parse_toml,
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
}


def load_mapping_file(path: str | Path) -> dict[str, Any]:
    """Parse a JSON, TOML or YAML file whose top level is a mapping.

    Raises ``FileNotFoundError`` for a missing file and ``ValueError`` for an
    unknown suffix, a parse error, or a non-mapping document.
    """
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"File not found: {p}")

    parser = _PARSERS.get(p.suffix.lower())
    if parser is None:
        raise ValueError(f"Unsupported file extension {p.suffix!r}; use .json, .toml, .yaml or .yml")

    loaded = parser(p.read_text(encoding="utf-8"))
    if not isinstance(loaded, dict):
        raise ValueError(f"Top level of {p} must be a mapping, got {type(loaded).__name__}")
    return loaded
