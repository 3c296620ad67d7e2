from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from tfcsv.errors import LabelMapError
from tfcsv.utils.config_io import load_mapping_file


@dataclass
class LabelGroup:
    """Training class that collects several directory labels."""

    class_name: str
    description: str = ""
    labels: list[str] = field(default_factory=list)


@dataclass
class LabelClassification:
    groups: list[LabelGroup] = field(default_factory=list)

    def get_class(self, label: str) -> str | None:
        for group in self.groups:
            if label in group.labels:
                return group.class_name
        return None

    @property
    def class_names(self) -> list[str]:
        return [group.class_name for group in self.groups]


def _parse_group(raw: Any, index: int) -> LabelGroup:
    if not isinstance(raw, dict):
        raise LabelMapError(f"groups[{index}] must be a table/mapping")

    class_name = str(raw.get("class", "")).strip()
    if not class_name:
        raise LabelMapError(f"groups[{index}] is missing 'class'")

    labels = raw.get("labels", [])
    if not isinstance(labels, list):
        raise LabelMapError(f"groups[{index}].labels must be a list")

    return LabelGroup(
        class_name=class_name,
        description=str(raw.get("description", "")),
        labels=[str(item) for item in labels],
    )


def parse_label_map(payload: dict[str, Any]) -> LabelClassification:
    groups = payload.get("groups")
    if not isinstance(groups, list) or not groups:
        raise LabelMapError("label map requires a non-empty 'groups' list")
    return LabelClassification(groups=[_parse_group(raw, idx) for idx, raw in enumerate(groups)])


def load_label_map(path: str | Path) -> LabelClassification:
    """Load a label classification file (TOML, YAML or JSON).

    Expected shape::

        [[groups]]
        class = "cat"
        description = "domestic cats"
        labels = ["tabby", "siamese"]
    """
    try:
        payload = load_mapping_file(path)
    except (OSError, ValueError) as exc:
        raise LabelMapError(f"Cannot load label map {path}: {exc}") from exc
    return parse_label_map(payload)
