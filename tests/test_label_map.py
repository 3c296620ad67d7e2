from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from tfcsv.dataset.labels import load_label_map, parse_label_map
from tfcsv.errors import LabelMapError


class LabelMapTests(unittest.TestCase):
    def test_toml_groups_map_labels_to_classes(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "labels.toml"
            path.write_text(
                """
[[groups]]
class = "cat"
description = "domestic cats"
labels = ["tabby", "siamese"]

[[groups]]
class = "dog"
description = "dogs"
labels = ["beagle"]
""".strip(),
                encoding="utf-8",
            )

            classification = load_label_map(path)

            self.assertEqual(classification.class_names, ["cat", "dog"])
            self.assertEqual(classification.get_class("siamese"), "cat")
            self.assertEqual(classification.get_class("beagle"), "dog")
            self.assertIsNone(classification.get_class("parrot"))

    def test_yaml_and_json_are_accepted(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            yaml_path = Path(tmpdir) / "labels.yaml"
            yaml_path.write_text(
                "groups:\n  - class: bird\n    labels: [parrot, crow]\n",
                encoding="utf-8",
            )
            json_path = Path(tmpdir) / "labels.json"
            json_path.write_text(
                json.dumps({"groups": [{"class": "fish", "labels": ["cod"]}]}),
                encoding="utf-8",
            )

            self.assertEqual(load_label_map(yaml_path).get_class("crow"), "bird")
            self.assertEqual(load_label_map(json_path).get_class("cod"), "fish")

    def test_malformed_maps_raise(self) -> None:
        with self.assertRaises(LabelMapError):
            parse_label_map({})
        with self.assertRaises(LabelMapError):
            parse_label_map({"groups": [{"labels": ["a"]}]})
        with self.assertRaises(LabelMapError):
            parse_label_map({"groups": [{"class": "a", "labels": "a"}]})

    def test_missing_or_unsupported_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(LabelMapError):
                load_label_map(Path(tmpdir) / "missing.toml")

            ini_path = Path(tmpdir) / "labels.ini"
            ini_path.write_text("[groups]\n", encoding="utf-8")
            with self.assertRaises(LabelMapError):
                load_label_map(ini_path)


if __name__ == "__main__":
    unittest.main()
