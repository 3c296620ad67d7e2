from __future__ import annotations

import io
import json
import logging
import unittest

from image_fixtures import reset_tfcsv_logging
from tfcsv.monitoring import configure_logging


class LoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        reset_tfcsv_logging()

    def test_json_logs_include_context_fields(self) -> None:
        stream = io.StringIO()
        configure_logging(level="INFO", json_logs=True, stream=stream)

        logging.getLogger("tfcsv.convert").warning(
            "skipping unreadable image",
            extra={"context": {"file": "cats/broken.png", "format": "png"}},
        )

        payload = json.loads(stream.getvalue().strip())
        self.assertEqual(payload["level"], "WARNING")
        self.assertEqual(payload["logger"], "tfcsv.convert")
        self.assertEqual(payload["file"], "cats/broken.png")
        self.assertEqual(payload["format"], "png")

    def test_level_filters_lower_records(self) -> None:
        stream = io.StringIO()
        configure_logging(level="WARNING", stream=stream)

        logging.getLogger("tfcsv.csv").info("wrote rows")
        logging.getLogger("tfcsv.csv").warning("disk nearly full")

        output = stream.getvalue()
        self.assertNotIn("wrote rows", output)
        self.assertIn("WARNING tfcsv.csv - disk nearly full", output)

    def test_reconfiguring_replaces_handler_and_leaves_root_alone(self) -> None:
        root_handlers = list(logging.getLogger().handlers)
        first = io.StringIO()
        second = io.StringIO()
        configure_logging(stream=first)
        logger = configure_logging(stream=second)

        logging.getLogger("tfcsv.walk").warning("only once")

        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(first.getvalue(), "")
        self.assertEqual(second.getvalue().count("only once"), 1)
        self.assertEqual(logging.getLogger().handlers, root_handlers)


if __name__ == "__main__":
    unittest.main()
