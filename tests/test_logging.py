"""Log timestamps are rendered in UTC to match the trailing Z in the date format."""

import logging
import unittest

from app.core.logging import LOG_DATEFMT, build_formatter


class TestLogFormatter(unittest.TestCase):
    def test_timestamps_are_utc(self) -> None:
        record = logging.LogRecord("app", logging.INFO, __file__, 1, "hello", None, None)
        record.created = 0.0
        formatter = build_formatter()
        self.assertEqual(formatter.formatTime(record, LOG_DATEFMT), "1970-01-01T00:00:00Z")

    def test_line_layout(self) -> None:
        record = logging.LogRecord("app.main", logging.WARNING, __file__, 1, "hi %s", ("x",), None)
        record.created = 0.0
        self.assertEqual(
            build_formatter().format(record), "1970-01-01T00:00:00Z WARNING app.main hi x"
        )
