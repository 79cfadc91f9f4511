"""Tests for the JSON log formatter."""

import io
import json
import logging
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from utils.logging import JSONFormatter, setup_structured_logging


class TestJSONFormatter(unittest.TestCase):

    def test_extra_fields_are_merged(self):
        record = logging.LogRecord('services.quiz_service', logging.INFO, __file__, 1, "Quiz finished", None, None)
        record.total = 4
        record.word = 'Straße'

        data = json.loads(JSONFormatter().format(record))

        self.assertEqual(data['message'], 'Quiz finished')
        self.assertEqual(data['level'], 'INFO')
        self.assertEqual(data['logger'], 'services.quiz_service')
        self.assertEqual(data['total'], 4)
        self.assertEqual(data['word'], 'Straße')
        self.assertTrue(data['timestamp'].endswith('Z'))


class TestSetupStructuredLogging(unittest.TestCase):

    def setUp(self):
        root = logging.getLogger()
        self._handlers, self._level = root.handlers[:], root.level

    def tearDown(self):
        root = logging.getLogger()
        root.handlers, root.level = self._handlers, self._level

    @patch.dict("os.environ", {"LOG_LEVEL": "INFO"})
    def test_writes_json_lines_to_stream(self):
        stream = io.StringIO()
        setup_structured_logging(default_level="INFO", stream=stream)

        logging.getLogger('cli.main').info("hello", extra={"command": "quiz"})

        data = json.loads(stream.getvalue().strip())
        self.assertEqual(data['command'], 'quiz')


if __name__ == '__main__':
    unittest.main()
